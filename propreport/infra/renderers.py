# propreport/infra/renderers.py
"""
Renderers for property reports

Renderers are OutputSinks:
- Text: "name: value" lines, optional header block (default, stable)
- Json: one JSON object name -> value (for CI/tools)

Write errors are not caught; they reach whoever runs the report.
"""

from __future__ import annotations

import json
import sys
from typing import Dict, Optional, TextIO

RULE = "-" * 60


class TextReportRenderer:
    """Plain text renderer"""

    def __init__(self, stream: Optional[TextIO] = None, header: Optional[str] = None):
        self._stream = stream
        self.header = header

    @property
    def stream(self) -> TextIO:
        # Resolved late so redirected stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def start(self) -> None:
        if self.header:
            self.stream.write(f"\n{RULE}\n{self.header}\n{RULE}\n\n")

    def add_property(self, name: str, value: str) -> None:
        self.stream.write(f"{name}: {value}\n")

    def complete(self) -> None:
        self.stream.flush()


class JsonReportRenderer:
    """JSON renderer; the object is written once, on complete()"""

    def __init__(self, stream: Optional[TextIO] = None, indent: Optional[int] = 2):
        self._stream = stream
        self.indent = indent
        self._properties: Dict[str, str] = {}

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def start(self) -> None:
        self._properties = {}

    def add_property(self, name: str, value: str) -> None:
        self._properties[name] = value

    def complete(self) -> None:
        self.stream.write(json.dumps(self._properties, indent=self.indent, ensure_ascii=False))
        self.stream.write("\n")
        self.stream.flush()


def create_renderer(output_format: str, stream: Optional[TextIO] = None, *, title: Optional[str] = None):
    """Renderer for a configured output format"""
    if output_format == "json":
        return JsonReportRenderer(stream)
    if output_format == "text":
        return TextReportRenderer(stream, header=title)
    raise ValueError(f"unknown output format: {output_format}")
