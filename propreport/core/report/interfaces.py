# propreport/core/report/interfaces.py
"""
Report layer abstract interfaces

Narrow capabilities the report core calls through. Concrete sources,
renderers and diagnostics live in propreport.infra so core/ stays free of IO.
"""

from __future__ import annotations

from typing import Any, Iterable, Protocol, Tuple, runtime_checkable


@runtime_checkable
class PropertySource(Protocol):
    """
    Ordered key -> value lookup supplied by the host environment.

    Values may be of any type, including None and a value standing for the
    whole collection (exposed under the reserved name).
    """

    def entries(self) -> Iterable[Tuple[str, Any]]:
        """Snapshot of (name, value) pairs in source order"""
        ...

    def get(self, name: str) -> Any:
        """Value for name, None when missing"""
        ...


@runtime_checkable
class OutputSink(Protocol):
    """
    Line writer for report entries.

    Formatting (header, indentation, encoding) is the sink's business.
    """

    def start(self) -> None:
        ...

    def add_property(self, name: str, value: str) -> None:
        ...

    def complete(self) -> None:
        ...


@runtime_checkable
class DiagnosticsSink(Protocol):
    """
    Structured warning events.

    A logging.Logger satisfies this interface.
    """

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        ...
