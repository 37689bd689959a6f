# propreport/infra/__init__.py
"""
Infrastructure: concrete property sources, renderers and diagnostics.
"""

from .sources import (
    MappingPropertySource,
    YamlPropertySource,
    EnvironPropertySource,
    ChainPropertySource,
)
from .renderers import TextReportRenderer, JsonReportRenderer, create_renderer
from .diagnostics import (
    CollectingDiagnostics,
    DiagnosticEvent,
    configure_logging,
    get_report_logger,
)

__all__ = [
    "MappingPropertySource",
    "YamlPropertySource",
    "EnvironPropertySource",
    "ChainPropertySource",
    "TextReportRenderer",
    "JsonReportRenderer",
    "create_renderer",
    "CollectingDiagnostics",
    "DiagnosticEvent",
    "configure_logging",
    "get_report_logger",
]
