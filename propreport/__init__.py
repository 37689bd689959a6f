# propreport/__init__.py
"""
propreport - sorted, fault-tolerant property reports

Turns a set of named, arbitrarily-typed values into a sorted text report.
A value whose str() raises does not abort the report: it is shown as
"<type-name> [Rendering failed]" and a warning is logged.

Basic usage:

    >>> from propreport import PropertyReportTask, MappingPropertySource
    >>> task = PropertyReportTask(MappingPropertySource({"b": 1, "a": "x"}))
    >>> model = task.run()
    a: x
    b: 1
    properties: {...}

Single property:

    >>> PropertyReportTask(MappingPropertySource({"b": 1}), "b").run().entries["b"]
    b: 1
    '1'

Building without emitting:

    >>> from propreport import ReportModelBuilder
    >>> model = ReportModelBuilder().build(MappingPropertySource({"a": None}))
    >>> model.entries["a"]
    'null'
"""

__version__ = "0.1.0"

from .config import ReportConfig, load_config
from .core.errors import ReportError, codes
from .core.report import (
    Cached,
    PropertyEntry,
    RenderFailure,
    ReportEmitter,
    ReportModel,
    ReportModelBuilder,
)
from .core.task import ALL_PROPERTIES, PLACEHOLDER, PropertyReportTask
from .infra import (
    ChainPropertySource,
    CollectingDiagnostics,
    EnvironPropertySource,
    JsonReportRenderer,
    MappingPropertySource,
    TextReportRenderer,
    YamlPropertySource,
)

__all__ = [
    "__version__",
    # Task
    "PropertyReportTask",
    "ALL_PROPERTIES",
    "PLACEHOLDER",
    # Model
    "ReportModel",
    "PropertyEntry",
    "RenderFailure",
    "ReportModelBuilder",
    "ReportEmitter",
    "Cached",
    # Errors
    "ReportError",
    "codes",
    # Config
    "ReportConfig",
    "load_config",
    # Infra
    "MappingPropertySource",
    "YamlPropertySource",
    "EnvironPropertySource",
    "ChainPropertySource",
    "TextReportRenderer",
    "JsonReportRenderer",
    "CollectingDiagnostics",
]
