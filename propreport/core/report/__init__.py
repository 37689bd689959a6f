# propreport/core/report/__init__.py
from .interfaces import PropertySource, OutputSink, DiagnosticsSink
from .model import PropertyEntry, RenderFailure, ReportModel, ModelDraft
from .stringify import RenderResult, render_value, type_name_of
from .builder import ReportModelBuilder
from .cache import Cached
from .emitter import ReportEmitter, RENDER_WARNING

__all__ = [
    # Interfaces
    "PropertySource",
    "OutputSink",
    "DiagnosticsSink",
    # Model
    "PropertyEntry",
    "RenderFailure",
    "ReportModel",
    "ModelDraft",
    # Stringification
    "RenderResult",
    "render_value",
    "type_name_of",
    # Pipeline
    "ReportModelBuilder",
    "Cached",
    "ReportEmitter",
    "RENDER_WARNING",
]
