# propreport/core/report/emitter.py
"""
ReportEmitter - ReportModel -> diagnostics + sink lines.

All warnings go out before the first report line. Sink and diagnostics
errors are not handled here.
"""

from __future__ import annotations

from .interfaces import DiagnosticsSink, OutputSink
from .model import ReportModel


RENDER_WARNING = "Rendering of the property '%s' with value type '%s' failed with exception"


class ReportEmitter:

    def emit(self, model: ReportModel, sink: OutputSink, diagnostics: DiagnosticsSink) -> None:
        for failure in model.failures:
            diagnostics.warning(
                RENDER_WARNING,
                failure.name,
                failure.type_name,
                exc_info=failure.cause,
            )

        sink.start()
        for entry in model:
            sink.add_property(entry.name, entry.value)
        sink.complete()
