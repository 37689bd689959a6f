# propreport/core/task.py
"""
PropertyReportTask - one property report request.

    >>> from propreport.core.task import PropertyReportTask
    >>> from propreport.infra.sources import MappingPropertySource
    >>> task = PropertyReportTask(MappingPropertySource({"version": "1.0"}))
    >>> model = task.run()

The model is computed at most once per task instance, however many times
it is requested.
"""

from __future__ import annotations

import logging
from typing import Optional

from propreport.config.loader import ALL_PROPERTIES, PLACEHOLDER, ReportConfig

from .report.builder import ReportModelBuilder
from .report.cache import Cached
from .report.emitter import ReportEmitter
from .report.interfaces import DiagnosticsSink, OutputSink, PropertySource
from .report.model import ReportModel

logger = logging.getLogger(__name__)

__all__ = ["PropertyReportTask", "ALL_PROPERTIES", "PLACEHOLDER"]


class PropertyReportTask:
    """
    Displays the properties of a source.

    Args:
        source: where property values come from
        property_name: report only this property (None = all)
        renderer: output sink (default: config.output_format on stdout)
        diagnostics: warning sink (default: module logger)
        config: report configuration (default: code defaults)
    """

    def __init__(
        self,
        source: PropertySource,
        property_name: Optional[str] = None,
        *,
        renderer: Optional[OutputSink] = None,
        diagnostics: Optional[DiagnosticsSink] = None,
        config: Optional[ReportConfig] = None,
    ):
        self.source = source
        self.config = config or ReportConfig.default()
        self.diagnostics = diagnostics if diagnostics is not None else logger
        self._property_name = property_name
        self._renderer = renderer
        self._builder = ReportModelBuilder(self.config)
        self._emitter = ReportEmitter()
        self._model: Cached[ReportModel] = Cached.of(self._compute_model)

    @property
    def property_name(self) -> Optional[str]:
        return self._property_name

    @property_name.setter
    def property_name(self, name: Optional[str]) -> None:
        if self._model.is_computed:
            raise RuntimeError("property_name cannot change after the report model was computed")
        self._property_name = name

    @property
    def renderer(self) -> OutputSink:
        if self._renderer is None:
            from propreport.infra.renderers import create_renderer
            self._renderer = create_renderer(self.config.output_format, title=self.config.title)
        return self._renderer

    @renderer.setter
    def renderer(self, renderer: OutputSink) -> None:
        self._renderer = renderer

    @property
    def model(self) -> ReportModel:
        return self._model.get()

    def _compute_model(self) -> ReportModel:
        return self._builder.build(self.source, self._property_name)

    def run(self) -> ReportModel:
        """Emit warnings for render failures, then the sorted report lines"""
        model = self.model
        self._emitter.emit(model, self.renderer, self.diagnostics)
        return model
