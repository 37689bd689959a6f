# propreport/core/report/builder.py
"""
ReportModelBuilder - property source -> ReportModel.

Pure computation: reads the source once, stringifies every value inside a
per-entry failure boundary and returns a sorted, immutable model.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from propreport.config.loader import ReportConfig

from .interfaces import PropertySource
from .model import ModelDraft, RenderFailure, ReportModel
from .stringify import render_value

logger = logging.getLogger(__name__)


class ReportModelBuilder:
    """
    Builds report models.

    The reserved name (default "properties") stands for the property
    collection itself and always renders as the placeholder, with or
    without a filter.
    """

    def __init__(self, config: Optional[ReportConfig] = None):
        self.config = config or ReportConfig.default()

    def build(self, source: PropertySource, property_name: Optional[str] = None) -> ReportModel:
        draft = ModelDraft()

        if property_name is not None:
            if property_name == self.config.reserved_name:
                draft.put(property_name, self.config.placeholder)
            else:
                self._put(draft, property_name, source.get(property_name))
        else:
            for name, value in source.entries():
                if name == self.config.reserved_name:
                    draft.put(name, self.config.placeholder)
                else:
                    self._put(draft, name, value)

        model = draft.freeze()
        logger.debug(
            "Built property report: %d entries, %d render failures",
            len(model.entries),
            len(model.failures),
        )
        return model

    def _put(self, draft: ModelDraft, name: str, value: Any) -> None:
        result = render_value(
            value,
            null_text=self.config.null_text,
            failure_suffix=self.config.failure_suffix,
            qualified_type_names=self.config.qualified_type_names,
        )
        draft.put(name, result.text)
        if not result.ok:
            draft.record_failure(RenderFailure(name=name, type_name=result.type_name, cause=result.error))
