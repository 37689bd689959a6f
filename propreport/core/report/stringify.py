# propreport/core/report/stringify.py
"""
Value stringification with a local failure boundary.

render_value() never raises for an Exception coming out of str(); it
returns a RenderResult describing either the text or the failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


DEFAULT_NULL_TEXT = "null"
DEFAULT_FAILURE_SUFFIX = "[Rendering failed]"


@dataclass(frozen=True)
class RenderResult:
    """Closed outcome of one conversion: text, or failure with type name"""
    text: str
    type_name: str
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def type_name_of(value: Any, *, qualified: bool = False) -> str:
    if value is None:
        return DEFAULT_NULL_TEXT
    cls = type(value)
    if qualified:
        return f"{cls.__module__}.{cls.__qualname__}"
    return cls.__name__


def render_value(
    value: Any,
    *,
    null_text: str = DEFAULT_NULL_TEXT,
    failure_suffix: str = DEFAULT_FAILURE_SUFFIX,
    qualified_type_names: bool = False,
) -> RenderResult:
    """
    Stringify value.

    None renders as null_text. Any Exception raised by the conversion
    (including str() returning a non-string) becomes a failed result with
    text "<type-name> <failure_suffix>".
    """
    if value is None:
        return RenderResult(text=null_text, type_name=null_text)

    try:
        text = str(value)
    except Exception as e:
        type_name = type_name_of(value, qualified=qualified_type_names)
        return RenderResult(
            text=f"{type_name} {failure_suffix}",
            type_name=type_name,
            error=e,
        )

    return RenderResult(
        text=text,
        type_name=type_name_of(value, qualified=qualified_type_names),
    )
