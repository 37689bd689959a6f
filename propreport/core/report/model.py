# propreport/core/report/model.py
"""
Report model - immutable snapshot of rendered properties.

A ReportModel is computed once per report request and thrown away after
it has been emitted. Entries are always sorted by name; failures keep the
order in which they were encountered.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Tuple


@dataclass(frozen=True)
class PropertyEntry:
    """One rendered property"""
    name: str
    value: str


@dataclass(frozen=True)
class RenderFailure:
    """
    A caught failure while stringifying one property value.

    cause is the exception instance itself so diagnostics can attach
    the traceback.
    """
    name: str
    type_name: str
    cause: BaseException

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type_name": self.type_name,
            "error": f"{type(self.cause).__name__}: {self.cause}",
        }


@dataclass(frozen=True)
class ReportModel:
    """
    Sorted name -> rendered value mapping plus recorded render failures.

    Every failed name is also present in entries (with its fallback text),
    so len(entries) is the number of properties considered.
    """
    entries: Mapping[str, str] = field(default_factory=dict)
    failures: Tuple[RenderFailure, ...] = ()

    def __post_init__(self) -> None:
        ordered = {name: self.entries[name] for name in sorted(self.entries)}
        object.__setattr__(self, "entries", MappingProxyType(ordered))
        object.__setattr__(self, "failures", tuple(self.failures))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[PropertyEntry]:
        for name, value in self.entries.items():
            yield PropertyEntry(name=name, value=value)

    @property
    def failed_names(self) -> List[str]:
        return [f.name for f in self.failures]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for serialization"""
        return {
            "entries": dict(self.entries),
            "failures": [f.to_dict() for f in self.failures],
        }


class ModelDraft:
    """
    Mutable accumulator used while building; frozen into a ReportModel.

    Later puts for the same name replace earlier ones, together with any
    failure recorded for the replaced value.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, str] = {}
        self._failures: List[RenderFailure] = []

    def put(self, name: str, text: str) -> None:
        if name in self._entries:
            self._failures = [f for f in self._failures if f.name != name]
        self._entries[name] = text

    def record_failure(self, failure: RenderFailure) -> None:
        self._failures.append(failure)

    def freeze(self) -> ReportModel:
        return ReportModel(entries=self._entries, failures=tuple(self._failures))
