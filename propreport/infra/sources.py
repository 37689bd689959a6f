# propreport/infra/sources.py
"""
Concrete property sources.

- MappingPropertySource: any in-memory mapping
- YamlPropertySource: top-level mapping of a YAML file
- EnvironPropertySource: process environment
- ChainPropertySource: several sources, later ones override

Mapping-backed sources expose the collection itself under the reserved
name, the way a build project exposes its own properties map.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

import yaml

from propreport.config.loader import ALL_PROPERTIES
from propreport.core.errors import ReportError


class MappingPropertySource:
    """Property source over an in-memory mapping"""

    def __init__(
        self,
        mapping: Mapping[str, Any],
        *,
        include_self: bool = True,
        reserved_name: str = ALL_PROPERTIES,
    ):
        self._mapping = mapping
        self.include_self = include_self
        self.reserved_name = reserved_name

    def entries(self) -> List[Tuple[str, Any]]:
        items = [(str(name), value) for name, value in self._mapping.items()]
        if self.include_self and self.reserved_name not in self._mapping:
            items.append((self.reserved_name, self._mapping))
        return items

    def get(self, name: str) -> Any:
        if name in self._mapping:
            return self._mapping[name]
        if self.include_self and name == self.reserved_name:
            return self._mapping
        return None

    def __len__(self) -> int:
        return len(self.entries())


class YamlPropertySource(MappingPropertySource):
    """Properties read from the top-level mapping of a YAML document"""

    def __init__(self, mapping: Mapping[str, Any], *, path: Optional[Path] = None, **kwargs: Any):
        super().__init__(mapping, **kwargs)
        self.path = path

    @classmethod
    def from_file(cls, path: Union[str, Path], **kwargs: Any) -> "YamlPropertySource":
        """
        Load a property file.

        Raises:
            ReportError: SOURCE_NOT_FOUND if the file does not exist,
                SOURCE_INVALID if it is not YAML or not a mapping
        """
        path = Path(path)
        if not path.is_file():
            raise ReportError.source_not_found(path)

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ReportError.source_invalid(
                f"Property file is not valid YAML: {path}",
                details={"path": str(path)},
                cause=e,
            ) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ReportError.source_invalid(
                f"Property file must contain a mapping, got {type(data).__name__}: {path}",
                details={"path": str(path)},
            )
        return cls({str(k): v for k, v in data.items()}, path=path, **kwargs)


class EnvironPropertySource(MappingPropertySource):
    """Environment variables, optionally limited to a name prefix"""

    def __init__(self, prefix: str = "", environ: Optional[Mapping[str, str]] = None, **kwargs: Any):
        environ = os.environ if environ is None else environ
        self.prefix = prefix
        selected = {k: v for k, v in environ.items() if k.startswith(prefix)}
        super().__init__(selected, **kwargs)


class ChainPropertySource:
    """
    Several sources seen as one.

    Names keep the position of their first appearance; values come from
    the last source that defines them, None included, so get() agrees
    with entries().
    """

    def __init__(self, *sources: Any):
        self.sources = list(sources)

    def entries(self) -> List[Tuple[str, Any]]:
        merged: Dict[str, Any] = {}
        for source in self.sources:
            for name, value in source.entries():
                merged[name] = value
        return list(merged.items())

    def get(self, name: str) -> Any:
        return dict(self.entries()).get(name)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.sources)
