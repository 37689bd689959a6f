# propreport/config/loader.py
"""
Configuration Loader

Loads report configuration from YAML with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- System works without YAML
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from propreport.core.errors import ReportError


DEFAULT_CONFIG_PATH = Path.home() / ".propreport" / "config.yml"

# Name under which a source exposes the whole collection
ALL_PROPERTIES = "properties"
PLACEHOLDER = "{...}"


@dataclass(frozen=True)
class ReportConfig:
    """
    Report configuration.

    All fields have code defaults - YAML is optional.
    """
    reserved_name: str = ALL_PROPERTIES
    placeholder: str = PLACEHOLDER
    failure_suffix: str = "[Rendering failed]"
    null_text: str = "null"
    qualified_type_names: bool = False
    output_format: str = "text"
    title: Optional[str] = None

    @classmethod
    def default(cls) -> "ReportConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "ReportConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML file. If None, tries
                ~/.propreport/config.yml and falls back to defaults.

        Returns:
            ReportConfig instance (always has code defaults as fallback)

        Raises:
            ReportError: explicit path missing or unreadable YAML
        """
        config = cls.default()

        yaml_data = _load_yaml(config_path)
        if not yaml_data:
            return config

        section = yaml_data.get("report", yaml_data)
        if not isinstance(section, dict):
            raise ReportError.config_invalid(
                "'report' section must be a mapping",
                details={"path": str(config_path)},
            )

        # Unknown keys are ignored
        known = {f.name for f in fields(cls)}
        overrides = {k: v for k, v in section.items() if k in known}
        return replace(config, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {"report": {f.name: getattr(self, f.name) for f in fields(self)}}


def _load_yaml(config_path: Optional[Path] = None) -> Optional[Dict[str, Any]]:
    """Load YAML file; a missing default file is not an error"""
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise ReportError.config_invalid(
                f"Config file not found: {path}",
                details={"path": str(path)},
            )
    else:
        path = DEFAULT_CONFIG_PATH
        if not path.exists():
            return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ReportError.config_invalid(
            f"Config file is not valid YAML: {path}",
            details={"path": str(path)},
            cause=e,
        ) from e

    if data is None:
        return None
    if not isinstance(data, dict):
        raise ReportError.config_invalid(
            f"Config file must contain a mapping: {path}",
            details={"path": str(path)},
        )
    return data


def load_config(config_path: Optional[Path] = None) -> ReportConfig:
    """
    Load and validate configuration.

    Raises ReportError when validation reports an error-level issue;
    warn-level issues are left to the caller.
    """
    from .validator import validate_config

    config = ReportConfig.from_yaml(config_path)
    errors = [issue for issue in validate_config(config) if issue.level == "error"]
    if errors:
        raise ReportError.config_invalid(
            "; ".join(f"[{issue.path}] {issue.message}" for issue in errors),
            details={"issues": [issue.path for issue in errors]},
        )
    return config
