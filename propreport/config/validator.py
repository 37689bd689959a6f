# propreport/config/validator.py
"""
Configuration Validator

Validates configuration for illegal/misleading combinations.
Returns structured issues with level (warn/error), path, message, hint.
"""

from dataclasses import dataclass
from typing import List, Literal

from .loader import ReportConfig


OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for CLI/logging.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "report.placeholder"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"{self.level.upper()} [{self.path}] {self.message}{hint_str}"


def validate_config(config: ReportConfig) -> List[ConfigIssue]:
    """
    Validate configuration.

    Returns:
        List of issues (warn/error level)
    """
    issues = []

    for name in ("reserved_name", "placeholder", "failure_suffix", "null_text"):
        value = getattr(config, name)
        if not isinstance(value, str) or not value:
            issues.append(ConfigIssue(
                level="error",
                path=f"report.{name}",
                message=f"{name} must be a non-empty string",
            ))

    if not isinstance(config.qualified_type_names, bool):
        issues.append(ConfigIssue(
            level="error",
            path="report.qualified_type_names",
            message="qualified_type_names must be true or false",
        ))

    if config.output_format not in OUTPUT_FORMATS:
        issues.append(ConfigIssue(
            level="error",
            path="report.output_format",
            message=f"unknown output_format '{config.output_format}'",
            hint=f"Use one of: {', '.join(OUTPUT_FORMATS)}",
        ))

    if config.title is not None and config.output_format == "json":
        issues.append(ConfigIssue(
            level="warn",
            path="report.title",
            message="title has no effect with output_format='json'",
        ))

    return issues
