# propreport/config/__init__.py
"""
propreport Configuration

YAML is input parameters, code has defaults (YAML can be deleted).
"""

from .loader import ReportConfig, load_config, DEFAULT_CONFIG_PATH
from .validator import validate_config, ConfigIssue, OUTPUT_FORMATS

__all__ = [
    "ReportConfig",
    "load_config",
    "DEFAULT_CONFIG_PATH",
    "validate_config",
    "ConfigIssue",
    "OUTPUT_FORMATS",
]
