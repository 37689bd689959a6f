# propreport/core/errors/__init__.py
"""
Core error types for propreport.

Only invocation-level faults are raised. Per-property render failures are
recorded on the report model and never leave the builder.

No side effects on import.
"""

from . import codes
from .exceptions import ReportError

__all__ = [
    "codes",
    "ReportError",
]
