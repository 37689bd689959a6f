# propreport/core/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from . import codes


def _safe_str(x: Any) -> str:
    try:
        return str(x)
    except Exception:
        return "<unstringifiable>"


def _normalize_error_code(code: Any) -> str:
    """
    Keep error_code stable and finite.
    Unknown codes are downgraded so exit-code mapping never sees surprises.
    """
    c = _safe_str(code or codes.UNKNOWN).strip() or codes.UNKNOWN
    if c in codes.KNOWN_CODES:
        return c
    return codes.UNKNOWN


@dataclass
class ReportError(Exception):
    """
    The one public exception type for invocation-level faults.
    """
    message: str
    error_code: str = codes.UNKNOWN
    phase: str = "unknown"              # source / config / emit
    details: Dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = None

    def __post_init__(self) -> None:
        self.error_code = _normalize_error_code(self.error_code)
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    @property
    def is_source_error(self) -> bool:
        return self.error_code in codes.SOURCE_CODES

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "phase": self.phase,
            "details": self.details,
        }

    # -------- factories --------

    @classmethod
    def source_not_found(cls, path: Any) -> "ReportError":
        return cls(
            message=f"Property source not found: {_safe_str(path)}",
            error_code=codes.SOURCE_NOT_FOUND,
            phase="source",
            details={"path": _safe_str(path)},
        )

    @classmethod
    def source_invalid(
        cls,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> "ReportError":
        return cls(
            message=message,
            error_code=codes.SOURCE_INVALID,
            phase="source",
            details=details or {},
            cause=cause,
        )

    @classmethod
    def config_invalid(
        cls,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> "ReportError":
        return cls(
            message=message,
            error_code=codes.CONFIG_INVALID,
            phase="config",
            details=details or {},
            cause=cause,
        )

    @classmethod
    def sink_failed(cls, message: str, *, cause: Optional[BaseException] = None) -> "ReportError":
        return cls(
            message=message,
            error_code=codes.SINK_FAILED,
            phase="emit",
            cause=cause,
        )
