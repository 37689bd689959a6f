# propreport/infra/diagnostics.py
"""
Diagnostics sinks and logging setup.

A plain logging.Logger is the default diagnostics sink. CollectingDiagnostics
keeps the structured events as well, for callers that want to inspect or
re-emit them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

REPORT_LOGGER = "propreport.report"

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class DiagnosticEvent:
    """One warning as received: template, arguments and attached exception"""
    template: str
    args: Tuple[Any, ...]
    cause: Optional[BaseException] = None

    @property
    def message(self) -> str:
        return self.template % self.args if self.args else self.template


class CollectingDiagnostics:
    """
    Records warning events; forwards them to a logger when one is given.
    """

    def __init__(self, forward_to: Optional[logging.Logger] = None):
        self.events: List[DiagnosticEvent] = []
        self.forward_to = forward_to

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        exc_info = kwargs.get("exc_info")
        cause = exc_info if isinstance(exc_info, BaseException) else None
        self.events.append(DiagnosticEvent(template=msg, args=tuple(args), cause=cause))
        if self.forward_to is not None:
            self.forward_to.warning(msg, *args, **kwargs)

    def __len__(self) -> int:
        return len(self.events)


def get_report_logger() -> logging.Logger:
    return logging.getLogger(REPORT_LOGGER)


def configure_logging(verbose: bool = False) -> None:
    """Basic stderr logging for the command line"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
