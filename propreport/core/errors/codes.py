# propreport/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical error codes (stable public contract) ----
# generic
UNKNOWN: Final[str] = "UNKNOWN"

# source
SOURCE_NOT_FOUND: Final[str] = "SOURCE_NOT_FOUND"
SOURCE_INVALID: Final[str] = "SOURCE_INVALID"

# config
CONFIG_INVALID: Final[str] = "CONFIG_INVALID"

# output
SINK_FAILED: Final[str] = "SINK_FAILED"


# ---- semantic groups (internal helpers) ----

SOURCE_CODES: Final[set[str]] = {
    SOURCE_NOT_FOUND,
    SOURCE_INVALID,
}

KNOWN_CODES: Final[set[str]] = {
    UNKNOWN,
    SOURCE_NOT_FOUND,
    SOURCE_INVALID,
    CONFIG_INVALID,
    SINK_FAILED,
}
