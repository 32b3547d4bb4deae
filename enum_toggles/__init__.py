"""Enum toggles.

Maps a closed enumeration of toggle names to boolean states:
- Bit-packed storage, O(1) access by ordinal, variant or name
- Initial state loaded from a ``<state> <name>`` text file
- Init-once shared instance for application startup
"""

from enum_toggles.bitset import BitSet
from enum_toggles.errors import (
    ErrorCode,
    LineParseError,
    ToggleError,
    ToggleFileError,
    ToggleIndexError,
    UnknownToggleError,
)
from enum_toggles.kind import ToggleKind
from enum_toggles.loader import LineIssue, LoadReport, ParsedLine, parse_line
from enum_toggles.toggles import ToggleSet
from enum_toggles.shared import SharedToggles, build_toggles

__version__ = "1.1.1"

__all__ = [
    # Storage
    "BitSet",
    "ToggleKind",
    "ToggleSet",
    # Loading
    "LineIssue",
    "LoadReport",
    "ParsedLine",
    "parse_line",
    # Startup
    "SharedToggles",
    "build_toggles",
    # Errors
    "ErrorCode",
    "ToggleError",
    "ToggleIndexError",
    "UnknownToggleError",
    "ToggleFileError",
    "LineParseError",
]
