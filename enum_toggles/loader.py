"""Toggle state file parsing.

File format, one toggle per line:

    # comment
    1 FeatureA
    0 FeatureB

Each line is ``<state> <name>`` separated by whitespace, where ``state`` is
``0`` (off) or ``1`` (on). Blank lines and ``#`` comments are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Tuple, Union

from enum_toggles.errors import LineParseError, ToggleFileError

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"
STATE_VALUES = {"0": False, "1": True}


@dataclass(frozen=True)
class ParsedLine:
    """A well-formed toggle line."""
    state: bool
    name: str


@dataclass(frozen=True)
class LineIssue:
    """A line skipped during a load."""
    line_number: int
    line: str
    reason: str


@dataclass
class LoadReport:
    """Outcome of loading toggle states."""
    source: str
    applied: int = 0
    issues: List[LineIssue] = field(default_factory=list)

    @property
    def skipped(self) -> int:
        return len(self.issues)

    @property
    def ok(self) -> bool:
        return not self.issues

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "applied": self.applied,
            "skipped": self.skipped,
            "issues": [
                {"line_number": i.line_number, "line": i.line, "reason": i.reason}
                for i in self.issues
            ],
        }


def parse_line(line: str) -> ParsedLine:
    """Parse a single ``<state> <name>`` line.

    Raises:
        LineParseError: wrong token count or a state other than ``0``/``1``
    """
    parts = line.split()
    if len(parts) != 2:
        raise LineParseError(line, f"expected 2 fields, got {len(parts)}")

    raw_state, name = parts
    # Exact tokens; "+1", "01" and non-ASCII digits are malformed
    if raw_state not in STATE_VALUES:
        raise LineParseError(line, f"state must be 0 or 1, got {raw_state}")

    return ParsedLine(state=STATE_VALUES[raw_state], name=name)


def iter_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield ``(line_number, line)`` for lines carrying content.

    Lines end at LF only; a trailing CR is dropped. Line numbers are
    1-based and count skipped lines too.
    """
    for line_number, line in enumerate(text.split("\n"), start=1):
        if line.endswith("\r"):
            line = line[:-1]
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue
        yield line_number, line


def read_text(path: Union[str, Path]) -> str:
    """Read a toggle file as UTF-8 text.

    Raises:
        ToggleFileError: the file is missing, unreadable or not UTF-8
    """
    file_path = Path(path)
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(
            f"Failed to read toggle file {file_path}: {e}",
            extra={"file_path": str(file_path)},
        )
        raise ToggleFileError(str(file_path), reason=str(e)) from e


__all__ = [
    "COMMENT_PREFIX",
    "ParsedLine",
    "LineIssue",
    "LoadReport",
    "parse_line",
    "iter_lines",
    "read_text",
]
