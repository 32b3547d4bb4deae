"""Toggle container.

Stores the boolean state of every toggle of a kind in a bitset and resolves
toggles by ordinal, by variant or by name.

Example:

    class MyToggle(Enum):
        FeatureA = auto()
        FeatureB = auto()

    toggles = ToggleSet(MyToggle)
    toggles.set_enum(MyToggle.FeatureA, True)
    toggles.set_by_name("FeatureB", True)
    toggles.load_from_file("toggles.txt")
    print(toggles)
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Tuple, Type, Union

from enum_toggles.bitset import BitSet
from enum_toggles.errors import LineParseError, UnknownToggleError
from enum_toggles.kind import ToggleKind
from enum_toggles.loader import LineIssue, LoadReport, iter_lines, parse_line, read_text

logger = logging.getLogger(__name__)

KindLike = Union[ToggleKind, Type[Enum]]


class ToggleSet:
    """Boolean state for each toggle of a kind, all off by default."""

    def __init__(self, kind: KindLike):
        self._kind = ToggleKind.coerce(kind)
        self._values = BitSet(len(self._kind))
        self._index: Dict[str, int] = {name: ordinal for ordinal, name in self._kind}

    @classmethod
    def new(cls, kind: KindLike) -> "ToggleSet":
        """Create a set with every toggle off."""
        return cls(kind)

    @property
    def kind(self) -> ToggleKind:
        return self._kind

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._kind.names)

    def __contains__(self, item: Any) -> bool:
        if isinstance(item, str) and item in self._index:
            return True
        return self._kind.has_variant(item)

    def __getitem__(self, index: int) -> bool:
        return self.get(index)

    def __setitem__(self, index: int, value: bool) -> None:
        self.set(index, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ToggleSet):
            return NotImplemented
        return self._kind == other._kind and self._values == other._values

    # Index access

    def get(self, index: int) -> bool:
        """Get a toggle value by ordinal.

        Raises:
            ToggleIndexError: index outside ``0..len-1``
        """
        return self._values[index]

    def set(self, index: int, value: bool) -> None:
        """Set a toggle value by ordinal.

        Raises:
            ToggleIndexError: index outside ``0..len-1``
        """
        self._values[index] = bool(value)

    # Variant access

    def get_enum(self, variant: Any) -> bool:
        return self.get(self._kind.ordinal_of(variant))

    def set_enum(self, variant: Any, value: bool) -> None:
        self.set(self._kind.ordinal_of(variant), value)

    # Name access

    def index_of(self, name: str) -> int:
        """Resolve a display name to its ordinal (exact, case-sensitive).

        Raises:
            UnknownToggleError: name is not part of the kind
        """
        try:
            return self._index[name]
        except (KeyError, TypeError):
            raise UnknownToggleError(name) from None

    def name_of(self, index: int) -> str:
        return self._kind.name_of(index)

    def get_by_name(self, name: str) -> bool:
        return self.get(self.index_of(name))

    def set_by_name(self, name: str, value: bool) -> None:
        self.set(self.index_of(name), value)

    # Bulk operations

    def set_all(self, values: Mapping[str, bool]) -> None:
        """Reset every toggle, then apply ``values`` by name.

        Keys that are not toggle names are logged and ignored.
        """
        self._values.fill(False)
        for name, value in values.items():
            ordinal = self._index.get(name)
            if ordinal is None:
                logger.warning(
                    f"Ignoring unknown toggle: {name}",
                    extra={"toggle_name": name},
                )
                continue
            self.set(ordinal, value)

    def clear(self) -> None:
        """Turn every toggle off."""
        self._values.fill(False)

    def load_from_string(self, text: str, source: str = "<string>") -> LoadReport:
        """Apply ``<state> <name>`` lines from ``text``.

        Malformed lines and unknown names are skipped with a warning; they
        never abort the load.
        """
        report = LoadReport(source=source)
        for line_number, line in iter_lines(text):
            try:
                parsed = parse_line(line)
            except LineParseError as e:
                self._skip(report, line_number, line, e.reason)
                continue

            ordinal = self._index.get(parsed.name)
            if ordinal is None:
                self._skip(report, line_number, line, f"unknown toggle {parsed.name}", parsed.name)
                continue

            self.set(ordinal, parsed.state)
            report.applied += 1

        logger.info(
            f"Loaded toggles from {source}: {report.applied} applied, {report.skipped} skipped",
            extra={"file_path": source, "applied": report.applied, "skipped": report.skipped},
        )
        return report

    def load_from_file(self, path: Union[str, Path]) -> LoadReport:
        """Set toggle values from a state file.

        Raises:
            ToggleFileError: the file cannot be read; no toggle is changed
        """
        text = read_text(path)
        return self.load_from_string(text, source=str(path))

    @staticmethod
    def _skip(
        report: LoadReport,
        line_number: int,
        line: str,
        reason: str,
        name: str = "",
    ) -> None:
        report.issues.append(LineIssue(line_number=line_number, line=line, reason=reason))
        extra = {"file_path": report.source, "line_number": line_number}
        if name:
            extra["toggle_name"] = name
        logger.warning(f"Skipping line {line_number} of {report.source}: {reason}", extra=extra)

    # Introspection

    def names(self) -> Tuple[str, ...]:
        return self._kind.names

    def items(self) -> Iterator[Tuple[str, bool]]:
        """Iterate ``(name, value)`` in ordinal order."""
        return zip(self._kind.names, self._values)

    def enabled(self) -> List[str]:
        return [name for name, value in self.items() if value]

    def to_dict(self) -> Dict[str, bool]:
        return dict(self.items())

    def render(self) -> str:
        """One ``<0|1> <name>`` line per toggle, in ordinal order."""
        return "".join(f"{int(value)} {name}\n" for name, value in self.items())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"ToggleSet(kind={self._kind.label}, enabled={self.enabled()})"


__all__ = ["ToggleSet"]
