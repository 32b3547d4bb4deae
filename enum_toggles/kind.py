"""Toggle kind descriptor.

A toggle kind is the closed, ordered set of toggle names a ToggleSet is
built for. It is usually derived from a Python ``Enum``:

    class MyToggle(Enum):
        FeatureA = auto()
        FeatureB = auto()

    kind = ToggleKind.from_enum(MyToggle)

Ordinals follow declaration order, starting at 0. Display names are the
member names. Aliased members share the ordinal of their canonical member.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Hashable, Iterable, Iterator, Optional, Tuple, Type, Union

from enum_toggles.errors import ToggleIndexError, UnknownToggleError


class ToggleKind:
    """Immutable (ordinal, name) table plus a variant -> ordinal mapping."""

    __slots__ = ("_label", "_names", "_variants", "_ordinals")

    def __init__(
        self,
        names: Iterable[str],
        variants: Optional[Iterable[Hashable]] = None,
        label: str = "",
    ):
        """Build a kind from ordered names.

        Args:
            names: Display names in ordinal order
            variants: Symbolic values matching ``names`` one to one; the
                names themselves are used when omitted
            label: Human readable name of the kind
        """
        self._names: Tuple[str, ...] = tuple(names)
        self._variants: Tuple[Hashable, ...] = (
            tuple(variants) if variants is not None else self._names
        )
        if len(self._variants) != len(self._names):
            raise ValueError("variants and names must have the same length")
        self._ordinals: Dict[Hashable, int] = {
            variant: ordinal for ordinal, variant in enumerate(self._variants)
        }
        self._label = label or "ToggleKind"

    @classmethod
    def from_enum(cls, enum_cls: Type[Enum]) -> "ToggleKind":
        """Create from an ``Enum`` class in declaration order."""
        members = list(enum_cls)
        return cls(
            names=[member.name for member in members],
            variants=members,
            label=enum_cls.__name__,
        )

    @classmethod
    def from_names(cls, names: Iterable[str], label: str = "") -> "ToggleKind":
        return cls(names=names, label=label)

    @classmethod
    def coerce(cls, kind: Union["ToggleKind", Type[Enum]]) -> "ToggleKind":
        """Accept either a ready descriptor or an ``Enum`` class."""
        if isinstance(kind, ToggleKind):
            return kind
        if isinstance(kind, type) and issubclass(kind, Enum):
            return cls.from_enum(kind)
        raise TypeError(f"Expected ToggleKind or Enum subclass, got {kind!r}")

    @property
    def label(self) -> str:
        return self._label

    @property
    def names(self) -> Tuple[str, ...]:
        return self._names

    @property
    def variants(self) -> Tuple[Hashable, ...]:
        return self._variants

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        return iter(enumerate(self._names))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ToggleKind):
            return NotImplemented
        return self._names == other._names

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return f"ToggleKind({self._label}, names={list(self._names)})"

    def ordinal_of(self, variant: Any) -> int:
        """Ordinal of a variant of this kind."""
        try:
            return self._ordinals[variant]
        except (KeyError, TypeError):
            raise UnknownToggleError(variant) from None

    def name_of(self, ordinal: int) -> str:
        """Display name of an ordinal.

        Raises:
            ToggleIndexError: ordinal outside ``0..len-1``
        """
        if not isinstance(ordinal, int):
            raise TypeError(f"ordinals must be integers, not {type(ordinal).__name__}")
        if not 0 <= ordinal < len(self._names):
            raise ToggleIndexError(ordinal, len(self._names))
        return self._names[ordinal]

    def has_variant(self, variant: Any) -> bool:
        try:
            return variant in self._ordinals
        except TypeError:
            return False


__all__ = ["ToggleKind"]
