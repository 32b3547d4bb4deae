"""Fixed-size bit storage backed by a single integer."""

from __future__ import annotations

from typing import Iterator

from enum_toggles.errors import ToggleIndexError


class BitSet:
    """
    An indexable, fixed-size array of booleans packed into an ``int``.
    """

    __slots__ = ("_size", "_mask")

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("BitSet size must be non-negative")
        self._size = size
        self._mask = 0

    def _check(self, index: int) -> None:
        if not isinstance(index, int):
            raise TypeError(f"BitSet indices must be integers, not {type(index).__name__}")
        # Negative indexes do not wrap around
        if not 0 <= index < self._size:
            raise ToggleIndexError(index, self._size)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[bool]:
        for index in range(self._size):
            yield (self._mask >> index) & 1 == 1

    def __getitem__(self, index: int) -> bool:
        self._check(index)
        return (self._mask >> index) & 1 == 1

    def __setitem__(self, index: int, value: bool) -> None:
        self._check(index)
        if value:
            self._mask |= 1 << index
        else:
            self._mask &= ~(1 << index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self._size == other._size and self._mask == other._mask

    def __repr__(self) -> str:
        bits = "".join("1" if bit else "0" for bit in self)
        return f"BitSet(size={self._size}, bits={bits!r})"

    def fill(self, value: bool) -> None:
        """Set every bit to ``value``."""
        self._mask = (1 << self._size) - 1 if value else 0

    def count(self) -> int:
        """Number of bits set."""
        return bin(self._mask).count("1")

    def copy(self) -> "BitSet":
        clone = BitSet(self._size)
        clone._mask = self._mask
        return clone
