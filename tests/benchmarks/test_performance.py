"""
Performance Benchmark Tests for enum_toggles.

Tests cover:
- Read path latency of ToggleSet compared with a plain list
- Name lookup latency
- Loading throughput for large state files
"""

import time
from enum import Enum

import pytest

from enum_toggles import ToggleKind, ToggleSet

# Skip all benchmarks by default, run with: pytest tests/benchmarks -v --benchmark
pytestmark = pytest.mark.benchmark


class Suit(Enum):
    Hearts = 0
    Tiles = 1
    Pikes = 2
    Spades = 3


ITERATIONS = 100_000


@pytest.fixture(scope="module")
def toggles() -> ToggleSet:
    return ToggleSet(Suit)


def _read_toggles(toggles: ToggleSet) -> None:
    toggles.get(Suit.Hearts.value)
    toggles.get(Suit.Tiles.value)
    toggles.get(Suit.Pikes.value)
    toggles.get(Suit.Spades.value)


def _read_list(values: list) -> None:
    values[Suit.Hearts.value]
    values[Suit.Tiles.value]
    values[Suit.Pikes.value]
    values[Suit.Spades.value]


class TestReadonlyToggles:
    """Read path comparisons."""

    def test_index_reads_close_to_list(self, toggles):
        """ToggleSet reads stay within a constant factor of list reads."""
        values = [False] * 4

        start = time.perf_counter()
        for _ in range(ITERATIONS):
            _read_list(values)
        list_elapsed = time.perf_counter() - start

        start = time.perf_counter()
        for _ in range(ITERATIONS):
            _read_toggles(toggles)
        toggles_elapsed = time.perf_counter() - start

        # Bounds checks and bit shifts cost more than a list subscript
        assert toggles_elapsed < list_elapsed * 50, (
            f"ToggleSet took {toggles_elapsed:.3f}s, list took {list_elapsed:.3f}s"
        )

    def test_name_lookup_latency(self, toggles):
        """Name lookups average below 10us."""
        start = time.perf_counter()
        for _ in range(ITERATIONS):
            toggles.get_by_name("Spades")
        elapsed = time.perf_counter() - start

        per_call_us = elapsed / ITERATIONS * 1e6
        assert per_call_us < 10.0, f"Name lookup took {per_call_us:.2f}us"


class TestLoadThroughput:
    def test_large_file(self, tmp_path):
        """Loading 10k toggles completes within 2 seconds."""
        names = [f"toggle_{i}" for i in range(10_000)]
        path = tmp_path / "toggles.txt"
        path.write_text(
            "".join(f"{i % 2} {name}\n" for i, name in enumerate(names)),
            encoding="utf-8",
        )
        toggles = ToggleSet(ToggleKind.from_names(names))

        start = time.perf_counter()
        report = toggles.load_from_file(path)
        elapsed = time.perf_counter() - start

        assert report.applied == 10_000
        assert len(toggles.enabled()) == 5_000
        assert elapsed < 2.0, f"Load took {elapsed:.2f}s, expected < 2s"
