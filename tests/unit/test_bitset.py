"""Tests for BitSet storage."""

import pytest

from enum_toggles.bitset import BitSet
from enum_toggles.errors import ToggleIndexError


class TestBitSet:
    """Tests for BitSet."""

    def test_starts_cleared(self):
        bits = BitSet(70)
        assert len(bits) == 70
        assert not any(bits)
        assert bits.count() == 0

    def test_set_and_clear(self):
        bits = BitSet(8)
        bits[3] = True
        bits[7] = True
        assert bits[3] is True
        assert bits[7] is True
        assert bits[0] is False
        bits[3] = False
        assert bits[3] is False
        assert bits.count() == 1

    def test_beyond_64_bits(self):
        """Storage is not limited to a machine word."""
        bits = BitSet(200)
        bits[150] = True
        assert bits[150] is True
        assert bits[149] is False
        assert list(bits).index(True) == 150

    def test_out_of_range(self):
        bits = BitSet(4)
        with pytest.raises(ToggleIndexError) as exc:
            bits[4]
        assert exc.value.index == 4
        assert exc.value.size == 4
        with pytest.raises(IndexError):
            bits[10] = True

    def test_negative_index_does_not_wrap(self):
        bits = BitSet(4)
        bits[3] = True
        with pytest.raises(ToggleIndexError):
            bits[-1]

    def test_empty(self):
        bits = BitSet(0)
        assert len(bits) == 0
        assert list(bits) == []
        with pytest.raises(ToggleIndexError):
            bits[0]

    def test_negative_size(self):
        with pytest.raises(ValueError):
            BitSet(-1)

    def test_fill(self):
        bits = BitSet(5)
        bits.fill(True)
        assert list(bits) == [True] * 5
        assert bits.count() == 5
        bits.fill(False)
        assert bits.count() == 0

    def test_copy_and_equality(self):
        bits = BitSet(3)
        bits[1] = True
        clone = bits.copy()
        assert clone == bits
        clone[2] = True
        assert clone != bits
        assert BitSet(3) != BitSet(4)

    def test_repr_lists_bits_in_index_order(self):
        bits = BitSet(3)
        bits[0] = True
        assert repr(bits) == "BitSet(size=3, bits='100')"

    @pytest.mark.parametrize("index", [0.5, "0", None])
    def test_non_integer_index(self, index):
        bits = BitSet(4)
        with pytest.raises(TypeError, match="must be integers"):
            bits[index]
        with pytest.raises(TypeError):
            bits[index] = True
        assert bits.count() == 0
