"""Unit tests for numtower.bigint module."""

from __future__ import annotations

import dataclasses

import pytest

from numtower.bigint import BigIntegerValue

MAGNITUDES = [
    0,
    1,
    -1,
    2**63,
    -(2**63) - 1,
    10**30,
    -123456789012345678901234567890,
    2**200 + 7,
]


class TestConstructAndRead:
    """Tests for construction and read access."""

    @pytest.mark.parametrize("magnitude", MAGNITUDES)
    def test_read_returns_magnitude(self, magnitude: int) -> None:
        assert BigIntegerValue(magnitude).read() == magnitude
        assert BigIntegerValue(magnitude).magnitude == magnitude

    def test_read_shares_representation(self) -> None:
        """Reads return the same int object, no copy."""
        big = BigIntegerValue(2**100)
        assert big.read() is big.read()

    def test_one_past_int64_max(self) -> None:
        first = BigIntegerValue(2**63)
        second = BigIntegerValue(2**63)
        assert first.read() == 9223372036854775808
        assert first == second
        assert str(first) == "9223372036854775808"

    def test_in_range_magnitude_is_not_rejected(self) -> None:
        """The type itself does no range check."""
        assert BigIntegerValue(5).read() == 5

    def test_immutable(self) -> None:
        big = BigIntegerValue(2**64)
        with pytest.raises(dataclasses.FrozenInstanceError):
            big.magnitude = 1  # type: ignore[misc]


class TestEquality:
    """Tests for value equality."""

    @pytest.mark.parametrize("m1", MAGNITUDES)
    @pytest.mark.parametrize("m2", MAGNITUDES)
    def test_equal_iff_magnitudes_equal(self, m1: int, m2: int) -> None:
        assert (BigIntegerValue(m1) == BigIntegerValue(m2)) == (m1 == m2)

    def test_not_identity_based(self) -> None:
        a = BigIntegerValue(10**40)
        b = BigIntegerValue(10**40)
        assert a is not b
        assert a == b

    def test_not_equal_to_other_types(self) -> None:
        assert BigIntegerValue(2**64) != "18446744073709551616"


class TestHash:
    """Tests for hashing."""

    @pytest.mark.parametrize("magnitude", MAGNITUDES)
    def test_equal_values_hash_equal(self, magnitude: int) -> None:
        assert hash(BigIntegerValue(magnitude)) == hash(BigIntegerValue(magnitude))

    def test_deterministic(self) -> None:
        big = BigIntegerValue(10**30)
        assert hash(big) == hash(big)
        assert hash(big) == hash(BigIntegerValue(10**30))

    def test_neighbours_differ(self) -> None:
        assert hash(BigIntegerValue(10**30)) != hash(BigIntegerValue(10**30 + 1))

    def test_matches_native_hash(self) -> None:
        assert hash(BigIntegerValue(2**70)) == hash(2**70)

    def test_usable_as_dict_key(self) -> None:
        magnitude = -123456789012345678901234567890
        table = {BigIntegerValue(magnitude): "found"}
        assert table[BigIntegerValue(magnitude)] == "found"
        assert len({BigIntegerValue(magnitude), BigIntegerValue(magnitude)}) == 1


class TestStr:
    """Tests for string conversion."""

    @pytest.mark.parametrize("magnitude", MAGNITUDES)
    def test_round_trip(self, magnitude: int) -> None:
        assert int(str(BigIntegerValue(magnitude))) == magnitude

    def test_zero(self) -> None:
        assert str(BigIntegerValue(-0)) == "0"
        assert BigIntegerValue(-0) == BigIntegerValue(0)

    def test_negative(self) -> None:
        assert str(BigIntegerValue(-5)) == "-5"

    def test_no_scientific_notation(self) -> None:
        text = str(BigIntegerValue(10**50))
        assert text == "1" + "0" * 50
        assert "e" not in text

    def test_canonical_form(self) -> None:
        text = str(BigIntegerValue(-(2**100)))
        assert text.startswith("-")
        assert text[1] != "0"
        assert not text.endswith("-")
