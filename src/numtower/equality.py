"""Generic numeric equality and hashing across representations.

Native ints, BigIntegerValue and floats that denote the same mathematical
value are equal and hash equal. BigIntegerValue hashes as its magnitude, and
Python already hashes equal ints and floats alike, so the hash is the
built-in hash of the unpacked value.
"""

from __future__ import annotations

from dataclasses import dataclass

from numtower.tower import Number, unpack_number


def values_equal(a: Number, b: Number) -> bool:
    """Mathematical equality of two numbers (NaN equals nothing)."""
    return unpack_number(a, "==") == unpack_number(b, "==")


def value_hash(value: Number) -> int:
    """Hash consistent with values_equal."""
    return hash(unpack_number(value, "hash()"))


@dataclass(frozen=True, eq=False)
class NumericKey:
    """Container key that compares numbers by value, not representation.

    Attributes:
        value: The wrapped number.
    """

    value: Number

    def __post_init__(self) -> None:
        # Fail at construction rather than on first lookup
        unpack_number(self.value, "NumericKey")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumericKey):
            return NotImplemented
        return values_equal(self.value, other.value)

    def __hash__(self) -> int:
        return value_hash(self.value)
