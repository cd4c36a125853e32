"""Arbitrary-precision integer value.

BigIntegerValue carries integers that do not fit in the interpreter's native
integer range. It is a plain immutable wrapper: arithmetic happens in
`numtower.tower`, which is also the only place that decides whether a result
is wrapped here or kept native.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BigIntegerValue:
    """Immutable wrapper for an out-of-range integer magnitude.

    Callers must only construct this for magnitudes outside the native range
    (use `NumericTower.pack_int`). The type itself does not check.

    Attributes:
        magnitude: The wrapped signed integer.
    """

    magnitude: int

    def read(self) -> int:
        """Return the wrapped magnitude."""
        return self.magnitude

    def __hash__(self) -> int:
        # Same hash as the equal native int or float
        return hash(self.magnitude)

    def __str__(self) -> str:
        return str(self.magnitude)
