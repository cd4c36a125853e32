"""Native integer range of the interpreter."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NativeRange:
    """Signed fixed-width integer range.

    Attributes:
        bits: Width of the native integer, sign bit included.
    """

    bits: int = 64

    def __post_init__(self) -> None:
        if isinstance(self.bits, bool) or not isinstance(self.bits, int):
            msg = f"native width must be an integer, got {self.bits!r}"
            raise TypeError(msg)
        if self.bits < 2:
            msg = f"native width must be at least 2 bits, got {self.bits}"
            raise ValueError(msg)

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1

    def fits(self, value: int) -> bool:
        """Check if value is representable as a native integer."""
        return self.min_value <= value <= self.max_value


def for_bits(bits: int) -> NativeRange:
    """Return the native range for the given width, reusing the common ones."""
    match bits:
        case 32:
            return INT32
        case 64:
            return INT64
        case _:
            return NativeRange(bits)


INT32 = NativeRange(32)
INT64 = NativeRange(64)
