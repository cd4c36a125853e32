"""Numeric tower: promotion, demotion and arithmetic across representations.

An interpreter number is one of:
- a native integer (Python int inside the native range)
- a BigIntegerValue (magnitude outside the native range)
- a float

Integer results always go through `NumericTower.pack_int`, so a magnitude has
exactly one representation: native when it fits, BigIntegerValue otherwise.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass

from numtower.bigint import BigIntegerValue
from numtower.config import TowerConfig
from numtower.native import INT64, NativeRange

logger = logging.getLogger(__name__)

Integer = int | BigIntegerValue
Number = int | float | BigIntegerValue


def is_integer(value: object) -> bool:
    """Check if value is an integer in either representation."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, BigIntegerValue))


def is_numeric(value: object) -> bool:
    """Check if value is any interpreter number."""
    return is_integer(value) or isinstance(value, float)


def unpack_int(value: object, op: str = "int") -> int:
    """Return the magnitude of an integer in either representation.

    Raises:
        TypeError: If value is not an integer.
    """
    match value:
        case bool():
            pass
        case BigIntegerValue(magnitude=magnitude):
            return magnitude
        case int():
            return value
    msg = f"unsupported operand type for {op}: '{type(value).__name__}'"
    raise TypeError(msg)


def unpack_number(value: object, op: str = "number") -> int | float:
    """Return the magnitude of an integer, or the float itself.

    Raises:
        TypeError: If value is not a number.
    """
    if isinstance(value, float):
        return value
    return unpack_int(value, op)


@dataclass(frozen=True)
class NumericTower:
    """Dispatcher for arithmetic over native, big and float values.

    Attributes:
        native: Range of values kept as native integers.
    """

    native: NativeRange = INT64

    @classmethod
    def from_config(cls, config: TowerConfig) -> NumericTower:
        return cls(config.native_range)

    # -------------------------------------------------------------------------
    # Representation
    # -------------------------------------------------------------------------

    def pack_int(self, value: int) -> Integer:
        """Return value as native int if it fits, otherwise as BigIntegerValue.

        This is the construction path for big integers: it never wraps an
        in-range magnitude.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            msg = f"pack_int expects an int, got '{type(value).__name__}'"
            raise TypeError(msg)
        if self.native.fits(value):
            return value
        logger.debug("Promoting %d-bit magnitude to BigIntegerValue", value.bit_length())
        return BigIntegerValue(value)

    def normalize(self, value: Number) -> Number:
        """Restore the canonical representation of a number.

        Demotes BigIntegerValue instances that hold an in-range magnitude and
        promotes native ints that are out of range. Floats are unchanged.
        """
        match value:
            case BigIntegerValue(magnitude=magnitude) if self.native.fits(magnitude):
                logger.debug("Demoting in-range BigIntegerValue to native int")
                return magnitude
            case BigIntegerValue():
                return value
            case float():
                return value
        return self.pack_int(unpack_int(value))

    def is_native(self, value: object) -> bool:
        """Check if value is a native integer inside this tower's range."""
        return (
            isinstance(value, int)
            and not isinstance(value, bool)
            and self.native.fits(value)
        )

    def _result(self, value: int | float) -> Number:
        if isinstance(value, float):
            return value
        return self.pack_int(value)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _binary(
        self, a: Number, b: Number, op: str, func: Callable[[int | float, int | float], int | float]
    ) -> Number:
        x = unpack_number(a, op)
        y = unpack_number(b, op)
        return self._result(func(x, y))

    def add(self, a: Number, b: Number) -> Number:
        return self._binary(a, b, "+", lambda x, y: x + y)

    def sub(self, a: Number, b: Number) -> Number:
        return self._binary(a, b, "-", lambda x, y: x - y)

    def mul(self, a: Number, b: Number) -> Number:
        return self._binary(a, b, "*", lambda x, y: x * y)

    def floordiv(self, a: Number, b: Number) -> Number:
        """Floor division (rounds toward negative infinity)."""
        x = unpack_number(a, "//")
        y = unpack_number(b, "//")
        if y == 0:
            msg = "integer division or modulo by zero"
            raise ZeroDivisionError(msg)
        return self._result(x // y)

    def mod(self, a: Number, b: Number) -> Number:
        """Modulo; the result takes the sign of the divisor."""
        x = unpack_number(a, "%")
        y = unpack_number(b, "%")
        if y == 0:
            msg = "integer division or modulo by zero"
            raise ZeroDivisionError(msg)
        return self._result(x % y)

    def truediv(self, a: Number, b: Number) -> float:
        """True division, always a float."""
        x = unpack_number(a, "/")
        y = unpack_number(b, "/")
        if y == 0:
            msg = "division by zero"
            raise ZeroDivisionError(msg)
        return x / y

    def pow(self, a: Number, b: Number) -> Number:
        """Exponentiation.

        Integer base and non-negative integer exponent give an integer;
        a negative integer exponent or any float operand gives a float.
        """
        x = unpack_number(a, "**")
        y = unpack_number(b, "**")
        if x == 0 and y < 0:
            msg = "zero cannot be raised to a negative power"
            raise ZeroDivisionError(msg)
        if isinstance(x, float) or isinstance(y, float):
            # math.pow raises ValueError instead of returning a complex
            return math.pow(x, y)
        if y < 0:
            return float(x) ** y
        return self.pack_int(x**y)

    def neg(self, a: Number) -> Number:
        return self._result(-unpack_number(a, "unary -"))

    def abs(self, a: Number) -> Number:
        return self._result(abs(unpack_number(a, "abs()")))

    # -------------------------------------------------------------------------
    # Integer-only operations
    # -------------------------------------------------------------------------

    def invert(self, a: Integer) -> Integer:
        return self.pack_int(~unpack_int(a, "unary ~"))

    def lshift(self, a: Integer, b: Integer) -> Integer:
        x = unpack_int(a, "<<")
        n = unpack_int(b, "<<")
        if n < 0:
            msg = "negative shift count"
            raise ValueError(msg)
        return self.pack_int(x << n)

    def rshift(self, a: Integer, b: Integer) -> Integer:
        x = unpack_int(a, ">>")
        n = unpack_int(b, ">>")
        if n < 0:
            msg = "negative shift count"
            raise ValueError(msg)
        return self.pack_int(x >> n)

    def and_(self, a: Integer, b: Integer) -> Integer:
        return self.pack_int(unpack_int(a, "&") & unpack_int(b, "&"))

    def or_(self, a: Integer, b: Integer) -> Integer:
        return self.pack_int(unpack_int(a, "|") | unpack_int(b, "|"))

    def xor(self, a: Integer, b: Integer) -> Integer:
        return self.pack_int(unpack_int(a, "^") ^ unpack_int(b, "^"))

    # -------------------------------------------------------------------------
    # Comparison and conversion
    # -------------------------------------------------------------------------

    def compare(self, a: Number, b: Number) -> int:
        """Compare two numbers exactly, returns -1/0/1.

        Raises:
            ValueError: If either operand is NaN.
        """
        x = unpack_number(a, "compare")
        y = unpack_number(b, "compare")
        if (isinstance(x, float) and math.isnan(x)) or (isinstance(y, float) and math.isnan(y)):
            msg = "cannot order NaN"
            raise ValueError(msg)
        return (x > y) - (x < y)

    def to_float(self, a: Number) -> float:
        """Convert to float; OverflowError if the magnitude is too large."""
        return float(unpack_number(a, "float()"))

    def from_float(self, value: float) -> Integer:
        """Truncate a float toward zero and pack the result.

        int() raises ValueError for NaN and OverflowError for infinities.
        """
        if not isinstance(value, float):
            msg = f"from_float expects a float, got '{type(value).__name__}'"
            raise TypeError(msg)
        return self.pack_int(int(value))


DEFAULT_TOWER = NumericTower()
