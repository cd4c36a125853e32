"""Textual rendering of interpreter numbers."""

from __future__ import annotations

from numtower.bigint import BigIntegerValue
from numtower.tower import Number, unpack_int

# base -> format spec
_INT_FORMATS = {2: "b", 8: "o", 10: "d", 16: "x"}


def render(value: Number, base: int = 10) -> str:
    """Render a number as canonical text.

    Integers use lowercase digits, no prefix, no leading zeros and a leading
    '-' iff negative. Floats only render in base 10, using repr.

    Args:
        value: Native int, BigIntegerValue or float.
        base: One of 2, 8, 10, 16.

    Returns:
        The rendered text.

    Raises:
        ValueError: If base is unsupported (or not 10 for a float).
        TypeError: If value is not a number.
    """
    if base not in _INT_FORMATS:
        msg = f"unsupported base {base}; expected one of 2, 8, 10, 16"
        raise ValueError(msg)
    if isinstance(value, float):
        if base != 10:
            msg = "floats can only be rendered in base 10"
            raise ValueError(msg)
        return repr(value)
    return format(unpack_int(value, "render"), _INT_FORMATS[base])


def render_debug(value: Number) -> str:
    """Render with a representation tag, e.g. 'big:9223372036854775808'."""
    match value:
        case BigIntegerValue():
            return f"big:{value}"
        case float():
            return f"float:{value!r}"
    return f"int:{unpack_int(value, 'render')}"
