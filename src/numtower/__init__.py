"""numtower: arbitrary-precision integers for an interpreter's numeric model."""

from __future__ import annotations

from numtower.bigint import BigIntegerValue
from numtower.config import TowerConfig, load_config
from numtower.equality import NumericKey, value_hash, values_equal
from numtower.native import INT32, INT64, NativeRange
from numtower.render import render, render_debug
from numtower.tower import (
    DEFAULT_TOWER,
    NumericTower,
    is_integer,
    is_numeric,
    unpack_int,
    unpack_number,
)

__all__ = [
    "DEFAULT_TOWER",
    "INT32",
    "INT64",
    "BigIntegerValue",
    "NativeRange",
    "NumericKey",
    "NumericTower",
    "TowerConfig",
    "is_integer",
    "is_numeric",
    "load_config",
    "render",
    "render_debug",
    "unpack_int",
    "unpack_number",
    "value_hash",
    "values_equal",
]
