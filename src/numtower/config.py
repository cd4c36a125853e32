"""Numeric tower configuration.

The configuration is a small YAML document, for example:

    native_bits: 64

Every key is optional; missing keys keep their defaults.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from numtower.native import NativeRange, for_bits

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TowerConfig:
    """Configuration for a numeric tower.

    Attributes:
        native_bits: Width of native integers; larger magnitudes are promoted.
    """

    native_bits: int = 64

    @property
    def native_range(self) -> NativeRange:
        return for_bits(self.native_bits)


def parse_config(data: object) -> TowerConfig:
    """Build a TowerConfig from an already-decoded YAML document.

    Args:
        data: Decoded document (a mapping, or None for an empty file).

    Returns:
        The validated configuration.

    Raises:
        ValueError: If the document or one of its values is malformed.
    """
    if data is None:
        return TowerConfig()
    if not isinstance(data, dict):
        msg = f"tower config must be a mapping, got {type(data).__name__}"
        raise ValueError(msg)

    native_bits = data.get("native_bits", 64)
    if isinstance(native_bits, bool) or not isinstance(native_bits, int):
        msg = f"native_bits must be an integer, got {native_bits!r}"
        raise ValueError(msg)
    if native_bits < 2:
        msg = f"native_bits must be at least 2, got {native_bits}"
        raise ValueError(msg)

    unknown = sorted(set(data) - {"native_bits"})
    if unknown:
        logger.warning("Ignoring unknown tower config keys: %s", ", ".join(map(str, unknown)))

    return TowerConfig(native_bits=native_bits)


def load_config(config_path: Path | str) -> TowerConfig:
    """Load tower configuration from YAML.

    Args:
        config_path: Path to the YAML file.

    Returns:
        TowerConfig read from the file.
    """
    with Path(config_path).open() as f:
        data = yaml.safe_load(f)

    config = parse_config(data)
    logger.debug("Loaded tower config from %s: %s", config_path, config)
    return config
