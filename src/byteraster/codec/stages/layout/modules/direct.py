from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import logging

import numpy as np

from byteraster.codec.stages.layout.dimensions import capacity, solve_dimensions
from byteraster.codec.stages.layout.grid import pack, unpack

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    """
    Direct layout: the image is emitted as the solved width x height grid.

    channels: bytes per pixel, also the dimension divisor
    """
    channels: int = 3


def tx(data: bytes, *, cfg: Any) -> np.ndarray:
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("tx: data must be bytes-like")

    channels = _get_channels(cfg)
    width, height = solve_dimensions(len(data), channels)
    log.debug(
        "direct tx: %d bytes -> %dx%d grid (%d bytes)",
        len(data), width, height, capacity(width, height, channels),
    )
    return pack(bytes(data), width, height, channels)


def rx(grid: np.ndarray, *, cfg: Any) -> bytes:
    return unpack(grid, _get_channels(cfg))


def _get_channels(cfg: Any) -> int:
    c = getattr(cfg, "channels", None)
    if c is None:
        raise AttributeError("cfg missing required attribute: channels")
    if not isinstance(c, int) or isinstance(c, bool):
        raise TypeError("cfg.channels must be int")
    if c not in (3, 4):
        raise ValueError("cfg.channels must be 3 or 4")
    return c
