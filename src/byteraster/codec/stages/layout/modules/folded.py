from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import logging

import numpy as np

from byteraster.codec.stages.layout.dimensions import capacity, solve_dimensions
from byteraster.codec.stages.layout.grid import as_grid, pack, unpack

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    """
    Folded layout: the buffer is sized for a width x height grid, but the image
    is emitted as (width / 2) x (height * 2). Same pixel count, same bytes.

    channels: bytes per pixel, also the dimension divisor
    """
    channels: int = 4


def tx(data: bytes, *, cfg: Any) -> np.ndarray:
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("tx: data must be bytes-like")

    channels = _get_channels(cfg)
    width, height = solve_dimensions(len(data), channels)
    if width % 2:
        raise ValueError(f"folded layout needs an even width, got {width}")

    log.debug(
        "folded tx: %d bytes -> %dx%d grid (%d bytes), image %dx%d",
        len(data), width, height, capacity(width, height, channels), width // 2, height * 2,
    )
    grid = pack(bytes(data), width, height, channels)
    return as_grid(grid, width // 2, height * 2, channels)


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
