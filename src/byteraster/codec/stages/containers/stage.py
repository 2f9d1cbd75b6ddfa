from __future__ import annotations

from typing import Optional

import numpy as np

from .config.stage_config import Config
from .modules.png import read_png, write_png


def tx(grid: np.ndarray, cfg: Config) -> np.ndarray:
    """
    TX-side container operation.

    - If cfg.enabled and cfg.tx_path is set, write the grid to PNG.
    - Always returns grid unchanged (containers stage is side-effect only).
    """
    g = np.asarray(grid, dtype=np.uint8)

    if not cfg.enabled:
        return g

    if cfg.tx_path is None:
        raise ValueError("containers.tx: cfg.tx_path is None but stage is enabled")

    write_png(cfg.tx_path, g)
    return g


def rx(_ignored: Optional[object], cfg: Config) -> np.ndarray:
    """
    RX-side container operation.

    - If cfg.enabled and cfg.rx_path is set, read a pixel grid from the image file.
    """
    if not cfg.enabled:
        raise ValueError("containers.rx: disabled; nothing to read")

    if cfg.rx_path is None:
        raise ValueError("containers.rx: cfg.rx_path is None but stage is enabled")

    return read_png(cfg.rx_path, int(cfg.channels))
