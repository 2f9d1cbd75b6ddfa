from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """
    Containers stage config.

    Design:
      - tx(grid, cfg): writes the pixel grid to cfg.tx_path if enabled
      - rx(_, cfg): reads a pixel grid from cfg.rx_path (ignores input) if enabled

    channels is the pixel layout rx() converts the file to.
    """
    enabled: bool = True

    # Where to write/read
    tx_path: Optional[str] = None
    rx_path: Optional[str] = None

    channels: int = 4
