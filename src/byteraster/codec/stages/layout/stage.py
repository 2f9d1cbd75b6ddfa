from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import importlib
import pkgutil

import numpy as np


@dataclass(frozen=True)
class Config:
    """
    Layout stage config.

    module: layout module name ("folded" or "direct")
    module_cfg: instance of that module's Config (or None -> defaults)
    """
    module: str = "folded"
    module_cfg: Any = None


def available_modules() -> list[str]:
    """
    Enumerate available layout modules under codec/stages/layout/modules.
    """
    pkg = importlib.import_module(f"{__package__}.modules")
    names = [m.name for m in pkgutil.iter_modules(pkg.__path__)]
    return sorted([n for n in names if not n.startswith("_")])


def _import_layout_module(name: str):
    if not isinstance(name, str) or not name:
        raise ValueError("cfg.module must be a non-empty string")
    return importlib.import_module(f"{__package__}.modules.{name}")


def _resolve_module_and_cfg(cfg: Config):
    mod = _import_layout_module(cfg.module)

    if not hasattr(mod, "Config"):
        raise AttributeError(f"layout module '{cfg.module}' missing Config")
    if not hasattr(mod, "tx") or not hasattr(mod, "rx"):
        raise AttributeError(f"layout module '{cfg.module}' missing tx/rx")

    module_cfg = cfg.module_cfg if cfg.module_cfg is not None else mod.Config()
    return mod, module_cfg


def channels(cfg: Config) -> int:
    _, module_cfg = _resolve_module_and_cfg(cfg)
    return int(module_cfg.channels)


def tx(data: bytes, *, cfg: Config) -> np.ndarray:
    """
    Stage TX: pre-pad buffer -> (rows, cols, channels) uint8 pixel grid.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("tx: data must be bytes-like")
    mod, module_cfg = _resolve_module_and_cfg(cfg)
    return mod.tx(bytes(data), cfg=module_cfg)


def rx(grid: np.ndarray, *, cfg: Config) -> bytes:
    """
    Stage RX: pixel grid -> flat channel buffer (padding included).
    """
    mod, module_cfg = _resolve_module_and_cfg(cfg)
    return mod.rx(grid, cfg=module_cfg)
