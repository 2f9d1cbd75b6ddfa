from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import importlib
import pkgutil


@dataclass(frozen=True)
class Config:
    """
    Framing stage config.

    module: framing module name ("headered" or "headerless")
    module_cfg: instance of that module's Config (or None -> defaults)
    """
    module: str = "headered"
    module_cfg: Any = None


def available_modules() -> list[str]:
    pkg = importlib.import_module(f"{__package__}.modules")
    names = [m.name for m in pkgutil.iter_modules(pkg.__path__)]
    return sorted([n for n in names if not n.startswith("_")])


def _import_framing_module(name: str):
    if not isinstance(name, str) or not name:
        raise ValueError("cfg.module must be a non-empty string")
    return importlib.import_module(f"{__package__}.modules.{name}")


def _resolve_module_and_cfg(cfg: Config):
    mod = _import_framing_module(cfg.module)
    if not hasattr(mod, "Config"):
        raise AttributeError(f"framing module '{cfg.module}' missing Config")
    if not hasattr(mod, "tx") or not hasattr(mod, "rx"):
        raise AttributeError(f"framing module '{cfg.module}' missing tx/rx")

    module_cfg = cfg.module_cfg if cfg.module_cfg is not None else mod.Config()
    return mod, module_cfg


# ----------------------------
# TX
# ----------------------------

def tx(data: bytes, *, cfg: Config) -> bytes:
    """
    Stage TX: payload bytes -> pre-pad channel buffer.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("tx: data must be bytes-like")
    mod, module_cfg = _resolve_module_and_cfg(cfg)
    return mod.tx(bytes(data), cfg=module_cfg)


# ----------------------------
# RX
# ----------------------------

def rx(data: bytes, *, cfg: Config) -> bytes:
    """
    Stage RX: padded channel buffer -> payload bytes.

    Unlike a byte stream, a pixel grid holds exactly one frame, so there is
    no resync or remainder handling here.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("rx: data must be bytes-like")
    mod, module_cfg = _resolve_module_and_cfg(cfg)
    return mod.rx(bytes(data), cfg=module_cfg)
