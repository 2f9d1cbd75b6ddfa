from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple
import importlib
import pkgutil


@dataclass(frozen=True)
class Config:
    """
    Compression stage config.

    module: compression module name (e.g. "deflate")
    module_cfg: instance of that module's Config (or None -> defaults)
    """
    module: str = "deflate"
    module_cfg: Any = None


def available_modules() -> list[str]:
    pkg = importlib.import_module(f"{__package__}.modules")
    names = [m.name for m in pkgutil.iter_modules(pkg.__path__)]
    return sorted([n for n in names if not n.startswith("_")])


def _import_compression_module(name: str):
    if not isinstance(name, str) or not name:
        raise ValueError("cfg.module must be a non-empty string")
    return importlib.import_module(f"{__package__}.modules.{name}")


def _resolve_module_and_cfg(cfg: Config):
    mod = _import_compression_module(cfg.module)
    if not hasattr(mod, "Config"):
        raise AttributeError(f"compression module '{cfg.module}' missing Config")
    if not hasattr(mod, "try_compress") or not hasattr(mod, "decompress"):
        raise AttributeError(f"compression module '{cfg.module}' missing try_compress/decompress")

    module_cfg = cfg.module_cfg if cfg.module_cfg is not None else mod.Config()
    return mod, module_cfg


def try_compress(data: bytes, *, cfg: Config) -> Tuple[bool, bytes]:
    """
    Stage TX: payload -> (is_compressed, body). Never raises on compressor failure.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("tx: data must be bytes-like")
    mod, module_cfg = _resolve_module_and_cfg(cfg)
    return mod.try_compress(bytes(data), cfg=module_cfg)


def decompress(data: bytes, *, cfg: Config) -> bytes:
    """
    Stage RX: body -> payload. Raises ValueError if the body is not valid.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("rx: data must be bytes-like")
    mod, module_cfg = _resolve_module_and_cfg(cfg)
    return mod.decompress(bytes(data), cfg=module_cfg)
