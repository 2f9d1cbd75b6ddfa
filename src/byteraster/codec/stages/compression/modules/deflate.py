from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

import logging
import zlib

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    """
    zlib/DEFLATE compression.

    level: compression effort, 0..9 (9 = best)
    compress: optional replacement for zlib.compress(data, level)
    decompress: optional replacement for zlib.decompress(data)
    logger: where the fallback diagnostic goes (None -> module logger)
    """
    level: int = 9
    compress: Optional[Callable[[bytes, int], bytes]] = None
    decompress: Optional[Callable[[bytes], bytes]] = None
    logger: Optional[logging.Logger] = None


def try_compress(data: bytes, *, cfg: Any) -> Tuple[bool, bytes]:
    """
    Returns (is_compressed, body).

    Compression is always attempted, whatever the size of the result.
    Any compressor failure falls back to (False, data) and logs a warning.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("tx: data must be bytes-like")

    level = _getattr_int(cfg, "level", 0, 9)
    compress = getattr(cfg, "compress", None) or zlib.compress
    logger = getattr(cfg, "logger", None) or log

    raw = bytes(data)
    try:
        body = bytes(compress(raw, level))
    except Exception as e:
        logger.warning("Compression failed: %r. Encoding raw bytes...", e)
        return False, raw
    return True, body


def decompress(data: bytes, *, cfg: Any) -> bytes:
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("rx: data must be bytes-like")

    fn = getattr(cfg, "decompress", None) or zlib.decompress
    try:
        return bytes(fn(bytes(data)))
    except Exception as e:
        raise ValueError(f"rx: decompression failed: {e}") from e


def _getattr_int(cfg: Any, name: str, lo: int, hi: int) -> int:
    v = getattr(cfg, name, None)
    if v is None:
        raise AttributeError(f"cfg missing required int attribute: {name}")
    if not isinstance(v, int) or isinstance(v, bool):
        raise TypeError(f"cfg.{name} must be int")
    if not (lo <= v <= hi):
        raise ValueError(f"cfg.{name} out of range [{lo},{hi}]")
    return v
