from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

import logging
import struct
import sys

from byteraster.codec.stages.compression import stage as compression_stage
from byteraster.codec.stages.compression.stage import Config as CompressionStageConfig

log = logging.getLogger(__name__)


# ============================
# Config
# ============================

@dataclass(frozen=True)
class Config:
    """
    Self-describing frame with compression flag and payload length.

    compression: compression stage config used for the body
    """
    compression: CompressionStageConfig = CompressionStageConfig()


# ============================
# Framing format
# ============================
#
# Frame:
#   FLAG(1) | LEN(8, u64 little-endian) | BODY(LEN) | ...padding (ignored on rx)
#
# Notes:
# - FLAG is written as 0x00 (raw) or 0x01 (compressed); any nonzero value reads as compressed.
# - LEN is the length of BODY as stored, i.e. after compression.

_FLAG_LEN = 1
_LEN_FMT = "<Q"
_LEN_LEN = struct.calcsize(_LEN_FMT)  # 8 bytes
_HDR_TOTAL_LEN = _FLAG_LEN + _LEN_LEN  # 9 bytes


def build_frame(is_compressed: bool, payload: bytes) -> bytes:
    body = bytes(payload)
    return bytes([1 if is_compressed else 0]) + struct.pack(_LEN_FMT, len(body)) + body


def parse_frame(data: bytes) -> Tuple[bool, bytes]:
    """
    Split a channel buffer into (is_compressed, body).

    Everything after BODY is padding and is never inspected.
    """
    b = bytes(data)
    if len(b) == 0:
        raise ValueError("rx: input is empty")

    is_compressed = b[0] != 0

    if len(b) < _HDR_TOTAL_LEN:
        raise ValueError(f"rx: header too short: got {len(b)} bytes, need {_HDR_TOTAL_LEN}")

    (length,) = struct.unpack(_LEN_FMT, b[_FLAG_LEN:_HDR_TOTAL_LEN])
    if length > sys.maxsize:
        raise OverflowError(f"rx: declared length {length} exceeds addressable size")

    available = len(b) - _HDR_TOTAL_LEN
    if length > available:
        raise ValueError(f"rx: payload truncated: declared {length} bytes, {available} available")

    return is_compressed, b[_HDR_TOTAL_LEN:_HDR_TOTAL_LEN + length]


# ============================
# Public API (uniform)
# ============================

def tx(data: bytes, *, cfg: Any) -> bytes:
    """
    TX direction: payload bytes -> frame bytes (unpadded)
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("tx: data must be bytes-like")

    is_compressed, body = compression_stage.try_compress(bytes(data), cfg=_get_compression(cfg))
    log.debug("headered tx: payload=%d body=%d compressed=%s", len(data), len(body), is_compressed)
    return build_frame(is_compressed, body)


def rx(data: bytes, *, cfg: Any) -> bytes:
    """
    RX direction: channel buffer (frame + padding) -> original payload
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("rx: data must be bytes-like")

    is_compressed, body = parse_frame(data)
    if not is_compressed:
        return body
    return compression_stage.decompress(body, cfg=_get_compression(cfg))


# ============================
# Helpers
# ============================

def _get_compression(cfg: Any) -> CompressionStageConfig:
    c = getattr(cfg, "compression", None)
    if c is None:
        raise AttributeError("cfg missing required attribute: compression")
    if not isinstance(c, CompressionStageConfig):
        raise TypeError("cfg.compression must be a compression stage Config")
    return c
