from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Config:
    """
    No header at all: the payload is the channel buffer.

    The pixel grid carries no length, so rx() returns the trailing zero padding
    along with the payload. Decoding is exact only when no padding was added.
    """


def tx(data: bytes, *, cfg: Any) -> bytes:
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("tx: data must be bytes-like")
    return bytes(data)


def rx(data: bytes, *, cfg: Any) -> bytes:
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("rx: data must be bytes-like")
    # Do NOT trim: the padding is indistinguishable from payload zeros.
    return bytes(data)
