from __future__ import annotations

from typing import Tuple

import math

U32_MAX = 0xFFFFFFFF


def solve_dimensions(buffer_length: int, channel_divisor: int) -> Tuple[int, int]:
    """
    Grid size (width, height) for a pre-pad buffer of buffer_length bytes.

      w      = ceil(sqrt(buffer_length))
      width  = w + (d - w % d)        # a full d is added when w % d == 0
      height = width // d - 1

    The padding target is width * height * d bytes. When that is smaller than
    buffer_length, width is stepped up by d until the buffer fits; lengths the
    formula already covers keep exactly the formula's layout.

    math.isqrt gives the same ceiling as float sqrt for every u32 length,
    without rounding at the top of the range.
    """
    if not isinstance(buffer_length, int) or isinstance(buffer_length, bool):
        raise TypeError("buffer_length must be int")
    if not isinstance(channel_divisor, int) or isinstance(channel_divisor, bool):
        raise TypeError("channel_divisor must be int")
    if channel_divisor <= 0:
        raise ValueError("channel_divisor must be > 0")
    if buffer_length < 0:
        raise ValueError("buffer_length must be >= 0")
    if buffer_length > U32_MAX:
        raise OverflowError(f"buffer length {buffer_length} exceeds u32 range")

    d = channel_divisor
    w = _ceil_sqrt(buffer_length)
    width = w + (d - w % d)
    height = width // d - 1

    while width * height * d < buffer_length:
        width += d
        height = width // d - 1

    if width * height * d > U32_MAX:
        raise OverflowError(f"grid {width}x{height}x{d} exceeds u32 range")

    return width, height


def capacity(width: int, height: int, channels: int) -> int:
    return width * height * channels


def _ceil_sqrt(n: int) -> int:
    if n == 0:
        return 0
    return math.isqrt(n - 1) + 1
