from __future__ import annotations

import numpy as np


def pack(buffer: bytes, width: int, height: int, channels: int) -> np.ndarray:
    """
    Zero-pad buffer to width*height*channels and view it as a (height, width, channels) grid.
    """
    b = bytes(buffer)
    target = width * height * channels
    if len(b) > target:
        raise ValueError(f"tx: buffer longer than grid: {len(b)} > {target}")

    flat = np.zeros(target, dtype=np.uint8)
    flat[:len(b)] = np.frombuffer(b, dtype=np.uint8)
    return as_grid(flat, width, height, channels)


def as_grid(flat: np.ndarray, width: int, height: int, channels: int) -> np.ndarray:
    flat = np.asarray(flat, dtype=np.uint8).reshape(-1)
    if flat.size < width * height * channels:
        raise ValueError("buffer too small")
    if flat.size != width * height * channels:
        raise ValueError(f"buffer size {flat.size} does not match {width}x{height}x{channels}")
    return flat.reshape(height, width, channels)


def unpack(grid: np.ndarray, channels: int) -> bytes:
    """
    Row-major, channel-interleaved bytes of grid (the inverse of pack, padding included).
    """
    g = np.asarray(grid)
    if g.dtype != np.uint8:
        raise TypeError(f"rx: grid dtype must be uint8, got {g.dtype}")
    if g.ndim != 3:
        raise ValueError(f"rx: grid must be (rows, cols, channels), got shape {g.shape}")
    if g.shape[2] != channels:
        raise ValueError(f"rx: grid has {g.shape[2]} channels, expected {channels}")
    return np.ascontiguousarray(g).tobytes()
