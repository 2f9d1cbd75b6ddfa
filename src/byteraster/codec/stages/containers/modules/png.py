from __future__ import annotations

import io
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from byteraster.codec.stages.layout.dimensions import U32_MAX

PathLike = Union[str, Path]

_MODES = {3: "RGB", 4: "RGBA"}

# Largest grid the dimension solver can emit: U32_MAX bytes of 3-channel pixels.
MAX_GRID_PIXELS = U32_MAX // 3

if Image.MAX_IMAGE_PIXELS is not None and Image.MAX_IMAGE_PIXELS < MAX_GRID_PIXELS:
    Image.MAX_IMAGE_PIXELS = MAX_GRID_PIXELS


def write_png(path: PathLike, grid: np.ndarray) -> None:
    """
    Write a (rows, cols, 3|4) uint8 grid as an RGB/RGBA PNG.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    _to_image(grid).save(p, format="PNG")


def read_png(path: PathLike, channels: int) -> np.ndarray:
    """
    Read an image file and return its pixels as a (rows, cols, channels) uint8 grid.
    Other modes are converted (e.g. an RGB file read with channels=4 gets alpha 255).
    """
    with _open(Path(path)) as img:
        return _from_image(img, channels)


def encode_png(grid: np.ndarray) -> bytes:
    buf = io.BytesIO()
    _to_image(grid).save(buf, format="PNG")
    return buf.getvalue()


def decode_png(data: bytes, channels: int) -> np.ndarray:
    with _open(io.BytesIO(bytes(data))) as img:
        return _from_image(img, channels)


def _open(fp) -> Image.Image:
    try:
        return Image.open(fp)
    except Image.DecompressionBombError as e:
        raise ValueError(f"rx: image too large: {e}") from e


def _to_image(grid: np.ndarray) -> Image.Image:
    g = np.asarray(grid)
    if g.dtype != np.uint8:
        raise TypeError(f"grid dtype must be uint8, got {g.dtype}")
    if g.ndim != 3 or g.shape[2] not in _MODES:
        raise ValueError(f"grid must be (rows, cols, 3|4), got shape {g.shape}")
    if g.shape[0] == 0 or g.shape[1] == 0:
        raise ValueError(f"cannot store an empty {g.shape[1]}x{g.shape[0]} image as PNG")
    return Image.fromarray(np.ascontiguousarray(g))


def _from_image(img: Image.Image, channels: int) -> np.ndarray:
    mode = _MODES.get(channels)
    if mode is None:
        raise ValueError(f"channels must be 3 or 4, got {channels}")
    if img.mode != mode:
        img = img.convert(mode)
    return np.array(img, dtype=np.uint8)
