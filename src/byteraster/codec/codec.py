from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

import logging

import numpy as np

from byteraster.codec.config import CodecConfig

from byteraster.codec.stages.framing import stage as framing_stage
from byteraster.codec.stages.layout import stage as layout_stage
from byteraster.codec.stages.containers import stage as containers_stage
from byteraster.codec.stages.containers.config.stage_config import Config as ContainersStageConfig
from byteraster.codec.stages.containers.modules.png import decode_png, encode_png

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class PixelCodec:
    cfg: CodecConfig

    def __post_init__(self) -> None:
        layout_channels = layout_stage.channels(self.cfg.layout)
        if layout_channels != self.cfg.channels:
            raise ValueError(
                f"layout has {layout_channels} channels, codec configured for {self.cfg.channels}"
            )

    # -------------------------
    # encode: payload -> grid
    # -------------------------

    def encode(self, payload: bytes) -> np.ndarray:
        if not isinstance(payload, (bytes, bytearray)):
            raise TypeError("PixelCodec.encode: payload must be bytes-like")

        x = framing_stage.tx(bytes(payload), cfg=self.cfg.framing)
        grid = layout_stage.tx(x, cfg=self.cfg.layout)
        log.debug("encoded %d bytes into %dx%d image", len(payload), grid.shape[1], grid.shape[0])
        return grid

    # -------------------------
    # decode: grid -> payload
    # -------------------------

    def decode(self, grid: np.ndarray) -> bytes:
        x = layout_stage.rx(grid, cfg=self.cfg.layout)
        return framing_stage.rx(x, cfg=self.cfg.framing)

    # -------------------------
    # PNG bytes / files
    # -------------------------

    def encode_to_png(self, payload: bytes) -> bytes:
        return encode_png(self.encode(payload))

    def decode_from_png(self, data: bytes) -> bytes:
        return self.decode(decode_png(data, self.cfg.channels))

    def encode_file(self, in_path: PathLike, out_path: PathLike) -> np.ndarray:
        payload = Path(in_path).read_bytes()
        containers_cfg = ContainersStageConfig(tx_path=str(out_path), channels=self.cfg.channels)
        return containers_stage.tx(self.encode(payload), containers_cfg)

    def decode_file(self, in_path: PathLike, out_path: PathLike) -> bytes:
        containers_cfg = ContainersStageConfig(rx_path=str(in_path), channels=self.cfg.channels)
        payload = self.decode(containers_stage.rx(None, containers_cfg))

        p = Path(out_path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(payload)
        return payload
