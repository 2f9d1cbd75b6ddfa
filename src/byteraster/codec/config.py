from __future__ import annotations

from dataclasses import dataclass

from byteraster.codec.stages.framing.stage import Config as FramingStageConfig
from byteraster.codec.stages.framing.modules.headered import Config as HeaderedConfig
from byteraster.codec.stages.framing.modules.headerless import Config as HeaderlessConfig
from byteraster.codec.stages.layout.stage import Config as LayoutStageConfig
from byteraster.codec.stages.layout.modules.folded import Config as FoldedConfig
from byteraster.codec.stages.layout.modules.direct import Config as DirectConfig
from byteraster.codec.stages.compression.stage import Config as CompressionStageConfig


@dataclass(frozen=True)
class CodecConfig:
    """
    End-to-end byte <-> pixel codec configuration.

    Stages are composed in this order on encode:
      framing (compression inside headered framing) -> layout

    Decode is the inverse:
      layout -> framing

    Reading/writing the image file is left to the containers stage.
    """
    channels: int
    framing: FramingStageConfig
    layout: LayoutStageConfig

    def __post_init__(self) -> None:
        if self.channels not in (3, 4):
            raise ValueError(f"channels must be 3 or 4, got {self.channels}")


def rgba_config(compression: CompressionStageConfig = CompressionStageConfig()) -> CodecConfig:
    """
    4-channel variant: compressed, length-prefixed frame in a folded RGBA grid.
    Decoding returns exactly the encoded payload.
    """
    return CodecConfig(
        channels=4,
        framing=FramingStageConfig(module="headered", module_cfg=HeaderedConfig(compression=compression)),
        layout=LayoutStageConfig(module="folded", module_cfg=FoldedConfig(channels=4)),
    )


def rgb_config() -> CodecConfig:
    """
    3-channel variant: raw payload in a direct RGB grid, no header.
    Decoding returns the payload followed by its zero padding.
    """
    return CodecConfig(
        channels=3,
        framing=FramingStageConfig(module="headerless", module_cfg=HeaderlessConfig()),
        layout=LayoutStageConfig(module="direct", module_cfg=DirectConfig(channels=3)),
    )


VARIANTS = {
    "rgba": rgba_config,
    "rgb": rgb_config,
}


def config_for_variant(name: str) -> CodecConfig:
    try:
        factory = VARIANTS[name]
    except KeyError:
        raise ValueError(f"unknown variant {name!r}; expected one of {sorted(VARIANTS)}") from None
    return factory()
