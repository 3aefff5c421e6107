"""BrailleSight raster-to-Braille conversion engine."""

from braillesight.engine.config import ConverterConfig
from braillesight.engine.context import ConversionContext, TactileGrid
from braillesight.engine.converter import RasterToTactileGridConverter
from braillesight.engine.errors import (
    BrailleSightError,
    ImageLoadError,
    InvalidArgumentError,
    RenderContextError,
)
from braillesight.engine.sampler import DecodedImage, PillowSampler, PixelSampler

__all__ = [
    "ConverterConfig",
    "ConversionContext",
    "TactileGrid",
    "RasterToTactileGridConverter",
    "BrailleSightError",
    "ImageLoadError",
    "InvalidArgumentError",
    "RenderContextError",
    "DecodedImage",
    "PillowSampler",
    "PixelSampler",
]
