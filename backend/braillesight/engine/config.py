"""Converter configuration: sampling constants."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ConverterConfig:
    """Controls how a raster image is sampled onto the Braille dot grid."""

    # Luminance threshold: midpoint of an 8-bit channel. L < threshold = ink.
    threshold: float = 128.0

    # Dot-aspect compensation: a glyph cell is 4 dots tall but only 2 wide,
    # so the cell row count is halved relative to the image aspect ratio.
    dot_aspect: float = 0.5

    # Output width in glyph cells when the caller gives none
    default_width: int = 40

    # Upper bound on glyph rows, explicit or from the aspect formula. None = unbounded
    max_rows: int | None = None

    # Stretch-fit filter: "nearest" or "bilinear"
    resample: str = "nearest"
