"""Pixel sampling surface: decode image bytes and stretch-fit RGBA buffers.

The converter only talks to the ``PixelSampler`` protocol, so the sampling
core can be fed synthetic numpy buffers without touching an image library.
``PillowSampler`` is the production implementation.
"""

from __future__ import annotations

import io
import logging
from typing import NamedTuple, Protocol

import numpy as np
from numpy.typing import NDArray
from PIL import Image, UnidentifiedImageError

from braillesight.engine.errors import ImageLoadError, RenderContextError

logger = logging.getLogger(__name__)

_FILTERS = {
    "nearest": Image.Resampling.NEAREST,
    "bilinear": Image.Resampling.BILINEAR,
}


class DecodedImage(NamedTuple):
    width: int
    height: int
    rgba: NDArray[np.uint8]  # (height, width, 4)


class PixelSampler(Protocol):
    def load_image(self, data: bytes) -> DecodedImage: ...

    def resample(
        self,
        rgba: NDArray[np.uint8],
        width: int,
        height: int,
        target_width: int,
        target_height: int,
    ) -> NDArray[np.uint8]: ...


class PillowSampler:
    """Pillow-backed sampler. Decoding is fully completed before returning."""

    def __init__(self, resample: str = "nearest") -> None:
        if resample not in _FILTERS:
            raise ValueError(f"Unknown resample filter: {resample!r}")
        self.resample_name = resample
        self._filter = _FILTERS[resample]

    def load_image(self, data: bytes) -> DecodedImage:
        if not data:
            raise ImageLoadError("Failed to load image: empty source")
        try:
            with Image.open(io.BytesIO(data)) as img:
                # Full decode before any sampling
                img.load()
                rgba = np.asarray(img.convert("RGBA"), dtype=np.uint8)
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError, SyntaxError) as e:
            raise ImageLoadError(f"Failed to load image: {e}") from e

        height, width = rgba.shape[:2]
        logger.debug("Decoded image %dx%d (%d bytes)", width, height, len(data))
        return DecodedImage(width=width, height=height, rgba=rgba)

    def resample(
        self,
        rgba: NDArray[np.uint8],
        width: int,
        height: int,
        target_width: int,
        target_height: int,
    ) -> NDArray[np.uint8]:
        if rgba.shape[:2] != (height, width):
            raise RenderContextError(
                f"Buffer shape {rgba.shape[:2]} does not match {height}x{width}"
            )
        try:
            surface = Image.fromarray(np.ascontiguousarray(rgba, dtype=np.uint8))
            resized = surface.resize((target_width, target_height), self._filter)
            return np.asarray(resized, dtype=np.uint8)
        except (ValueError, MemoryError, OSError) as e:
            raise RenderContextError(f"Could not create sampling surface: {e}") from e
