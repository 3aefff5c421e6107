"""Raster image → tactile Braille grid converter.

Stages, each timed into ``ConversionContext.timings``:

1. decode: resolve the source to bytes and fully decode it (worker thread)
2. size: cell_rows from desired_height or the dot-aspect formula
3. resample: stretch-fit onto (output_width*2) × (cell_rows*4) dots
4. binarize: BT.601 luminance, ink = L < threshold
5. pack: 2×4 dot blocks → U+2800 + bits, rows top-to-bottom
"""

from __future__ import annotations

import asyncio
import logging
import math
import time

import numpy as np
from numpy.typing import NDArray

from braillesight.engine.config import ConverterConfig
from braillesight.engine.context import ConversionContext, TactileGrid
from braillesight.engine.errors import InvalidArgumentError, RenderContextError
from braillesight.engine.glyphs import pack_bitmap
from braillesight.engine.sampler import DecodedImage, PillowSampler, PixelSampler
from braillesight.engine.sources import ImageSource, read_source

logger = logging.getLogger(__name__)

# ITU-R BT.601 luma weights for R, G, B
_LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114], dtype=np.float64)


def compute_cell_rows(
    output_width: int,
    image_width: int,
    image_height: int,
    desired_height: int | None = None,
    dot_aspect: float = 0.5,
) -> int:
    """Glyph rows for the output grid.

    ``desired_height`` wins when given; otherwise
    ``floor(output_width * (image_height / image_width) * dot_aspect)``.
    """
    if desired_height is not None:
        return desired_height
    if image_width <= 0 or image_height <= 0:
        raise InvalidArgumentError(
            f"Image has a zero dimension ({image_width}x{image_height})"
        )
    return math.floor(output_width * (image_height / image_width) * dot_aspect)


def luminance(rgba: NDArray[np.uint8]) -> NDArray[np.float64]:
    """Per-pixel 0.299R + 0.587G + 0.114B. Alpha is ignored."""
    return rgba[..., :3].astype(np.float64) @ _LUMA_WEIGHTS


def binarize(rgba: NDArray[np.uint8], threshold: float = 128.0) -> NDArray[np.bool_]:
    """Ink bitmap: True where luminance is strictly below the threshold."""
    return luminance(rgba) < threshold


def _validate_sizes(
    output_width: int,
    desired_height: int | None,
    max_rows: int | None = None,
) -> None:
    if output_width < 1:
        raise InvalidArgumentError(f"output_width must be >= 1, got {output_width}")
    if desired_height is not None and desired_height < 1:
        raise InvalidArgumentError(f"desired_height must be >= 1, got {desired_height}")
    if desired_height is not None and max_rows is not None and desired_height > max_rows:
        raise InvalidArgumentError(
            f"desired_height {desired_height} exceeds the maximum of {max_rows}"
        )


def _validate_grid(cell_columns: int, cell_rows: int) -> None:
    if cell_columns < 1 or cell_rows < 1:
        raise InvalidArgumentError(
            f"Grid must be at least 1x1 cells, got {cell_columns}x{cell_rows}"
        )


class RasterToTactileGridConverter:
    """Converts raster images to grids of 8-dot Braille glyphs.

    Stateless between calls; one instance can serve concurrent conversions.
    """

    def __init__(
        self,
        sampler: PixelSampler | None = None,
        config: ConverterConfig | None = None,
        fetch_timeout_seconds: float = 10.0,
        max_source_bytes: int | None = None,
    ) -> None:
        self.config = config or ConverterConfig()
        self.sampler = sampler or PillowSampler(self.config.resample)
        self.fetch_timeout_seconds = fetch_timeout_seconds
        self.max_source_bytes = max_source_bytes

    async def convert(
        self,
        source: ImageSource,
        output_width: int | None = None,
        desired_height: int | None = None,
    ) -> TactileGrid:
        """Load ``source`` and convert it. Sampling starts only after a full decode."""
        if output_width is None:
            output_width = self.config.default_width
        _validate_sizes(output_width, desired_height, self.config.max_rows)

        t0 = time.perf_counter()
        data = await read_source(
            source,
            timeout_seconds=self.fetch_timeout_seconds,
            max_bytes=self.max_source_bytes,
        )
        decoded = await asyncio.to_thread(self.sampler.load_image, data)
        decode_ms = (time.perf_counter() - t0) * 1000

        ctx = ConversionContext(output_width=output_width, desired_height=desired_height)
        ctx.timings["decode"] = decode_ms
        return await asyncio.to_thread(self._run, ctx, decoded)

    def convert_pixels(
        self,
        rgba: NDArray[np.uint8],
        output_width: int | None = None,
        desired_height: int | None = None,
    ) -> TactileGrid:
        """Convert an already-decoded (height, width, 4) RGBA buffer."""
        if output_width is None:
            output_width = self.config.default_width
        _validate_sizes(output_width, desired_height, self.config.max_rows)

        rgba = np.asarray(rgba, dtype=np.uint8)
        if rgba.ndim != 3 or rgba.shape[2] != 4:
            raise InvalidArgumentError(f"Expected an (H, W, 4) RGBA buffer, got {rgba.shape}")
        height, width = rgba.shape[:2]

        ctx = ConversionContext(output_width=output_width, desired_height=desired_height)
        return self._run(ctx, DecodedImage(width=width, height=height, rgba=rgba))

    def binarize(self, rgba: NDArray[np.uint8]) -> NDArray[np.bool_]:
        return binarize(rgba, self.config.threshold)

    def bitmap_to_grid(
        self,
        bitmap: NDArray[np.bool_],
        cell_columns: int,
        cell_rows: int,
    ) -> TactileGrid:
        """Pack an ink bitmap. Positions outside the bitmap read as not-ink."""
        _validate_grid(cell_columns, cell_rows)
        return TactileGrid(rows=pack_bitmap(np.asarray(bitmap, dtype=np.bool_), cell_columns, cell_rows))

    def _run(self, ctx: ConversionContext, decoded: DecodedImage) -> TactileGrid:
        start = time.perf_counter()
        ctx.image_width = decoded.width
        ctx.image_height = decoded.height

        t0 = time.perf_counter()
        if decoded.width <= 0 or decoded.height <= 0:
            raise InvalidArgumentError(
                f"Image has a zero dimension ({decoded.width}x{decoded.height})"
            )
        ctx.cell_rows = compute_cell_rows(
            ctx.output_width,
            decoded.width,
            decoded.height,
            ctx.desired_height,
            self.config.dot_aspect,
        )
        if ctx.cell_rows < 1:
            raise InvalidArgumentError(
                f"Image {decoded.width}x{decoded.height} at width {ctx.output_width} "
                "yields zero glyph rows; pass desired_height or a larger width"
            )
        if self.config.max_rows is not None and ctx.cell_rows > self.config.max_rows:
            raise InvalidArgumentError(
                f"Output would be {ctx.cell_rows} glyph rows, "
                f"more than the maximum of {self.config.max_rows}"
            )
        ctx.timings["size"] = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        ctx.surface = self.sampler.resample(
            decoded.rgba,
            decoded.width,
            decoded.height,
            ctx.dot_width,
            ctx.dot_height,
        )
        if ctx.surface is None or ctx.surface.ndim != 3:
            raise RenderContextError("Sampler did not return an (H, W, channels) surface")
        if ctx.surface.shape[:2] != (ctx.dot_height, ctx.dot_width):
            # Uncovered dots read as not-ink; extra pixels are never sampled
            logger.debug(
                "Surface %dx%d differs from dot grid %dx%d",
                ctx.surface.shape[1],
                ctx.surface.shape[0],
                ctx.dot_width,
                ctx.dot_height,
            )
        ctx.timings["resample"] = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        ctx.bitmap = self.binarize(ctx.surface)
        ctx.timings["binarize"] = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        grid = self.bitmap_to_grid(ctx.bitmap, ctx.output_width, ctx.cell_rows)
        ctx.timings["pack"] = (time.perf_counter() - t0) * 1000

        for stage, elapsed in ctx.timings.items():
            logger.debug("  %s completed in %.1fms", stage, elapsed)
        logger.info(
            "Converted %dx%d image to %dx%d glyphs in %.0fms",
            ctx.image_width,
            ctx.image_height,
            grid.cell_columns,
            grid.cell_rows,
            (time.perf_counter() - start) * 1000,
        )
        return grid
