"""Shared test fixtures."""

from __future__ import annotations

import io

import numpy as np
import pytest
from PIL import Image

BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)

# Top-left and bottom-right black, the other two white.
# Stretched to 2×4 dots (nearest): left column ink in rows 0-1, right column
# ink in rows 2-3 → dots 1, 2, 6, 8 → bits 0, 1, 5, 7 → U+28A3.
DIAGONAL_2X2 = [
    [BLACK, WHITE],
    [WHITE, BLACK],
]
DIAGONAL_2X2_GLYPH = chr(0x2800 | 0x01 | 0x02 | 0x20 | 0x80)

BRAILLE_BLANK = "⠀"
BRAILLE_FULL = "⣿"


def rgba_array(pixels: list[list[tuple[int, int, int, int]]]) -> np.ndarray:
    return np.array(pixels, dtype=np.uint8)


def solid_rgba(width: int, height: int, color: tuple[int, int, int, int]) -> np.ndarray:
    arr = np.empty((height, width, 4), dtype=np.uint8)
    arr[...] = color
    return arr


def png_bytes(rgba: np.ndarray) -> bytes:
    buf = io.BytesIO()
    Image.fromarray(np.ascontiguousarray(rgba, dtype=np.uint8)).save(buf, format="PNG")
    return buf.getvalue()


class IdentitySampler:
    """Numpy-only sampler: nearest-neighbour index mapping, no image library."""

    def load_image(self, data: bytes):
        raise NotImplementedError

    def resample(self, rgba, width, height, target_width, target_height):
        ys = (np.arange(target_height) * height) // target_height
        xs = (np.arange(target_width) * width) // target_width
        return rgba[ys][:, xs]


@pytest.fixture
def diagonal_png() -> bytes:
    return png_bytes(rgba_array(DIAGONAL_2X2))


@pytest.fixture
def landscape_png() -> bytes:
    """200×100 white image with a black left half."""
    arr = solid_rgba(200, 100, WHITE)
    arr[:, :100] = BLACK
    return png_bytes(arr)


@pytest.fixture
def identity_sampler() -> IdentitySampler:
    return IdentitySampler()
