"""Tests for the Pillow sampling surface."""

from __future__ import annotations

import io

import numpy as np
import pytest
from PIL import Image

from braillesight.engine.errors import ImageLoadError, RenderContextError
from braillesight.engine.sampler import PillowSampler
from tests.conftest import DIAGONAL_2X2, png_bytes, rgba_array


def test_load_png_returns_rgba():
    decoded = PillowSampler().load_image(png_bytes(rgba_array(DIAGONAL_2X2)))
    assert (decoded.width, decoded.height) == (2, 2)
    assert decoded.rgba.shape == (2, 2, 4)
    assert decoded.rgba.dtype == np.uint8
    assert decoded.rgba[0, 0].tolist() == [0, 0, 0, 255]


def test_load_grayscale_jpeg_converts_to_rgba():
    buf = io.BytesIO()
    Image.new("L", (5, 3), color=200).save(buf, format="JPEG")
    decoded = PillowSampler().load_image(buf.getvalue())
    assert decoded.rgba.shape == (3, 5, 4)
    assert decoded.rgba[..., 3].min() == 255


def test_truncated_png_fails_to_load():
    noise = np.random.default_rng(3).integers(0, 256, size=(64, 64, 4), dtype=np.uint8)
    data = png_bytes(noise)
    with pytest.raises(ImageLoadError):
        PillowSampler().load_image(data[: len(data) // 2])


def test_empty_source_fails_to_load():
    with pytest.raises(ImageLoadError):
        PillowSampler().load_image(b"")


def test_nearest_stretch():
    rgba = rgba_array(DIAGONAL_2X2)
    out = PillowSampler("nearest").resample(rgba, 2, 2, 2, 4)
    assert out.shape == (4, 2, 4)
    # rows 0-1 come from source row 0, rows 2-3 from source row 1
    assert out[:, 0, 0].tolist() == [0, 0, 255, 255]
    assert out[:, 1, 0].tolist() == [255, 255, 0, 0]


def test_bilinear_filter_available():
    rgba = rgba_array(DIAGONAL_2X2)
    out = PillowSampler("bilinear").resample(rgba, 2, 2, 4, 8)
    assert out.shape == (8, 4, 4)


def test_unknown_filter_rejected():
    with pytest.raises(ValueError):
        PillowSampler("lanczos-ish")


def test_mismatched_buffer_is_render_error():
    with pytest.raises(RenderContextError):
        PillowSampler().resample(np.zeros((3, 3, 4), dtype=np.uint8), 4, 4, 2, 4)
