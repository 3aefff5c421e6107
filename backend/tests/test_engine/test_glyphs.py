"""Tests for Braille dot packing."""

from __future__ import annotations

import numpy as np
import pytest

from braillesight.engine.glyphs import (
    BRAILLE_BASE,
    DOT_OFFSETS,
    cell_dots,
    grid_to_text,
    pack_bitmap,
    pack_dots,
    sample_dot,
)


class TestPackDots:
    def test_no_dots_is_blank_cell(self):
        assert pack_dots([False] * 8) == "⠀"

    def test_all_dots_is_full_cell(self):
        assert pack_dots([True] * 8) == "⣿"

    @pytest.mark.parametrize("index", range(8))
    def test_single_dot_sets_single_bit(self, index):
        dots = [False] * 8
        dots[index] = True
        assert ord(pack_dots(dots)) == BRAILLE_BASE + (1 << index)

    def test_wrong_dot_count_rejected(self):
        with pytest.raises(ValueError):
            pack_dots([True] * 6)


def test_dot_order_is_left_three_right_three_then_bottom_row():
    assert DOT_OFFSETS == (
        (0, 0), (0, 1), (0, 2),
        (1, 0), (1, 1), (1, 2),
        (0, 3), (1, 3),
    )


def test_sample_dot_out_of_bounds_is_not_ink():
    bitmap = np.ones((4, 2), dtype=bool)
    assert sample_dot(bitmap, 1, 3) is True
    assert sample_dot(bitmap, 2, 0) is False
    assert sample_dot(bitmap, 0, 4) is False
    assert sample_dot(bitmap, -1, 0) is False


def test_cell_dots_reads_in_dot_order():
    bitmap = np.zeros((4, 2), dtype=bool)
    bitmap[3, 0] = True  # dot 7
    assert cell_dots(bitmap, 0, 0) == [False] * 6 + [True, False]


def test_pack_bitmap_matches_per_cell_packing():
    rng = np.random.default_rng(7)
    bitmap = rng.random((12, 10)) < 0.5
    rows = pack_bitmap(bitmap, cell_columns=5, cell_rows=3)
    for cy in range(3):
        for cx in range(5):
            assert rows[cy][cx] == pack_dots(cell_dots(bitmap, cx, cy))


def test_pack_bitmap_pads_missing_positions():
    bitmap = np.ones((2, 1), dtype=bool)
    rows = pack_bitmap(bitmap, cell_columns=1, cell_rows=1)
    # only dots 1 and 2 are covered
    assert rows == [[chr(BRAILLE_BASE | 0x01 | 0x02)]]


def test_grid_to_text():
    assert grid_to_text([["⠁", "⠃"], ["⠉", "⠙"]]) == "⠁⠃\n⠉⠙"
