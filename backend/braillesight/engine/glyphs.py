"""Braille glyph packing: 2×4 dot blocks to Unicode Braille Patterns.

Each Braille character (U+2800–U+28FF) encodes a 2-wide × 4-tall dot matrix.
Dot numbering is column-major with the bottom row appended last:

    1 4
    2 5
    3 6
    7 8

Bit ``i`` of the code point offset is set iff dot ``i + 1`` is raised.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

BRAILLE_BASE = 0x2800
BRAILLE_LAST = 0x28FF

CELL_WIDTH = 2
CELL_HEIGHT = 4

# (dx, dy) offsets inside a cell, in dot-number order (dot 1 first).
# Left column top three, right column top three, then left-bottom, right-bottom.
DOT_OFFSETS: tuple[tuple[int, int], ...] = (
    (0, 0),
    (0, 1),
    (0, 2),
    (1, 0),
    (1, 1),
    (1, 2),
    (0, 3),
    (1, 3),
)


def pack_dots(dots: Sequence[bool]) -> str:
    """Pack 8 dot states (dot 1 first) into one Braille character."""
    if len(dots) != len(DOT_OFFSETS):
        raise ValueError(f"A Braille cell has {len(DOT_OFFSETS)} dots, got {len(dots)}")
    cp = BRAILLE_BASE
    for i, raised in enumerate(dots):
        if raised:
            cp |= 1 << i
    return chr(cp)


def sample_dot(bitmap: NDArray[np.bool_], x: int, y: int) -> bool:
    """Read one bitmap position; anything outside the bitmap is not ink."""
    height, width = bitmap.shape
    if 0 <= y < height and 0 <= x < width:
        return bool(bitmap[y, x])
    return False


def cell_dots(bitmap: NDArray[np.bool_], cx: int, cy: int) -> list[bool]:
    """The 8 samples for glyph cell (cx, cy), in dot-number order."""
    x0 = cx * CELL_WIDTH
    y0 = cy * CELL_HEIGHT
    return [sample_dot(bitmap, x0 + dx, y0 + dy) for dx, dy in DOT_OFFSETS]


def pack_bitmap(
    bitmap: NDArray[np.bool_],
    cell_columns: int,
    cell_rows: int,
) -> list[list[str]]:
    """Pack a boolean bitmap into a cell_rows × cell_columns grid of glyphs.

    The bitmap is copied into a zeroed canvas of exactly
    ``cell_rows*4 × cell_columns*2`` so positions the bitmap does not cover
    read as not-ink and positions beyond the canvas are ignored.
    """
    canvas = np.zeros((cell_rows * CELL_HEIGHT, cell_columns * CELL_WIDTH), dtype=np.bool_)
    h = min(bitmap.shape[0], canvas.shape[0])
    w = min(bitmap.shape[1], canvas.shape[1])
    canvas[:h, :w] = bitmap[:h, :w]

    codes = np.full((cell_rows, cell_columns), BRAILLE_BASE, dtype=np.int32)
    for bit, (dx, dy) in enumerate(DOT_OFFSETS):
        plane = canvas[dy::CELL_HEIGHT, dx::CELL_WIDTH]
        codes |= plane.astype(np.int32) << bit

    return [[chr(int(cp)) for cp in row] for row in codes]


def grid_to_text(rows: Sequence[Sequence[str]]) -> str:
    """Join cells with no separator and rows with newlines."""
    return "\n".join("".join(row) for row in rows)
