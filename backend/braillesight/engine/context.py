"""Conversion state and the TactileGrid result type.

ConversionContext lives for exactly one ``convert`` call and is discarded
once the grid is built. TactileGrid is what callers keep.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from braillesight.engine.glyphs import CELL_HEIGHT, CELL_WIDTH, grid_to_text


@dataclass
class TactileGrid:
    """Row-major grid of single-character Braille glyphs."""

    rows: list[list[str]] = field(default_factory=list)

    @property
    def cell_rows(self) -> int:
        return len(self.rows)

    @property
    def cell_columns(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def to_text(self) -> str:
        return grid_to_text(self.rows)

    def __str__(self) -> str:
        return self.to_text()


@dataclass
class ConversionContext:
    """Per-call working state for one image → grid conversion."""

    output_width: int
    desired_height: int | None = None
    # Natural pixel dimensions of the decoded source
    image_width: int = 0
    image_height: int = 0
    # Glyph rows, from desired_height or the aspect formula
    cell_rows: int = 0
    # Stretch-fit RGBA buffer: (cell_rows*4, output_width*2, 4)
    surface: NDArray[np.uint8] | None = None
    # Ink bitmap, same height/width as surface
    bitmap: NDArray[np.bool_] | None = None
    # Stage name -> elapsed milliseconds
    timings: dict[str, float] = field(default_factory=dict)

    @property
    def dot_width(self) -> int:
        return self.output_width * CELL_WIDTH

    @property
    def dot_height(self) -> int:
        return self.cell_rows * CELL_HEIGHT
