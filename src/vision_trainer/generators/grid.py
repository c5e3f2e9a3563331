"""
Module: generators.grid

Purpose:
    Uniform row/column grid of letters spanning the page inside a
    fixed margin. Characters cycle through the alphabet.

Key Functions:
    - generate_grid_letters(): Main entry point

Used By:
    - presets.builtins: "Standard Grid"
    - gui.main_window: Apply grid size
"""

from __future__ import annotations

from vision_trainer.core.charset import LETTERS
from vision_trainer.core.geometry import Orientation, get_page_geometry
from vision_trainer.core.models import PositionedCharacter

DEFAULT_ROWS = 4
DEFAULT_COLS = 7
GRID_MARGIN_MM = 20.0
GRID_FONT_SIZE = 12.0


def _step(span: float, count: int) -> float:
    # A single row/column collapses onto the margin line
    return span / (count - 1) if count > 1 else 0.0


def generate_grid_letters(
    rows: int = DEFAULT_ROWS,
    cols: int = DEFAULT_COLS,
    orientation: Orientation = Orientation.LANDSCAPE,
    *,
    margin_mm: float = GRID_MARGIN_MM,
    font_size: float = GRID_FONT_SIZE,
) -> list[PositionedCharacter]:
    """
    Place rows*cols letters on an evenly spaced grid.

    Records are emitted row-major with ids 0..rows*cols-1. The letter for
    record i is LETTERS[i % 26], so grids larger than 26 cells repeat.

    Args:
        rows: Number of rows (0 yields an empty layout)
        cols: Number of columns (0 yields an empty layout)
        orientation: Page orientation
        margin_mm: Distance from each page edge to the outer grid lines
        font_size: Size given to every record (pt)

    Returns:
        List of PositionedCharacter

    Raises:
        ValueError: If rows or cols is negative

    Example:
        >>> letters = generate_grid_letters(4, 7)
        >>> (letters[0].x, letters[0].y, letters[0].char)
        (20.0, 20.0, 'A')
    """
    if rows < 0 or cols < 0:
        raise ValueError(f"rows and cols must be non-negative: {rows}x{cols}")

    geometry = get_page_geometry(orientation)
    step_x = _step(geometry.width_mm - margin_mm * 2, cols)
    step_y = _step(geometry.height_mm - margin_mm * 2, rows)

    letters: list[PositionedCharacter] = []
    for r in range(rows):
        for c in range(cols):
            index = len(letters)
            letters.append(
                PositionedCharacter(
                    id=index,
                    char=LETTERS[index % len(LETTERS)],
                    x=margin_mm + c * step_x,
                    y=margin_mm + r * step_y,
                    font_size=font_size,
                )
            )
    return letters
