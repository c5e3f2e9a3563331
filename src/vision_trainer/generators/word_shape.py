"""
Module: generators.word_shape

Purpose:
    Spell words as 5-row pixel art, one random letter per lit pixel.
    Two words are stacked: one above the page center, one below.

Key Functions:
    - word_bitmap(): Expand text into a 5-row 0/1 bitmap
    - generate_word_letters(): Positioned records for two words
"""

from __future__ import annotations

import random
from typing import Optional

from vision_trainer.core.charset import LETTERS
from vision_trainer.core.geometry import Orientation, get_page_geometry
from vision_trainer.core.models import PositionedCharacter

GLYPH_ROWS = 5
CELL_SIZE_MM = 8.0
WORD_FONT_SIZE = 10.0
CHAR_SPACING = 1  # blank columns after each non-space glyph
VERTICAL_LIFT_MM = 20.0

PIXEL_FONT: dict[str, tuple[str, ...]] = {
    "H": ("101", "101", "111", "101", "101"),
    "E": ("111", "100", "111", "100", "111"),
    "L": ("100", "100", "100", "100", "111"),
    "O": ("111", "101", "101", "101", "111"),
    "W": ("10001", "10001", "10101", "10101", "11011"),
    "R": ("111", "101", "110", "101", "101"),
    "D": ("110", "101", "101", "101", "110"),
    "!": ("1", "1", "1", "0", "1"),
    " ": ("00", "00", "00", "00", "00"),
}


def word_bitmap(text: str) -> list[list[int]]:
    """
    Expand text into a GLYPH_ROWS-row bitmap.

    Characters missing from PIXEL_FONT render as a space.
    """
    rows: list[list[int]] = [[] for _ in range(GLYPH_ROWS)]
    for char in text.upper():
        glyph = PIXEL_FONT.get(char, PIXEL_FONT[" "])
        for row, pattern in zip(rows, glyph):
            row.extend(int(bit) for bit in pattern)
            if char != " ":
                row.extend([0] * CHAR_SPACING)
    return rows


def generate_word_letters(
    top_text: str = "HELLO",
    bottom_text: str = "WORLD",
    orientation: Orientation = Orientation.LANDSCAPE,
    rng: Optional[random.Random] = None,
) -> list[PositionedCharacter]:
    """
    Place one random letter on every lit pixel of two pixel-art words.

    Each word is centered horizontally. The top word starts at
    center_y/2 - 20mm, the bottom word at 1.5*center_y - 20mm.

    Args:
        top_text: Word drawn above the center
        bottom_text: Word drawn below the center
        orientation: Page orientation
        rng: Random source for the displayed letters

    Returns:
        List of PositionedCharacter, top word first
    """
    rng = rng or random.Random()
    geometry = get_page_geometry(orientation)
    letters: list[PositionedCharacter] = []

    placements = (
        (top_text, geometry.center_y / 2 - VERTICAL_LIFT_MM),
        (bottom_text, geometry.center_y + geometry.center_y / 2 - VERTICAL_LIFT_MM),
    )
    for text, top_y in placements:
        bitmap = word_bitmap(text)
        width_mm = len(bitmap[0]) * CELL_SIZE_MM
        start_x = geometry.center_x - width_mm / 2
        for row_index, row in enumerate(bitmap):
            for col_index, lit in enumerate(row):
                if not lit:
                    continue
                letters.append(
                    PositionedCharacter(
                        id=len(letters),
                        char=rng.choice(LETTERS),
                        x=start_x + col_index * CELL_SIZE_MM,
                        y=top_y + row_index * CELL_SIZE_MM,
                        font_size=WORD_FONT_SIZE,
                    )
                )
    return letters
