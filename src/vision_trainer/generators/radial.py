"""
Module: generators.radial

Purpose:
    The "MacDonald" X-shaped diagnostic chart: four six-letter diagonals
    mirrored into the quadrants around the page center, shrinking toward
    the middle, plus a four-letter center cluster. Fully deterministic.

Key Functions:
    - generate_radial_letters(): 28 fixed records
"""

from __future__ import annotations

from vision_trainer.core.geometry import Orientation, get_page_geometry
from vision_trainer.core.models import PositionedCharacter

# (dx mm, dy mm, font size pt), outermost first
DIAGONAL_STEPS: tuple[tuple[float, float, float], ...] = (
    (110, 75, 90),
    (85, 55, 65),
    (65, 40, 48),
    (48, 28, 36),
    (35, 18, 24),
    (24, 10, 16),
)

# (characters, x sign, y sign); y grows downwards
DIAGONALS: tuple[tuple[str, int, int], ...] = (
    ("NLVZKT", -1, -1),
    ("YNTKMA", 1, -1),
    ("UTYAFS", -1, 1),
    ("KAXENP", 1, 1),
)

CENTER_OFFSET_MM = 7.0
CENTER_FONT_SIZE = 14.0
CENTER_CHARS: tuple[tuple[str, int, int], ...] = (
    ("L", -1, -1),
    ("H", 1, -1),
    ("Y", -1, 1),
    ("E", 1, 1),
)


def generate_radial_letters(
    orientation: Orientation = Orientation.LANDSCAPE,
) -> list[PositionedCharacter]:
    """
    Build the X-pattern chart around the page center.

    Returns:
        28 records: 24 diagonal letters then 4 center letters
    """
    geometry = get_page_geometry(orientation)
    cx, cy = geometry.center_x, geometry.center_y
    letters: list[PositionedCharacter] = []

    for chars, qx, qy in DIAGONALS:
        for char, (dx, dy, size) in zip(chars, DIAGONAL_STEPS):
            letters.append(
                PositionedCharacter(
                    id=len(letters),
                    char=char,
                    x=cx + dx * qx,
                    y=cy + dy * qy,
                    font_size=float(size),
                )
            )

    for char, qx, qy in CENTER_CHARS:
        letters.append(
            PositionedCharacter(
                id=len(letters),
                char=char,
                x=cx + CENTER_OFFSET_MM * qx,
                y=cy + CENTER_OFFSET_MM * qy,
                font_size=CENTER_FONT_SIZE,
            )
        )

    return letters
