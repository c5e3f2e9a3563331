"""
Module: generators

Purpose:
    Pure layout generators. Each returns a list of PositionedCharacter
    with zero-based contiguous ids in emission order.

Key Functions:
    - generate_grid_letters(): Row/column grid
    - generate_radial_letters(): X-shaped diagnostic chart
    - generate_word_letters(): Pixel-art words
    - generate_chart_letters(): Literal chart variants
"""

from .charts import CHART_VARIANTS, generate_chart_letters
from .grid import generate_grid_letters
from .radial import generate_radial_letters
from .word_shape import generate_word_letters, word_bitmap

__all__ = [
    "CHART_VARIANTS",
    "generate_chart_letters",
    "generate_grid_letters",
    "generate_radial_letters",
    "generate_word_letters",
    "word_bitmap",
]
