"""
Module: editing.regenerate

Purpose:
    Reassign the character of every record in a layout, either
    independently at random or as a shuffle guaranteeing no repeats.
    Positions, sizes and ids are preserved.

Key Functions:
    - regenerate_letters(): Main entry point
    - shuffled_pool(): Fisher-Yates shuffle of the pool

Key Classes:
    - InsufficientPoolError: Unique assignment impossible

Dependencies:
    - random (std): Injected random.Random for reproducibility

Used By:
    - editing.layout_state: Regenerate button
    - export.pipeline: Per-page variants
"""

from __future__ import annotations

import random
from dataclasses import replace
from typing import Optional, Sequence

from vision_trainer.core.charset import get_character_pool
from vision_trainer.core.models import PositionedCharacter


class InsufficientPoolError(Exception):
    """
    More records than unique characters available.

    Attributes:
        required: Number of records needing a character
        available: Size of the character pool
    """

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(
            f"Cannot generate {required} unique characters. "
            f"Pool only has {available} characters. "
            f'Please enable "Allow Duplicates" or "Include Numbers".'
        )

    @property
    def shortfall(self) -> int:
        return self.required - self.available


def shuffled_pool(pool: str, rng: random.Random) -> list[str]:
    """Fisher-Yates shuffle, tail to head, j drawn uniformly from [0, i]."""
    chars = list(pool)
    for i in range(len(chars) - 1, 0, -1):
        j = rng.randint(0, i)
        chars[i], chars[j] = chars[j], chars[i]
    return chars


def regenerate_letters(
    letters: Sequence[PositionedCharacter],
    include_digits: bool = False,
    allow_duplicates: bool = True,
    rng: Optional[random.Random] = None,
) -> list[PositionedCharacter]:
    """
    Return a copy of the layout with fresh random characters.

    Args:
        letters: Current records (not modified)
        include_digits: Use the 36-character pool instead of 26 letters
        allow_duplicates: Draw each character independently
        rng: Random source; a fresh unseeded one when None

    Returns:
        New list of records in the same order

    Raises:
        InsufficientPoolError: If duplicates are disallowed and the pool
            is smaller than the number of records

    Example:
        >>> regenerate_letters(grid, allow_duplicates=False, rng=random.Random(7))
    """
    rng = rng or random.Random()
    pool = get_character_pool(include_digits)

    if allow_duplicates:
        return [replace(letter, char=rng.choice(pool)) for letter in letters]

    if len(pool) < len(letters):
        raise InsufficientPoolError(len(letters), len(pool))

    chars = shuffled_pool(pool, rng)
    return [replace(letter, char=char) for letter, char in zip(letters, chars)]
