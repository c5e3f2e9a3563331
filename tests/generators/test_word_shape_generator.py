"""
Unit Tests for the pixel-font word generator.
"""

import random

from vision_trainer.core.charset import LETTERS
from vision_trainer.generators import generate_word_letters, word_bitmap
from vision_trainer.generators.word_shape import CELL_SIZE_MM, WORD_FONT_SIZE


class TestWordBitmap:
    """Tests for word_bitmap()."""

    def test_bitmap_when_single_glyph_then_glyph_plus_spacing(self):
        rows = word_bitmap("L")
        assert rows == [
            [1, 0, 0, 0],
            [1, 0, 0, 0],
            [1, 0, 0, 0],
            [1, 0, 0, 0],
            [1, 1, 1, 0],
        ]

    def test_bitmap_when_unknown_char_then_blank_glyph_plus_spacing(self):
        assert word_bitmap("?") == [[0, 0, 0]] * 5

    def test_bitmap_when_lowercase_then_same_as_uppercase(self):
        assert word_bitmap("hello") == word_bitmap("HELLO")


class TestGenerateWordLetters:
    """Tests for generate_word_letters()."""

    def test_count_when_hello_world_then_one_letter_per_lit_cell(self):
        letters = generate_word_letters(rng=random.Random(0))
        assert len(letters) == 48 + 54
        assert [letter.id for letter in letters] == list(range(102))

    def test_layout_when_hello_then_centered_and_lifted(self):
        letters = generate_word_letters(rng=random.Random(0))
        first = letters[0]

        # HELLO is 20 columns wide, so it starts 80mm left of center
        assert first.x == 148.5 - 80.0
        assert first.y == 105.0 / 2 - 20.0
        assert first.font_size == WORD_FONT_SIZE

    def test_layout_when_world_then_starts_below_center(self):
        letters = generate_word_letters(rng=random.Random(0))
        world = letters[48:]
        assert min(letter.y for letter in world) == 105.0 + 52.5 - 20.0
        assert max(letter.y for letter in world) == 105.0 + 52.5 - 20.0 + 4 * CELL_SIZE_MM

    def test_chars_when_seeded_then_reproducible_letters(self):
        a = generate_word_letters(rng=random.Random(99))
        b = generate_word_letters(rng=random.Random(99))
        assert a == b
        assert all(letter.char in LETTERS for letter in a)
