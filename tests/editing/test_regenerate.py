"""
Unit Tests for character regeneration.
"""

import random

import pytest

from vision_trainer.core.charset import LETTERS, get_character_pool
from vision_trainer.editing import InsufficientPoolError, regenerate_letters, shuffled_pool
from vision_trainer.generators import generate_grid_letters


class TestShuffledPool:
    """Tests for shuffled_pool()."""

    def test_shuffle_when_seeded_then_permutation_of_pool(self):
        chars = shuffled_pool(LETTERS, random.Random(3))
        assert sorted(chars) == sorted(LETTERS)

    def test_shuffle_when_same_seed_then_same_order(self):
        assert shuffled_pool(LETTERS, random.Random(3)) == shuffled_pool(LETTERS, random.Random(3))


class TestRegenerateLetters:
    """Tests for regenerate_letters()."""

    def test_regenerate_when_duplicates_allowed_then_same_positions_new_chars(self, grid_letters, rng):
        # Act
        result = regenerate_letters(grid_letters, allow_duplicates=True, rng=rng)

        # Assert
        assert len(result) == len(grid_letters)
        for before, after in zip(grid_letters, result):
            assert (after.id, after.x, after.y, after.font_size) == (
                before.id, before.x, before.y, before.font_size,
            )
            assert after.char in LETTERS

    def test_regenerate_when_digits_included_then_chars_from_36_pool(self, rng):
        letters = generate_grid_letters(20, 30)
        result = regenerate_letters(letters, include_digits=True, rng=rng)
        pool = get_character_pool(True)

        assert all(letter.char in pool for letter in result)
        assert any(letter.char.isdigit() for letter in result)

    def test_regenerate_when_unique_and_pool_suffices_then_pairwise_distinct(self, grid_letters, rng):
        result = regenerate_letters(grid_letters, include_digits=True, allow_duplicates=False, rng=rng)
        chars = [letter.char for letter in result]
        assert len(set(chars)) == len(chars) == 28

    def test_regenerate_when_unique_and_exactly_26_then_uses_whole_alphabet(self, rng):
        letters = generate_grid_letters(2, 13)
        result = regenerate_letters(letters, allow_duplicates=False, rng=rng)
        assert sorted(letter.char for letter in result) == sorted(LETTERS)

    def test_regenerate_when_unique_and_pool_too_small_then_raises_error(self, grid_letters, rng):
        with pytest.raises(InsufficientPoolError) as excinfo:
            regenerate_letters(grid_letters, allow_duplicates=False, rng=rng)

        error = excinfo.value
        assert (error.required, error.available, error.shortfall) == (28, 26, 2)
        assert "Cannot generate 28 unique characters" in str(error)
        assert "Allow Duplicates" in str(error)

    def test_regenerate_when_called_then_input_unchanged(self, grid_letters, rng):
        original = list(grid_letters)
        regenerate_letters(grid_letters, rng=rng)
        assert grid_letters == original

    def test_regenerate_when_empty_layout_then_empty_result(self, rng):
        assert regenerate_letters([], allow_duplicates=False, rng=rng) == []
