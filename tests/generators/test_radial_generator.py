"""
Unit Tests for the radial (X-shaped) chart generator.
"""

from collections import Counter

import pytest

from vision_trainer.core.geometry import Orientation, get_page_geometry
from vision_trainer.generators import generate_radial_letters


class TestGenerateRadialLetters:
    """Tests for generate_radial_letters()."""

    def test_count_when_generated_then_28_records(self):
        letters = generate_radial_letters()
        assert len(letters) == 28
        assert [letter.id for letter in letters] == list(range(28))

    def test_calls_when_repeated_then_identical(self):
        assert generate_radial_letters() == generate_radial_letters()

    def test_diagonals_when_generated_then_fixed_strings(self):
        chars = "".join(letter.char for letter in generate_radial_letters())
        assert chars == "NLVZKT" "YNTKMA" "UTYAFS" "KAXENP" "LHYE"

    def test_first_letter_when_landscape_then_outermost_top_left(self):
        first = generate_radial_letters(Orientation.LANDSCAPE)[0]
        assert (first.x, first.y, first.font_size) == (148.5 - 110, 105.0 - 75, 90.0)

    def test_center_letters_when_generated_then_offset_7mm_size_14(self):
        center = generate_radial_letters()[-4:]
        assert [(c.x, c.y) for c in center] == [
            (141.5, 98.0), (155.5, 98.0), (141.5, 112.0), (155.5, 112.0),
        ]
        assert {c.font_size for c in center} == {14.0}

    @pytest.mark.parametrize("orientation", list(Orientation))
    def test_positions_when_mirrored_then_quadrant_symmetric(self, orientation):
        # Arrange
        geo = get_page_geometry(orientation)
        letters = generate_radial_letters(orientation)

        # Act
        offsets = Counter(
            (round(abs(l.x - geo.center_x), 6), round(abs(l.y - geo.center_y), 6), l.font_size)
            for l in letters
        )

        # Assert
        assert set(offsets.values()) == {4}
