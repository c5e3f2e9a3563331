"""
Unit Tests for the literal chart variants.
"""

import pytest

from vision_trainer.generators import CHART_VARIANTS, generate_chart_letters


class TestGenerateChartLetters:
    """Tests for generate_chart_letters()."""

    @pytest.mark.parametrize("name", list(CHART_VARIANTS))
    def test_chart_when_known_then_records_match_table(self, name):
        letters = generate_chart_letters(name)

        assert len(letters) == len(CHART_VARIANTS[name])
        assert [letter.id for letter in letters] == list(range(len(letters)))
        for letter, (char, x, y, size) in zip(letters, CHART_VARIANTS[name]):
            assert (letter.char, letter.x, letter.y, letter.font_size) == (char, x, y, size)

    @pytest.mark.parametrize("name", list(CHART_VARIANTS))
    def test_chart_when_known_then_fits_landscape_page(self, name):
        for letter in generate_chart_letters(name):
            assert 0 <= letter.x <= 297
            assert 0 <= letter.y <= 210

    def test_chart_when_unknown_name_then_raises_key_error(self):
        with pytest.raises(KeyError):
            generate_chart_letters("Snellen 20/20")
