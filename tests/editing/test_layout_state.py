"""
Unit Tests for LayoutState.
"""

import random

import pytest

from vision_trainer.editing import InsufficientPoolError, LayoutState


class TestLayoutStateQueries:
    """Tests for lookup and selection."""

    def test_get_when_unknown_id_then_raises_key_error(self, small_layout):
        state = LayoutState(small_layout)
        with pytest.raises(KeyError):
            state.get(99)

    def test_select_when_known_id_then_selected_letter_returned(self, small_layout):
        state = LayoutState(small_layout)
        state.select(5)
        assert state.selected_letter.char == "C"

    def test_select_when_unknown_id_then_raises_and_keeps_selection(self, small_layout):
        state = LayoutState(small_layout, selected_id=1)
        with pytest.raises(KeyError):
            state.select(42)
        assert state.selected_id == 1

    def test_snapshot_when_state_changes_later_then_snapshot_unaffected(self, small_layout):
        # Arrange
        state = LayoutState(small_layout)
        snapshot = state.snapshot()

        # Act
        state.update_letter(0, "x", 99.0)

        # Assert
        assert snapshot[0].x == 20.0


class TestLayoutStateMutation:
    """Tests for point updates, add/remove and regeneration."""

    def test_update_when_valid_field_then_only_that_record_changes(self, small_layout):
        state = LayoutState(small_layout)

        updated = state.update_letter(1, "font_size", 30)

        assert updated.font_size == 30.0
        assert state.get(1).font_size == 30.0
        assert state.get(0) == small_layout[0]
        assert [letter.id for letter in state.letters] == [0, 1, 5]

    def test_update_when_unknown_id_then_raises_key_error(self, small_layout):
        with pytest.raises(KeyError):
            LayoutState(small_layout).update_letter(7, "x", 1.0)

    def test_update_when_unknown_field_then_raises_value_error(self, small_layout):
        with pytest.raises(ValueError):
            LayoutState(small_layout).update_letter(0, "color", "red")

    def test_move_when_called_then_both_axes_written(self, small_layout):
        state = LayoutState(small_layout)
        state.move_letter(5, 1.5, 2.5)
        assert (state.get(5).x, state.get(5).y) == (1.5, 2.5)

    def test_add_when_after_remove_then_id_not_reused(self, small_layout):
        # Arrange
        state = LayoutState(small_layout)
        added = state.add_letter("Q", 10, 10, 12)
        state.remove_letter(added.id)

        # Act
        again = state.add_letter("R", 10, 10, 12)

        # Assert
        assert added.id == 6
        assert again.id == 7

    def test_remove_when_selected_then_selection_cleared(self, small_layout):
        state = LayoutState(small_layout, selected_id=1)
        state.remove_letter(1)
        assert state.selected_id is None
        assert len(state) == 2

    def test_replace_when_duplicate_ids_then_raises_value_error(self, small_layout):
        with pytest.raises(ValueError, match="unique"):
            LayoutState(small_layout + small_layout[:1])

    def test_replace_when_new_layout_has_lower_ids_then_added_id_still_fresh(self, small_layout, grid_letters):
        # Arrange
        state = LayoutState(grid_letters)
        state.add_letter("Q", 10, 10, 12)

        # Act
        state.replace_letters(small_layout)
        added = state.add_letter("R", 10, 10, 12)

        # Assert
        assert added.id == 29

    def test_replace_when_called_then_selection_cleared(self, small_layout, grid_letters):
        state = LayoutState(small_layout, selected_id=0)
        state.replace_letters(grid_letters)
        assert state.selected_id is None
        assert len(state) == 28

    def test_regenerate_when_pool_too_small_then_layout_unchanged(self, grid_letters):
        # Arrange
        state = LayoutState(grid_letters, selected_id=3)
        before = state.letters

        # Act / Assert
        with pytest.raises(InsufficientPoolError):
            state.regenerate(include_digits=False, allow_duplicates=False, rng=random.Random(1))
        assert state.letters == before
        assert state.selected_id == 3

    def test_regenerate_when_successful_then_selection_cleared(self, grid_letters):
        state = LayoutState(grid_letters, selected_id=3)
        state.regenerate(include_digits=True, allow_duplicates=False, rng=random.Random(1))
        assert state.selected_id is None
        assert len({letter.char for letter in state.letters}) == 28
