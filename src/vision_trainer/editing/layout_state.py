"""
Module: editing.layout_state

Purpose:
    The editable, in-memory layout: an ordered collection of
    PositionedCharacter plus the currently selected id.

Key Classes:
    - LayoutState: Point updates by id, selection, regeneration
"""

from __future__ import annotations

import logging
import random
from typing import Any, Iterable, Optional

from vision_trainer.core.models import PositionedCharacter

from .regenerate import regenerate_letters

logger = logging.getLogger(__name__)


class LayoutState:
    """
    Mutable working copy of one page's letters.

    Records themselves are immutable; an update swaps in a new record
    with the same id at the same position in the order.

    Example:
        >>> state = LayoutState(generate_grid_letters())
        >>> state.update_letter(0, "x", 42.0)
        >>> state.get(0).x
        42.0
    """

    def __init__(
        self,
        letters: Iterable[PositionedCharacter] = (),
        selected_id: Optional[int] = None,
    ) -> None:
        self._letters: list[PositionedCharacter] = []
        self._next_id = 0
        self.selected_id: Optional[int] = None
        self.replace_letters(letters)
        if selected_id is not None:
            self.select(selected_id)

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def letters(self) -> tuple[PositionedCharacter, ...]:
        return tuple(self._letters)

    @property
    def selected_letter(self) -> Optional[PositionedCharacter]:
        if self.selected_id is None:
            return None
        return self.find(self.selected_id)

    def __len__(self) -> int:
        return len(self._letters)

    def find(self, letter_id: int) -> Optional[PositionedCharacter]:
        for letter in self._letters:
            if letter.id == letter_id:
                return letter
        return None

    def get(self, letter_id: int) -> PositionedCharacter:
        letter = self.find(letter_id)
        if letter is None:
            raise KeyError(f"No letter with id {letter_id}")
        return letter

    def snapshot(self) -> list[PositionedCharacter]:
        """Independent copy of the current letters."""
        return list(self._letters)

    # ─────────────────────────────────────────────────────────────────────────
    # Mutation
    # ─────────────────────────────────────────────────────────────────────────

    def select(self, letter_id: Optional[int]) -> None:
        if letter_id is not None and self.find(letter_id) is None:
            raise KeyError(f"No letter with id {letter_id}")
        self.selected_id = letter_id

    def update_letter(self, letter_id: int, field_name: str, value: Any) -> PositionedCharacter:
        """
        Replace one field of one record.

        Raises:
            KeyError: Unknown id
            ValueError: Unknown field or invalid value
        """
        index = self._index_of(letter_id)
        updated = self._letters[index].with_field(field_name, value)
        self._letters[index] = updated
        return updated

    def move_letter(self, letter_id: int, x: float, y: float) -> PositionedCharacter:
        index = self._index_of(letter_id)
        updated = self._letters[index].with_field("x", x).with_field("y", y)
        self._letters[index] = updated
        return updated

    def replace_letters(self, letters: Iterable[PositionedCharacter]) -> None:
        """Swap in a new layout and clear the selection."""
        new_letters = list(letters)
        ids = [letter.id for letter in new_letters]
        if len(ids) != len(set(ids)):
            raise ValueError("Letter ids must be unique within a layout")
        self._letters = new_letters
        self._next_id = max(self._next_id, max(ids, default=-1) + 1)
        self.selected_id = None

    def add_letter(self, char: str, x: float, y: float, font_size: float) -> PositionedCharacter:
        """Append a record with a fresh id that is never reused."""
        letter = PositionedCharacter(self._next_id, char, float(x), float(y), float(font_size))
        self._next_id += 1
        self._letters.append(letter)
        return letter

    def remove_letter(self, letter_id: int) -> None:
        del self._letters[self._index_of(letter_id)]
        if self.selected_id == letter_id:
            self.selected_id = None

    def regenerate(
        self,
        include_digits: bool = False,
        allow_duplicates: bool = True,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Assign fresh characters to every record.

        On InsufficientPoolError the layout is left untouched and the
        error propagates to the caller.
        """
        regenerated = regenerate_letters(self._letters, include_digits, allow_duplicates, rng)
        self._letters = regenerated
        self.selected_id = None
        logger.debug(f"Regenerated {len(regenerated)} letters")

    def _index_of(self, letter_id: int) -> int:
        for index, letter in enumerate(self._letters):
            if letter.id == letter_id:
                return index
        raise KeyError(f"No letter with id {letter_id}")
