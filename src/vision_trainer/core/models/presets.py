"""
Module: core.models.presets

Purpose:
    The Preset snapshot (letters + page settings + orientation) and
    its optional GridLayout.

Dependencies:
    - core.models.letters
    - core.geometry

Used By:
    - presets.store
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from vision_trainer.core.geometry import Orientation

from .letters import PageSettings, PositionedCharacter


@dataclass(frozen=True, slots=True)
class GridLayout:
    """Row/column dimensions recorded for grid-generated presets."""

    rows: int
    cols: int

    def __post_init__(self) -> None:
        if self.rows < 0 or self.cols < 0:
            raise ValueError(f"Grid dimensions must be non-negative: {self.rows}x{self.cols}")

    def to_dict(self) -> dict[str, int]:
        return {"rows": self.rows, "cols": self.cols}

    @classmethod
    def from_dict(cls, data: Any) -> Optional[GridLayout]:
        if not isinstance(data, dict):
            return None
        try:
            return cls(rows=int(data["rows"]), cols=int(data["cols"]))
        except (KeyError, TypeError, ValueError):
            return None


@dataclass(frozen=True, slots=True)
class Preset:
    """
    Named snapshot of a layout and its page settings (immutable).

    Letters are stored as a tuple of frozen records, so neither the live
    layout nor a loaded copy can alter a saved preset.

    Attributes:
        name: Display name, unique case-insensitively within a store
        is_built_in: True for presets regenerated from code at startup
        letters: Positioned characters in emission order
        page_settings: Colors and font family
        orientation: Page orientation
        created_at: ISO-8601 timestamp
        grid_layout: Grid dimensions if the layout came from the grid generator
    """

    name: str
    is_built_in: bool
    letters: tuple[PositionedCharacter, ...]
    page_settings: PageSettings = field(default_factory=PageSettings)
    orientation: Orientation = Orientation.LANDSCAPE
    created_at: str = ""
    grid_layout: Optional[GridLayout] = None

    @property
    def key(self) -> str:
        """Case-insensitive identity used for duplicate detection."""
        return self.name.strip().casefold()

    @property
    def letter_count(self) -> int:
        return len(self.letters)
