"""
Module: core.models.letters

Purpose:
    Provides the PositionedCharacter record (one placed glyph on a
    page) and PageSettings (colors and font family for a sheet).

Key Functions:
    - PositionedCharacter.with_field(): Copy with one field replaced
    - PositionedCharacter.to_dict() / from_dict(): JSON round trip
    - PageSettings.to_dict() / from_dict(): JSON round trip

Dependencies:
    - dataclasses (std)

Used By:
    - generators: Produce PositionedCharacter sequences
    - editing.layout_state: Point updates by id
    - presets.store: Snapshots in presets
    - export: Per-page rendering
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Any

DEFAULT_BACKGROUND_COLOR = "#FFFFFF"
DEFAULT_TEXT_COLOR = "#000000"

# (css value, label) pairs offered in the font selector
FONT_FAMILIES: tuple[tuple[str, str], ...] = (
    ("Arial, Helvetica, sans-serif", "Sans Serif (Clean)"),
    ("'Times New Roman', Times, serif", "Serif (Classic)"),
    ("'Courier New', Courier, monospace", "Monospace (Technical)"),
)
DEFAULT_FONT_FAMILY = FONT_FAMILIES[0][0]

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# Fields that may be changed through a point update
EDITABLE_FIELDS = frozenset({"char", "x", "y", "font_size"})


@dataclass(frozen=True, slots=True)
class PositionedCharacter:
    """
    One glyph placed on the page.

    Coordinates are the glyph's center, in millimetres from the page's
    top-left corner. Font size is in points.

    Attributes:
        id: Identifier, unique within a layout and stable across edits
        char: Single displayed character
        x: Horizontal center (mm)
        y: Vertical center (mm)
        font_size: Glyph size (pt)

    Invariants:
        - len(char) == 1
        - font_size > 0

    Example:
        >>> rec = PositionedCharacter(0, "A", 20.0, 20.0, 12.0)
        >>> rec.with_field("x", 30.0).x
        30.0
    """

    id: int
    char: str
    x: float
    y: float
    font_size: float

    def __post_init__(self) -> None:
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise ValueError(f"char must be a single character: {self.char!r}")
        if self.font_size <= 0:
            raise ValueError(f"font_size must be positive: {self.font_size}")

    def with_field(self, field_name: str, value: Any) -> PositionedCharacter:
        """Return a copy with one editable field replaced."""
        if field_name not in EDITABLE_FIELDS:
            raise ValueError(f"Field is not editable: {field_name!r}")
        if field_name != "char":
            value = float(value)
        return replace(self, **{field_name: value})

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "char": self.char,
            "x": self.x,
            "y": self.y,
            "fontSize": self.font_size,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PositionedCharacter:
        """
        Build from a stored dictionary.

        Raises:
            KeyError: If a required key is missing
            ValueError: If a value cannot be converted
        """
        return cls(
            id=int(data["id"]),
            char=str(data["char"]),
            x=float(data["x"]),
            y=float(data["y"]),
            font_size=float(data["fontSize"]),
        )


@dataclass(frozen=True, slots=True)
class PageSettings:
    """
    Visual settings for a sheet.

    Attributes:
        background_color: Page background as #RRGGBB
        text_color: Glyph color as #RRGGBB
        font_family: One of FONT_FAMILIES values
    """

    background_color: str = DEFAULT_BACKGROUND_COLOR
    text_color: str = DEFAULT_TEXT_COLOR
    font_family: str = DEFAULT_FONT_FAMILY

    def __post_init__(self) -> None:
        for name in ("background_color", "text_color"):
            value = getattr(self, name)
            if not isinstance(value, str) or not _HEX_COLOR.match(value):
                raise ValueError(f"{name} must be a hex color like #RRGGBB: {value!r}")
        if self.font_family not in {value for value, _ in FONT_FAMILIES}:
            raise ValueError(f"Unsupported font family: {self.font_family!r}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "bgColor": self.background_color,
            "textColor": self.text_color,
            "fontFamily": self.font_family,
        }

    @classmethod
    def from_dict(cls, data: Any) -> PageSettings:
        """Build from a stored dictionary; missing or invalid values fall back to defaults."""
        if not isinstance(data, dict):
            return cls()
        defaults = cls()
        values = {
            "background_color": data.get("bgColor", defaults.background_color),
            "text_color": data.get("textColor", defaults.text_color),
            "font_family": data.get("fontFamily", defaults.font_family),
        }
        try:
            return cls(**values)
        except ValueError:
            return defaults
