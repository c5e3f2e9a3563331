"""
Core Models Package

Immutable data models shared by the generators, editor, preset store
and export pipeline. Point edits produce new records with the same id.
"""

from .letters import (
    DEFAULT_FONT_FAMILY,
    FONT_FAMILIES,
    PageSettings,
    PositionedCharacter,
)
from .presets import GridLayout, Preset

__all__ = [
    "DEFAULT_FONT_FAMILY",
    "FONT_FAMILIES",
    "GridLayout",
    "PageSettings",
    "PositionedCharacter",
    "Preset",
]
