"""Core geometry, character pool, models and serialization."""

from .charset import DIGITS, LETTERS, get_character_pool
from .geometry import Orientation, PageGeometry, get_page_geometry

__all__ = [
    "DIGITS",
    "LETTERS",
    "Orientation",
    "PageGeometry",
    "get_character_pool",
    "get_page_geometry",
]
