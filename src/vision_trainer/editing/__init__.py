"""Editing: layout state, character regeneration and dragging."""

from .drag import DragController
from .layout_state import LayoutState
from .regenerate import InsufficientPoolError, regenerate_letters, shuffled_pool

__all__ = [
    "DragController",
    "InsufficientPoolError",
    "LayoutState",
    "regenerate_letters",
    "shuffled_pool",
]
