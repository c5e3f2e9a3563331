"""
Module: editing.drag

Purpose:
    Convert pointer movement in screen pixels into page millimetres
    for the record being dragged.

Key Classes:
    - DragController: Idle / Dragging state machine

Used By:
    - gui.widgets.page_canvas: Mouse press/move/release
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from vision_trainer.core.geometry import Orientation, PageGeometry, get_page_geometry

from .layout_state import LayoutState


@dataclass(frozen=True)
class DragSession:
    """Pointer and record position captured on press."""

    letter_id: int
    start_pointer_x: float
    start_pointer_y: float
    start_x: float
    start_y: float


class DragController:
    """
    Drag state machine bound to a LayoutState.

    The scale between screen and page is recomputed on every move from
    the rendered page width, so zooming mid-drag stays consistent.

    Example:
        >>> drag = DragController(state)
        >>> drag.press(3, 100, 100)
        >>> drag.move(100 + px_per_mm * 10, 100, rendered_width_px)
        >>> drag.release()
    """

    def __init__(
        self,
        layout: LayoutState,
        orientation: Orientation = Orientation.LANDSCAPE,
    ) -> None:
        self.layout = layout
        self._geometry: PageGeometry = get_page_geometry(orientation)
        self._session: Optional[DragSession] = None

    @property
    def is_dragging(self) -> bool:
        return self._session is not None

    @property
    def geometry(self) -> PageGeometry:
        return self._geometry

    def set_orientation(self, orientation: Orientation) -> None:
        self._geometry = get_page_geometry(orientation)

    def press(self, letter_id: int, pointer_x: float, pointer_y: float) -> None:
        """Select the record and start dragging it."""
        letter = self.layout.get(letter_id)
        self.layout.select(letter_id)
        self._session = DragSession(letter_id, pointer_x, pointer_y, letter.x, letter.y)

    def move(
        self,
        pointer_x: float,
        pointer_y: float,
        rendered_width_px: float,
    ) -> Optional[tuple[float, float]]:
        """
        Move the dragged record to follow the pointer.

        Returns:
            New (x, y) in mm, or None when idle or the page has no width
        """
        session = self._session
        if session is None or rendered_width_px <= 0:
            return None

        px_per_mm = rendered_width_px / self._geometry.width_mm
        delta_x = (pointer_x - session.start_pointer_x) / px_per_mm
        delta_y = (pointer_y - session.start_pointer_y) / px_per_mm

        x, y = self._geometry.clamp(session.start_x + delta_x, session.start_y + delta_y)
        x, y = _snap(x), _snap(y)
        self.layout.move_letter(session.letter_id, x, y)
        return x, y

    def release(self) -> None:
        self._session = None


def _snap(value: float) -> float:
    """Round to 0.1 mm with exact halves rounded up."""
    return math.floor(value * 10 + 0.5) / 10
