"""
Interactive page preview: draws the layout and drags letters with the mouse.
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QRectF, QSize, Qt, Signal
from PySide6.QtGui import QColor, QMouseEvent, QPainter, QPaintEvent
from PySide6.QtWidgets import QSizePolicy, QWidget

from vision_trainer.core.geometry import Orientation, get_page_geometry
from vision_trainer.core.models import PageSettings
from vision_trainer.editing import DragController, LayoutState
from vision_trainer.gui.styles.theme import Colors

from .page_painter import glyph_rect, paint_page

PAGE_MARGIN_PX = 16


class PageCanvas(QWidget):
    """
    Scaled page preview bound to a LayoutState.

    Pressing on a letter selects it and starts a drag; pressing on empty
    page clears the selection.
    """

    selectionChanged = Signal(object)  # letter id or None
    letterMoved = Signal(int)

    def __init__(self, layout_state: LayoutState, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.layout_state = layout_state
        self.page_settings = PageSettings()
        self.orientation = Orientation.LANDSCAPE
        self.show_grid = True
        self.show_fixation = False
        self.drag = DragController(layout_state, self.orientation)

        self.setMinimumSize(320, 240)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMouseTracking(False)

    def sizeHint(self) -> QSize:
        return QSize(900, 650)

    # ─────────────────────────────────────────────────────────────────────────
    # State setters
    # ─────────────────────────────────────────────────────────────────────────

    def set_orientation(self, orientation: Orientation) -> None:
        self.orientation = orientation
        self.drag.set_orientation(orientation)
        self.update()

    def set_page_settings(self, settings: PageSettings) -> None:
        self.page_settings = settings
        self.update()

    def set_show_grid(self, enabled: bool) -> None:
        self.show_grid = enabled
        self.update()

    def set_show_fixation(self, enabled: bool) -> None:
        self.show_fixation = enabled
        self.update()

    # ─────────────────────────────────────────────────────────────────────────
    # Geometry
    # ─────────────────────────────────────────────────────────────────────────

    def page_rect(self) -> QRectF:
        """Largest page-shaped rectangle centered in the widget."""
        geometry = get_page_geometry(self.orientation)
        avail_w = max(1.0, self.width() - 2 * PAGE_MARGIN_PX)
        avail_h = max(1.0, self.height() - 2 * PAGE_MARGIN_PX)
        scale = min(avail_w / geometry.width_mm, avail_h / geometry.height_mm)
        w, h = geometry.width_mm * scale, geometry.height_mm * scale
        return QRectF((self.width() - w) / 2, (self.height() - h) / 2, w, h)

    def letter_at(self, x: float, y: float) -> Optional[int]:
        """Id of the topmost letter under a widget point."""
        rect = self.page_rect()
        px_per_mm = rect.width() / get_page_geometry(self.orientation).width_mm
        for letter in reversed(self.layout_state.letters):
            if glyph_rect(letter, rect, px_per_mm).contains(x, y):
                return letter.id
        return None

    # ─────────────────────────────────────────────────────────────────────────
    # Qt events
    # ─────────────────────────────────────────────────────────────────────────

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(Colors.CANVAS_BACKDROP))
        paint_page(
            painter,
            self.page_rect(),
            self.layout_state.letters,
            self.page_settings,
            self.orientation,
            show_fixation=self.show_fixation,
            show_grid=self.show_grid,
            selected_id=self.layout_state.selected_id,
        )
        painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)
        pos = event.position()
        letter_id = self.letter_at(pos.x(), pos.y())
        if letter_id is None:
            self.layout_state.select(None)
        else:
            self.drag.press(letter_id, pos.x(), pos.y())
        self.selectionChanged.emit(letter_id)
        self.update()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        if not self.drag.is_dragging:
            return super().mouseMoveEvent(event)
        pos = event.position()
        if self.drag.move(pos.x(), pos.y(), self.page_rect().width()) is not None:
            self.letterMoved.emit(self.layout_state.selected_id)
            self.update()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        self.drag.release()
        super().mouseReleaseEvent(event)
