"""
Widget tests for PageCanvas selection and dragging.
"""

import pytest
from PySide6.QtCore import QEvent, QPointF, Qt
from PySide6.QtGui import QMouseEvent
from PySide6.QtWidgets import QApplication

from vision_trainer.core.geometry import Orientation
from vision_trainer.editing import LayoutState
from vision_trainer.gui.widgets.page_canvas import PAGE_MARGIN_PX, PageCanvas

PX_PER_MM = 3.0


def _send_mouse(widget, kind, x, y, buttons=Qt.MouseButton.LeftButton):
    button = Qt.MouseButton.NoButton if kind == QEvent.Type.MouseMove else Qt.MouseButton.LeftButton
    point = QPointF(x, y)
    event = QMouseEvent(kind, point, widget.mapToGlobal(point), button, buttons,
                        Qt.KeyboardModifier.NoModifier)
    QApplication.sendEvent(widget, event)


@pytest.fixture
def canvas(qtbot, small_layout):
    widget = PageCanvas(LayoutState(small_layout))
    qtbot.addWidget(widget)
    # Page renders at exactly 3 px per mm: 891 x 630
    widget.resize(297 * 3 + 2 * PAGE_MARGIN_PX, 210 * 3 + 2 * PAGE_MARGIN_PX + 100)
    return widget


def _widget_point(canvas, x_mm, y_mm):
    rect = canvas.page_rect()
    return rect.left() + x_mm * PX_PER_MM, rect.top() + y_mm * PX_PER_MM


class TestPageCanvasGeometry:
    """Tests for page_rect() and letter_at()."""

    def test_page_rect_when_resized_then_page_aspect_preserved(self, canvas):
        rect = canvas.page_rect()
        assert rect.width() == pytest.approx(891.0)
        assert rect.height() == pytest.approx(630.0)

    def test_page_rect_when_portrait_then_taller_than_wide(self, canvas):
        canvas.set_orientation(Orientation.PORTRAIT)
        rect = canvas.page_rect()
        assert rect.height() > rect.width()

    def test_letter_at_when_over_glyph_then_returns_id(self, canvas):
        assert canvas.letter_at(*_widget_point(canvas, 40.0, 30.0)) == 1

    def test_letter_at_when_over_empty_page_then_none(self, canvas):
        assert canvas.letter_at(*_widget_point(canvas, 200.0, 150.0)) is None


class TestPageCanvasMouse:
    """Tests for press / move / release handling."""

    def test_press_when_on_letter_then_selects_and_emits(self, canvas, qtbot):
        x, y = _widget_point(canvas, 20.0, 20.0)

        with qtbot.waitSignal(canvas.selectionChanged) as blocker:
            _send_mouse(canvas, QEvent.Type.MouseButtonPress, x, y)

        assert blocker.args == [0]
        assert canvas.layout_state.selected_id == 0
        assert canvas.drag.is_dragging

    def test_drag_when_pointer_moves_30px_then_letter_moves_10mm(self, canvas, qtbot):
        # Arrange
        x, y = _widget_point(canvas, 20.0, 20.0)
        _send_mouse(canvas, QEvent.Type.MouseButtonPress, x, y)

        # Act
        with qtbot.waitSignal(canvas.letterMoved):
            _send_mouse(canvas, QEvent.Type.MouseMove, x + 30, y)
        _send_mouse(canvas, QEvent.Type.MouseButtonRelease, x + 30, y, Qt.MouseButton.NoButton)

        # Assert
        letter = canvas.layout_state.get(0)
        assert (letter.x, letter.y) == (30.0, 20.0)
        assert not canvas.drag.is_dragging

    def test_press_when_on_empty_page_then_selection_cleared(self, canvas):
        canvas.layout_state.select(5)
        x, y = _widget_point(canvas, 250.0, 180.0)

        _send_mouse(canvas, QEvent.Type.MouseButtonPress, x, y)

        assert canvas.layout_state.selected_id is None
        assert not canvas.drag.is_dragging

    def test_paint_when_rendered_then_does_not_raise(self, canvas):
        canvas.set_show_fixation(True)
        canvas.set_show_grid(True)
        canvas.layout_state.select(1)
        image = canvas.grab()
        assert not image.isNull()
