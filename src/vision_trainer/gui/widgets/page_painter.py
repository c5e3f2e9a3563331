"""
Shared QPainter drawing for a chart page.

Used by the on-screen canvas and by printing, so both show the same
layout. Editor overlays (grid, selection) are opt-in.
"""
from __future__ import annotations

from typing import Optional, Sequence

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QPainter, QPen

from vision_trainer.core.geometry import Orientation, get_page_geometry
from vision_trainer.core.models import PageSettings, PositionedCharacter
from vision_trainer.gui.styles.theme import Colors

MM_PER_PT = 25.4 / 72
GRID_SPACING_MM = 10.0
FIXATION_DIAMETER_MM = 5.0
FIXATION_DOT_MM = 1.0

_STYLE_HINTS = {
    "sans-serif": QFont.StyleHint.SansSerif,
    "serif": QFont.StyleHint.Serif,
    "monospace": QFont.StyleHint.Monospace,
}


def make_font(font_family: str, pixel_size: float) -> QFont:
    """Build a bold QFont from a CSS-style font stack."""
    families = [name.strip().strip("'\"") for name in font_family.split(",") if name.strip()]
    font = QFont()
    font.setFamilies([f for f in families if f not in _STYLE_HINTS] or ["Arial"])
    font.setStyleHint(_STYLE_HINTS.get(families[-1] if families else "", QFont.StyleHint.SansSerif))
    font.setBold(True)
    font.setPixelSize(max(1, round(pixel_size)))
    return font


def glyph_rect(letter: PositionedCharacter, page_rect: QRectF, px_per_mm: float) -> QRectF:
    """Approximate box around a glyph, used for hit testing and selection."""
    height = max(letter.font_size * MM_PER_PT * px_per_mm, 6.0)
    width = max(height * 0.8, 6.0)
    center = QPointF(page_rect.left() + letter.x * px_per_mm, page_rect.top() + letter.y * px_per_mm)
    return QRectF(center.x() - width / 2, center.y() - height / 2, width, height)


def paint_page(
    painter: QPainter,
    page_rect: QRectF,
    letters: Sequence[PositionedCharacter],
    page_settings: PageSettings,
    orientation: Orientation = Orientation.LANDSCAPE,
    *,
    show_fixation: bool = False,
    show_grid: bool = False,
    selected_id: Optional[int] = None,
) -> None:
    """Draw a full page into page_rect (which must match the page aspect ratio)."""
    geometry = get_page_geometry(orientation)
    px_per_mm = page_rect.width() / geometry.width_mm
    text_color = QColor(page_settings.text_color)

    painter.save()
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
    painter.fillRect(page_rect, QColor(page_settings.background_color))

    if show_grid:
        _paint_grid(painter, page_rect, px_per_mm, text_color)

    if show_fixation:
        center = QPointF(
            page_rect.left() + geometry.center_x * px_per_mm,
            page_rect.top() + geometry.center_y * px_per_mm,
        )
        radius = FIXATION_DIAMETER_MM * px_per_mm / 2
        painter.setPen(QPen(text_color, 1))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawEllipse(center, radius, radius)
        dot = FIXATION_DOT_MM * px_per_mm / 2
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(text_color))
        painter.drawEllipse(center, dot, dot)

    painter.setPen(text_color)
    painter.setBrush(Qt.BrushStyle.NoBrush)
    for letter in letters:
        painter.setFont(make_font(page_settings.font_family, letter.font_size * MM_PER_PT * px_per_mm))
        rect = glyph_rect(letter, page_rect, px_per_mm)
        # Generous box so wide glyphs are not clipped
        text_box = rect.adjusted(-rect.width(), -rect.height() / 2, rect.width(), rect.height() / 2)
        painter.drawText(text_box, Qt.AlignmentFlag.AlignCenter, letter.char)
        if letter.id == selected_id:
            painter.save()
            painter.setPen(QPen(QColor(Colors.SELECTION), 2, Qt.PenStyle.DashLine))
            painter.drawRect(rect.adjusted(-3, -3, 3, 3))
            painter.restore()

    painter.restore()


def _paint_grid(painter: QPainter, page_rect: QRectF, px_per_mm: float, color: QColor) -> None:
    grid_color = QColor(color)
    grid_color.setAlphaF(0.1)
    painter.setPen(QPen(grid_color, 1))
    step = GRID_SPACING_MM * px_per_mm
    if step <= 0:
        return
    x = page_rect.left()
    while x <= page_rect.right():
        painter.drawLine(QPointF(x, page_rect.top()), QPointF(x, page_rect.bottom()))
        x += step
    y = page_rect.top()
    while y <= page_rect.bottom():
        painter.drawLine(QPointF(page_rect.left(), y), QPointF(page_rect.right(), y))
        y += step

    center_color = QColor(Colors.GRID_CENTER)
    center_color.setAlphaF(0.5)
    painter.setPen(QPen(center_color, 1))
    painter.setBrush(Qt.BrushStyle.NoBrush)
    painter.drawEllipse(page_rect.center(), 8, 8)
