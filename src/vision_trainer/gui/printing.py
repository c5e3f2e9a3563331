"""
Module: gui.printing

Purpose:
    Print a chart through Qt's print system. Pages carry the same letters
    the PDF export would produce (page 1 verbatim, later pages
    regenerated), drawn with the shared page painter and without editor
    overlays.

Key Functions:
    - print_pages(): Paint every planned page onto a QPrinter
    - configure_printer(): A4, orientation and full-page layout

Dependencies:
    - PySide6: QPrinter, QPainter
    - export.pipeline: Page planning

Used By:
    - gui.main_window: Print button
"""
from __future__ import annotations

import logging
import random
from typing import Optional

from PySide6.QtCore import QMarginsF, QRectF
from PySide6.QtGui import QPageLayout, QPageSize, QPainter
from PySide6.QtPrintSupport import QPrinter

from vision_trainer.core.geometry import Orientation, get_page_geometry
from vision_trainer.export.config import ExportConfig
from vision_trainer.export.pipeline import plan_page_letters

from .widgets.page_painter import paint_page

logger = logging.getLogger(__name__)


def configure_printer(printer: QPrinter, orientation: Orientation) -> None:
    """Set A4 paper, the layout's orientation and zero margins."""
    qt_orientation = (
        QPageLayout.Orientation.Portrait
        if orientation == Orientation.PORTRAIT
        else QPageLayout.Orientation.Landscape
    )
    printer.setPageLayout(QPageLayout(
        QPageSize(QPageSize.PageSizeId.A4),
        qt_orientation,
        QMarginsF(0, 0, 0, 0),
        QPageLayout.Unit.Millimeter,
    ))
    printer.setFullPage(True)


def _page_target(printer: QPrinter, orientation: Orientation) -> QRectF:
    """Largest page-shaped rectangle inside the printer's paper, in device pixels."""
    paper = printer.pageLayout().fullRectPixels(printer.resolution())
    geometry = get_page_geometry(orientation)
    scale = min(paper.width() / geometry.width_mm, paper.height() / geometry.height_mm)
    width, height = geometry.width_mm * scale, geometry.height_mm * scale
    return QRectF(
        paper.x() + (paper.width() - width) / 2,
        paper.y() + (paper.height() - height) / 2,
        width,
        height,
    )


def print_pages(
    printer: QPrinter,
    config: ExportConfig,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Print one sheet per copy.

    Args:
        printer: Target printer (already chosen by the user, or a PDF printer)
        config: Same configuration the export would use
        rng: Random source for regenerated pages

    Returns:
        Number of pages printed (0 if painting could not start)
    """
    configure_printer(printer, config.orientation)
    painter = QPainter()
    if not painter.begin(printer):
        logger.warning("Could not start printing")
        return 0

    count = 0
    try:
        target = _page_target(printer, config.orientation)
        for letters in plan_page_letters(config, rng):
            if count > 0:
                printer.newPage()
            paint_page(
                painter,
                target,
                letters,
                config.page_settings,
                config.orientation,
                show_fixation=config.show_fixation,
            )
            count += 1
    finally:
        painter.end()

    logger.info(f"Printed {count} page(s)")
    return count
