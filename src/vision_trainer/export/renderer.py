"""
Module: export.renderer

Purpose:
    Assemble page rasters into a multi-page PDF using ReportLab.
    Each image becomes one page sized to the physical sheet.

Key Classes:
    - PdfPageWriter: Append pages, then finish to bytes

Key Functions:
    - render_pages_to_pdf(): Images to a PDF file or stream

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, Iterable, Union

from PIL import Image
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from vision_trainer.core.geometry import Orientation, get_page_geometry

logger = logging.getLogger(__name__)


class PdfPageWriter:
    """
    In-memory PDF assembled one raster page at a time.

    Nothing touches disk: a failed export leaves no partial file.

    Example:
        >>> writer = PdfPageWriter(Orientation.LANDSCAPE)
        >>> writer.add_page(image)
        >>> data = writer.finish()
    """

    def __init__(self, orientation: Orientation = Orientation.LANDSCAPE, *, title: str = "") -> None:
        self.page_width_pt, self.page_height_pt = get_page_geometry(orientation).size_pt
        self._buffer = io.BytesIO()
        self._canvas = canvas.Canvas(self._buffer, pagesize=(self.page_width_pt, self.page_height_pt))
        if title:
            self._canvas.setTitle(title)
        self.page_count = 0

    def add_page(self, image: Image.Image) -> None:
        """Draw the image over the full page and close the page."""
        self._canvas.drawImage(
            _pil_to_reader(image),
            0,
            0,
            width=self.page_width_pt,
            height=self.page_height_pt,
        )
        self._canvas.showPage()
        self.page_count += 1

    def finish(self) -> bytes:
        """Finalize the document and return its bytes."""
        if self.page_count == 0:
            logger.warning("Empty document, creating empty PDF")
        self._canvas.save()
        return self._buffer.getvalue()


def render_pages_to_pdf(
    images: Iterable[Image.Image],
    orientation: Orientation,
    output: Union[Path, BinaryIO],
    *,
    title: str = "",
) -> int:
    """
    Write page images as a multi-page PDF.

    Args:
        images: One raster per page, in page order
        orientation: Sheet orientation for every page
        output: Destination path or writable binary stream
        title: Document title metadata

    Returns:
        Number of pages written
    """
    writer = PdfPageWriter(orientation, title=title)
    for image in images:
        writer.add_page(image)
    data = writer.finish()
    if isinstance(output, Path):
        output.write_bytes(data)
    else:
        output.write(data)
    return writer.page_count


def _pil_to_reader(img: Image.Image) -> ImageReader:
    """
    Convert PIL image to ReportLab ImageReader.

    Args:
        img: PIL Image object

    Returns:
        ImageReader for use with ReportLab
    """
    buf = io.BytesIO()
    img.save(buf, format='PNG')
    buf.seek(0)
    return ImageReader(buf)
