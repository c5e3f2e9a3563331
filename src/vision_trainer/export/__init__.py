"""
Module: export

Purpose:
    Multi-page PDF export of a chart. Each page is rasterized with
    Pillow and placed on a ReportLab page.

Key Functions:
    - export_pdf(): Main entry point
    - plan_page_letters(): Letters for each page
    - render_page_image(): Rasterize one page

Key Classes:
    - ExportConfig: Immutable export settings
    - ExportResult: Completed export
    - ExportError: Export failure
"""

from .config import MAX_COPIES, MIN_COPIES, ExportConfig
from .pipeline import ExportError, ExportResult, build_filename, export_pdf, plan_page_letters
from .rasterizer import render_page_image
from .renderer import PdfPageWriter, render_pages_to_pdf

__all__ = [
    "MAX_COPIES",
    "MIN_COPIES",
    "ExportConfig",
    "ExportError",
    "ExportResult",
    "PdfPageWriter",
    "build_filename",
    "export_pdf",
    "plan_page_letters",
    "render_page_image",
    "render_pages_to_pdf",
]
