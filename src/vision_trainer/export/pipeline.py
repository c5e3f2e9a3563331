"""
Module: export.pipeline

Purpose:
    Orchestrate the multi-page export.
    Plan letters → Rasterize → Append page → Report progress → Write PDF

Key Functions:
    - export_pdf(): Main entry point
    - plan_page_letters(): Per-page letters (page 1 verbatim, later pages regenerated)
    - build_filename(): <tag>_<N>pages_<date>.pdf

Key Classes:
    - ExportResult: Completed export
    - ExportError: Exception for export failures

Dependencies:
    - export.rasterizer: Page images
    - export.renderer: PDF assembly
    - editing.regenerate: Later-page variants

Used By:
    - gui.main_window: Export button (worker thread)
    - gui.printing: Same page plan for printing
    - cli: export command
"""

from __future__ import annotations

import io
import logging
import random
import time
from dataclasses import dataclass
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Callable, Iterator, Optional

from PIL import Image

from vision_trainer.core.models import PositionedCharacter
from vision_trainer.editing.regenerate import InsufficientPoolError, regenerate_letters

from .config import ExportConfig
from .rasterizer import render_page_image
from .renderer import render_pages_to_pdf

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]
Rasterizer = Callable[..., Image.Image]


class ExportError(Exception):
    """Error during export pipeline."""
    pass


@dataclass(frozen=True)
class ExportResult:
    """
    Completed export (immutable).

    Attributes:
        pdf_path: Path of the written PDF
        page_count: Number of pages in the PDF
        page_letters: Letters drawn on each page, in page order
        elapsed_seconds: Wall time for the whole export
    """
    pdf_path: Path
    page_count: int
    page_letters: tuple[tuple[PositionedCharacter, ...], ...]
    elapsed_seconds: float


def build_filename(product_tag: str, copies: int, day: Optional[date] = None) -> str:
    """Output name stamped with the UTC date, e.g. vision-trainer-patterns_3pages_2026-10-19.pdf."""
    day = day or datetime.now(timezone.utc).date()
    return f"{product_tag}_{copies}pages_{day.isoformat()}.pdf"


def plan_page_letters(
    config: ExportConfig,
    rng: Optional[random.Random] = None,
) -> Iterator[tuple[PositionedCharacter, ...]]:
    """
    Yield the letters for each page.

    Page 1 is the configured layout verbatim. Each later page is a fresh
    regeneration of that base layout; if unique regeneration is impossible
    the base layout is reused.
    """
    rng = rng or random.Random()
    for index in range(config.copies):
        if index == 0:
            yield config.letters
            continue
        try:
            yield tuple(regenerate_letters(
                config.letters, config.include_digits, config.allow_duplicates, rng,
            ))
        except InsufficientPoolError as e:
            logger.warning(f"Page {index + 1}: {e} Reusing the base layout.")
            yield config.letters


def export_pdf(
    config: ExportConfig,
    *,
    on_progress: Optional[ProgressCallback] = None,
    rng: Optional[random.Random] = None,
    rasterizer: Rasterizer = render_page_image,
    output_dir: Optional[Path] = None,
    today: Optional[date] = None,
) -> ExportResult:
    """
    Export the configured chart as a multi-page PDF.

    Pages are rendered one at a time. The document is assembled in memory
    and written only after every page succeeded.

    Args:
        config: Export configuration snapshot
        on_progress: Called with (pages_completed, total_pages) after each page
        rng: Random source for regenerated pages
        rasterizer: Page drawing function (letters, page_settings, orientation,
            show_fixation=, scale=) -> PIL image
        output_dir: Overrides config.output_dir
        today: Date used in the filename

    Returns:
        ExportResult with the PDF path and per-page letters

    Raises:
        ExportError: If any page fails to render or the file cannot be written

    Example:
        >>> result = export_pdf(ExportConfig(letters=letters, copies=3), on_progress=print)
        1 3
        2 3
        3 3
    """
    start_time = time.perf_counter()
    total = config.copies
    target_dir = output_dir or config.output_dir or _default_export_dir()
    filename = build_filename(config.product_tag, total, today)

    logger.info(f"Starting export of {total} page(s) to {target_dir / filename}")

    pages: list[tuple[PositionedCharacter, ...]] = []

    def rendered_pages() -> Iterator[Image.Image]:
        for index, letters in enumerate(plan_page_letters(config, rng)):
            try:
                image = rasterizer(
                    letters,
                    config.page_settings,
                    config.orientation,
                    show_fixation=config.show_fixation,
                    scale=config.scale,
                )
            except Exception as e:
                raise ExportError(f"Failed to render page {index + 1} of {total}: {e}") from e
            yield image

            # Resumed once the page has been added to the document
            pages.append(letters)
            logger.debug(f"Rendered page {index + 1}/{total}")
            if on_progress is not None:
                on_progress(index + 1, total)

    buffer = io.BytesIO()
    try:
        render_pages_to_pdf(rendered_pages(), config.orientation, buffer, title=filename)
    except ExportError:
        raise
    except Exception as e:
        raise ExportError(f"Failed to assemble PDF: {e}") from e

    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        pdf_path = target_dir / filename
        pdf_path.write_bytes(buffer.getvalue())
    except OSError as e:
        raise ExportError(f"Failed to write PDF: {e}") from e

    elapsed = time.perf_counter() - start_time
    logger.info(f"Exported {len(pages)} pages to {pdf_path} in {elapsed:.1f}s")

    return ExportResult(
        pdf_path=pdf_path,
        page_count=len(pages),
        page_letters=tuple(pages),
        elapsed_seconds=elapsed,
    )


def _default_export_dir() -> Path:
    from vision_trainer.utils.paths import get_export_dir
    return get_export_dir()
