"""
Module: export.config

Purpose:
    Configuration dataclass for the PDF export pipeline. Immutable
    snapshot of the editor state taken when export starts.

Key Classes:
    - ExportConfig: Main configuration for exporting a chart
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from vision_trainer.core.geometry import Orientation
from vision_trainer.core.models import PageSettings, PositionedCharacter

MIN_COPIES = 1
MAX_COPIES = 30
DEFAULT_SCALE = 2.0
PRODUCT_TAG = "vision-trainer-patterns"


@dataclass(frozen=True)
class ExportConfig:
    """
    Configuration for exporting a multi-page chart (immutable).

    Attributes:
        letters: Base layout; page 1 uses it verbatim
        copies: Number of pages (1..30)
        page_settings: Colors and font family
        orientation: Page orientation
        show_fixation: Draw the center fixation marker
        include_digits: Regenerate later pages from the 36-character pool
        allow_duplicates: Allow repeated characters on regenerated pages
        scale: Raster density multiplier over 96 DPI
        output_dir: Directory for the PDF (None = default export folder)
        product_tag: Filename prefix

    Example:
        >>> config = ExportConfig(letters=tuple(generate_grid_letters()), copies=3)
    """

    letters: tuple[PositionedCharacter, ...]
    copies: int = 1
    page_settings: PageSettings = field(default_factory=PageSettings)
    orientation: Orientation = Orientation.LANDSCAPE
    show_fixation: bool = False
    include_digits: bool = False
    allow_duplicates: bool = True
    scale: float = DEFAULT_SCALE
    output_dir: Optional[Path] = None
    product_tag: str = PRODUCT_TAG

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if isinstance(self.copies, bool) or not isinstance(self.copies, int):
            raise ValueError(f"copies must be an integer: {self.copies!r}")
        if not MIN_COPIES <= self.copies <= MAX_COPIES:
            raise ValueError(
                f"copies must be between {MIN_COPIES} and {MAX_COPIES}: {self.copies}"
            )
        if self.scale <= 0:
            raise ValueError(f"scale must be positive: {self.scale}")
        if not self.product_tag:
            raise ValueError("product_tag must not be empty")
        # Accept any sequence but store an immutable snapshot
        object.__setattr__(self, "letters", tuple(self.letters))
        object.__setattr__(self, "orientation", Orientation.parse(self.orientation))
