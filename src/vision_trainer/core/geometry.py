"""
Module: core.geometry

Purpose:
    Page dimensions for the two supported sheet orientations.
    A landscape A4 page and its portrait transpose, plus the
    derived center point and clamping helpers.

Key Classes:
    - Orientation: landscape / portrait
    - PageGeometry: width/height in mm with derived values

Key Functions:
    - get_page_geometry(): Geometry for an orientation

Used By:
    - generators: centering and margins
    - editing.drag: bounds clamping
    - export: page and raster sizes
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from reportlab.lib.units import mm

# A4 landscape
A4_WIDTH_MM = 297.0
A4_HEIGHT_MM = 210.0


class Orientation(str, Enum):
    """Page orientation. Values match the persisted preset format."""

    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"

    @classmethod
    def parse(cls, value: object) -> Orientation:
        """Parse a stored value, defaulting to landscape for anything unknown."""
        if isinstance(value, Orientation):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.LANDSCAPE


@dataclass(frozen=True, slots=True)
class PageGeometry:
    """
    Physical page size in millimetres.

    Attributes:
        width_mm: Page width
        height_mm: Page height

    Example:
        >>> geo = get_page_geometry(Orientation.LANDSCAPE)
        >>> geo.center_x, geo.center_y
        (148.5, 105.0)
    """

    width_mm: float
    height_mm: float

    @property
    def center_x(self) -> float:
        return self.width_mm / 2

    @property
    def center_y(self) -> float:
        return self.height_mm / 2

    @property
    def size_pt(self) -> tuple[float, float]:
        """Page size in PDF points (1/72 inch)."""
        return (self.width_mm * mm, self.height_mm * mm)

    def clamp(self, x: float, y: float) -> tuple[float, float]:
        """Clamp a point to the page, each axis independently."""
        return (
            max(0.0, min(self.width_mm, x)),
            max(0.0, min(self.height_mm, y)),
        )


_LANDSCAPE = PageGeometry(A4_WIDTH_MM, A4_HEIGHT_MM)
_PORTRAIT = PageGeometry(A4_HEIGHT_MM, A4_WIDTH_MM)


def get_page_geometry(orientation: Orientation = Orientation.LANDSCAPE) -> PageGeometry:
    """Return the page geometry for an orientation."""
    if Orientation.parse(orientation) is Orientation.PORTRAIT:
        return _PORTRAIT
    return _LANDSCAPE
