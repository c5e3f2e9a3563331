"""
Module: export.rasterizer

Purpose:
    Draw one chart page to a PIL image: background, optional fixation
    marker, and each character centered on its position in bold.

Key Functions:
    - render_page_image(): Main rasterization function
    - resolve_font(): Font family + pixel size to a PIL font

Dependencies:
    - PIL: Drawing and fonts
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Sequence

from PIL import Image, ImageColor, ImageDraw, ImageFont

from vision_trainer.core.geometry import Orientation, get_page_geometry
from vision_trainer.core.models import PageSettings, PositionedCharacter

logger = logging.getLogger(__name__)

BASE_DPI = 96
MM_PER_INCH = 25.4
PT_PER_INCH = 72

FIXATION_DIAMETER_MM = 4.0
FIXATION_STROKE_MM = 0.5
FIXATION_OPACITY = 0.5

# Bold TrueType candidates per font family, tried in order
FONT_CANDIDATES: dict[str, tuple[str, ...]] = {
    "sans-serif": (
        "arialbd.ttf", "Arial Bold.ttf", "DejaVuSans-Bold.ttf", "LiberationSans-Bold.ttf",
    ),
    "serif": (
        "timesbd.ttf", "Times New Roman Bold.ttf", "DejaVuSerif-Bold.ttf", "LiberationSerif-Bold.ttf",
    ),
    "monospace": (
        "courbd.ttf", "Courier New Bold.ttf", "DejaVuSansMono-Bold.ttf", "LiberationMono-Bold.ttf",
    ),
}


def px_per_mm(scale: float) -> float:
    return BASE_DPI / MM_PER_INCH * scale


def pt_to_px(points: float, scale: float) -> float:
    return points * BASE_DPI / PT_PER_INCH * scale


def _generic_family(font_family: str) -> str:
    # CSS font stacks end with the generic family name
    generic = font_family.rsplit(",", 1)[-1].strip().strip("'\"")
    return generic if generic in FONT_CANDIDATES else "sans-serif"


@lru_cache(maxsize=256)
def resolve_font(font_family: str, size_px: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """
    Load a bold font for a CSS-style font stack.

    Falls back to Pillow's bundled font when no candidate is installed.
    """
    for candidate in FONT_CANDIDATES[_generic_family(font_family)]:
        try:
            return ImageFont.truetype(candidate, size_px)
        except OSError:
            continue
    logger.debug(f"No TrueType font found for {font_family!r}, using Pillow default")
    return ImageFont.load_default(size=size_px)


def render_page_image(
    letters: Sequence[PositionedCharacter],
    page_settings: PageSettings,
    orientation: Orientation = Orientation.LANDSCAPE,
    *,
    show_fixation: bool = False,
    scale: float = 2.0,
) -> Image.Image:
    """
    Rasterize a chart page.

    Args:
        letters: Records to draw (positions are glyph centers in mm)
        page_settings: Background/text colors and font family
        orientation: Page orientation
        show_fixation: Draw the center fixation marker
        scale: Density multiplier over 96 DPI

    Returns:
        RGB image sized to the page at the requested density

    Example:
        >>> img = render_page_image(letters, PageSettings(), scale=2.0)
        >>> img.size
        (2245, 1587)
    """
    geometry = get_page_geometry(orientation)
    density = px_per_mm(scale)
    size = (round(geometry.width_mm * density), round(geometry.height_mm * density))

    background = ImageColor.getrgb(page_settings.background_color)[:3]
    text_rgb = ImageColor.getrgb(page_settings.text_color)[:3]
    image = Image.new("RGBA", size, background + (255,))

    if show_fixation:
        image = _draw_fixation(image, geometry.center_x * density, geometry.center_y * density,
                               density, text_rgb)

    draw = ImageDraw.Draw(image)
    for letter in letters:
        font = resolve_font(page_settings.font_family, max(1, round(pt_to_px(letter.font_size, scale))))
        draw.text(
            (letter.x * density, letter.y * density),
            letter.char,
            font=font,
            fill=text_rgb,
            anchor="mm",
        )

    return image.convert("RGB")


def _draw_fixation(
    image: Image.Image,
    cx_px: float,
    cy_px: float,
    density: float,
    color: tuple[int, int, int],
) -> Image.Image:
    """Composite a translucent ring at the page center."""
    overlay = Image.new("RGBA", image.size, (0, 0, 0, 0))
    radius = FIXATION_DIAMETER_MM * density / 2
    stroke = max(1, round(FIXATION_STROKE_MM * density))
    ImageDraw.Draw(overlay).ellipse(
        (cx_px - radius, cy_px - radius, cx_px + radius, cy_px + radius),
        outline=color + (round(255 * FIXATION_OPACITY),),
        width=stroke,
    )
    return Image.alpha_composite(image, overlay)
