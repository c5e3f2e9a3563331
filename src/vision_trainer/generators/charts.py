"""
Module: generators.charts

Purpose:
    Hand-enumerated chart layouts kept as static data. Each row is
    (char, x mm, y mm, font size pt) for a landscape A4 page.

Key Functions:
    - generate_chart_letters(): Materialize a named chart
"""

from __future__ import annotations

from vision_trainer.core.models import PositionedCharacter

ChartRow = tuple[str, float, float, float]

CROSS_CHART: tuple[ChartRow, ...] = (
    # Horizontal arm, left half (outermost first)
    ("E", 28.5, 105.0, 72), ("F", 58.5, 105.0, 54), ("P", 83.5, 105.0, 40),
    ("T", 103.5, 105.0, 28), ("O", 118.5, 105.0, 20), ("Z", 129.5, 105.0, 14),
    # Horizontal arm, right half
    ("L", 268.5, 105.0, 72), ("P", 238.5, 105.0, 54), ("E", 213.5, 105.0, 40),
    ("D", 193.5, 105.0, 28), ("F", 178.5, 105.0, 20), ("C", 167.5, 105.0, 14),
    # Vertical arm, top half
    ("Z", 148.5, 20.0, 60), ("D", 148.5, 42.0, 44), ("E", 148.5, 60.0, 32),
    ("F", 148.5, 74.0, 22), ("L", 148.5, 85.0, 16),
    # Vertical arm, bottom half
    ("T", 148.5, 190.0, 60), ("O", 148.5, 168.0, 44), ("P", 148.5, 150.0, 32),
    ("E", 148.5, 136.0, 22), ("D", 148.5, 125.0, 16),
)

PERIPHERAL_RING: tuple[ChartRow, ...] = (
    # Outer ring, clockwise from 3 o'clock
    ("K", 268.5, 105.0, 28), ("R", 252.4, 147.5, 28), ("S", 208.5, 178.6, 28),
    ("V", 148.5, 190.0, 28), ("H", 88.5, 178.6, 28), ("N", 44.6, 147.5, 28),
    ("C", 28.5, 105.0, 28), ("O", 44.6, 62.5, 28), ("D", 88.5, 31.4, 28),
    ("Z", 148.5, 20.0, 28), ("U", 208.5, 31.4, 28), ("Y", 252.4, 62.5, 28),
    # Inner ring
    ("A", 208.5, 105.0, 18), ("X", 190.9, 135.1, 18), ("M", 148.5, 147.5, 18),
    ("B", 106.1, 135.1, 18), ("G", 88.5, 105.0, 18), ("W", 106.1, 74.9, 18),
    ("T", 148.5, 62.5, 18), ("P", 190.9, 74.9, 18),
    # Center
    ("E", 148.5, 105.0, 12),
)

CHART_VARIANTS: dict[str, tuple[ChartRow, ...]] = {
    "Cross Chart": CROSS_CHART,
    "Peripheral Ring": PERIPHERAL_RING,
}


def generate_chart_letters(name: str) -> list[PositionedCharacter]:
    """
    Materialize a literal chart as records with ids in table order.

    Raises:
        KeyError: If no chart has that name
    """
    rows = CHART_VARIANTS[name]
    return [
        PositionedCharacter(id=i, char=char, x=float(x), y=float(y), font_size=float(size))
        for i, (char, x, y, size) in enumerate(rows)
    ]
