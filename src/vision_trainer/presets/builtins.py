"""
Module: presets.builtins

Purpose:
    The built-in preset set, rebuilt from the generators on every
    store initialization so definitions track the current code.

Key Functions:
    - build_builtin_presets(): Fresh tuple of built-in presets
"""

from __future__ import annotations

import random
from datetime import datetime, timezone
from typing import Optional

from vision_trainer.core.geometry import Orientation
from vision_trainer.core.models import GridLayout, PageSettings, Preset
from vision_trainer.generators import (
    CHART_VARIANTS,
    generate_chart_letters,
    generate_grid_letters,
    generate_radial_letters,
    generate_word_letters,
)
from vision_trainer.generators.grid import DEFAULT_COLS, DEFAULT_ROWS

STANDARD_GRID = "Standard Grid"
MACDONALD_1 = "MacDonald 1"
HELLO_WORLD = "Hello World"


def build_builtin_presets(rng: Optional[random.Random] = None) -> tuple[Preset, ...]:
    """
    Build the built-in presets.

    Args:
        rng: Random source for generators with random letters

    Returns:
        Tuple of presets, all landscape with default page settings
    """
    created_at = datetime.now(timezone.utc).isoformat()
    orientation = Orientation.LANDSCAPE

    def make(name: str, letters, grid_layout: Optional[GridLayout] = None) -> Preset:
        return Preset(
            name=name,
            is_built_in=True,
            letters=tuple(letters),
            page_settings=PageSettings(),
            orientation=orientation,
            created_at=created_at,
            grid_layout=grid_layout,
        )

    presets = [
        make(
            STANDARD_GRID,
            generate_grid_letters(DEFAULT_ROWS, DEFAULT_COLS, orientation),
            GridLayout(DEFAULT_ROWS, DEFAULT_COLS),
        ),
        make(MACDONALD_1, generate_radial_letters(orientation)),
        make(HELLO_WORLD, generate_word_letters(orientation=orientation, rng=rng)),
    ]
    presets.extend(make(name, generate_chart_letters(name)) for name in CHART_VARIANTS)
    return tuple(presets)
