import os
import random
import sys
from pathlib import Path

import pytest

# Qt widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src to sys.path so we can import vision_trainer
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from vision_trainer.core.models import PageSettings, PositionedCharacter  # noqa: E402
from vision_trainer.generators import generate_grid_letters  # noqa: E402
from vision_trainer.presets import MemoryKeyValueStore, PresetStore  # noqa: E402


# Common test fixtures
@pytest.fixture
def rng():
    """Seeded random source for reproducible layouts."""
    return random.Random(1234)


@pytest.fixture
def grid_letters():
    """Standard 4x7 landscape grid."""
    return generate_grid_letters(4, 7)


@pytest.fixture
def small_layout():
    """Three letters with non-contiguous ids."""
    return [
        PositionedCharacter(0, "A", 20.0, 20.0, 12.0),
        PositionedCharacter(1, "B", 40.0, 30.0, 18.0),
        PositionedCharacter(5, "C", 60.0, 40.0, 24.0),
    ]


@pytest.fixture
def page_settings():
    return PageSettings()


@pytest.fixture
def memory_kv():
    return MemoryKeyValueStore()


@pytest.fixture
def preset_store(memory_kv):
    """Initialized preset store over an in-memory key-value store."""
    store = PresetStore(memory_kv)
    store.initialize()
    return store
