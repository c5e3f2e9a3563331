"""
Editor preferences persisted between sessions.

Stored as one JSON object under its own key in the same key-value store as
the presets. Any malformed data falls back to defaults, never a crash.
"""
import json
import logging
from dataclasses import asdict, dataclass
from typing import Any

from vision_trainer.core.geometry import Orientation
from vision_trainer.export.config import MAX_COPIES, MIN_COPIES
from vision_trainer.presets.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

SETTINGS_KEY = "visionTrainerEditor"

MAX_GRID_ROWS = 20
MAX_GRID_COLS = 30


@dataclass
class EditorSettings:
    orientation: Orientation = Orientation.LANDSCAPE
    show_grid: bool = True
    show_fixation: bool = False
    include_digits: bool = False
    allow_duplicates: bool = True
    copies: int = 1
    grid_rows: int = 4
    grid_cols: int = 7


def _safe_int(value: Any, default: int, low: int, high: int) -> int:
    """Convert to int clamped to [low, high], returning default on failure."""
    if value is None or isinstance(value, bool):
        return default
    try:
        return max(low, min(high, int(value)))
    except (ValueError, TypeError):
        return default


def load_editor_settings(kv_store: KeyValueStore, key: str = SETTINGS_KEY) -> EditorSettings:
    """Load editor settings; missing or malformed values take defaults."""
    defaults = EditorSettings()
    raw_text = kv_store.get(key)
    if not raw_text:
        return defaults
    try:
        raw = json.loads(raw_text)
    except json.JSONDecodeError as e:
        logger.warning(f"Editor settings are corrupted, using defaults: {e}")
        return defaults
    if not isinstance(raw, dict):
        return defaults

    def flag(name: str) -> bool:
        value = raw.get(name)
        return value if isinstance(value, bool) else getattr(defaults, name)

    return EditorSettings(
        orientation=Orientation.parse(raw.get("orientation")),
        show_grid=flag("show_grid"),
        show_fixation=flag("show_fixation"),
        include_digits=flag("include_digits"),
        allow_duplicates=flag("allow_duplicates"),
        copies=_safe_int(raw.get("copies"), defaults.copies, MIN_COPIES, MAX_COPIES),
        grid_rows=_safe_int(raw.get("grid_rows"), defaults.grid_rows, 1, MAX_GRID_ROWS),
        grid_cols=_safe_int(raw.get("grid_cols"), defaults.grid_cols, 1, MAX_GRID_COLS),
    )


def save_editor_settings(
    kv_store: KeyValueStore,
    settings: EditorSettings,
    key: str = SETTINGS_KEY,
) -> None:
    data = asdict(settings)
    data["orientation"] = settings.orientation.value
    kv_store.set(key, json.dumps(data))
