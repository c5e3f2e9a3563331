"""
Serialization Utilities

To/from JSON for presets. The persisted document is a JSON array of
preset objects with camelCase keys:

    [{"name": ..., "isBuiltIn": ..., "letters": [{"id", "char", "x", "y",
      "fontSize"}], "pageSettings": {"bgColor", "textColor", "fontFamily"},
      "orientation": "landscape", "createdAt": ..., "gridLayout": {"rows",
      "cols"}}]

Unknown keys are ignored. Missing optional keys take defaults.
Entries that cannot be parsed are skipped and logged.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Optional

from vision_trainer.core.geometry import Orientation

from ..models.letters import PageSettings, PositionedCharacter
from ..models.presets import GridLayout, Preset

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Preset Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_preset(preset: Preset) -> dict[str, Any]:
    """Serialize a Preset to a JSON-ready dictionary."""
    data: dict[str, Any] = {
        "name": preset.name,
        "isBuiltIn": preset.is_built_in,
        "letters": [letter.to_dict() for letter in preset.letters],
        "pageSettings": preset.page_settings.to_dict(),
        "orientation": preset.orientation.value,
        "createdAt": preset.created_at,
    }
    if preset.grid_layout is not None:
        data["gridLayout"] = preset.grid_layout.to_dict()
    return data


def deserialize_preset(data: dict[str, Any]) -> Preset:
    """
    Deserialize a Preset from a dictionary.

    Raises:
        KeyError: If name or letter fields are missing
        ValueError: If a value cannot be parsed
        TypeError: If data has the wrong shape
    """
    if not isinstance(data, dict):
        raise TypeError(f"Preset entry must be an object, got {type(data).__name__}")

    name = str(data["name"]).strip()
    if not name:
        raise ValueError("Preset name is empty")

    raw_letters = data.get("letters") or []
    if not isinstance(raw_letters, list):
        raise TypeError("letters must be a list")

    return Preset(
        name=name,
        is_built_in=bool(data.get("isBuiltIn", False)),
        letters=tuple(PositionedCharacter.from_dict(item) for item in raw_letters),
        page_settings=PageSettings.from_dict(data.get("pageSettings")),
        orientation=Orientation.parse(data.get("orientation", Orientation.LANDSCAPE.value)),
        created_at=str(data.get("createdAt") or ""),
        grid_layout=GridLayout.from_dict(data.get("gridLayout")),
    )


def presets_to_json(presets: Iterable[Preset]) -> str:
    """Serialize a sequence of presets to one JSON document."""
    return json.dumps([serialize_preset(p) for p in presets])


def presets_from_json(text: Optional[str]) -> list[Preset]:
    """
    Parse a stored JSON document into presets.

    Malformed documents yield an empty list. Malformed individual entries
    are skipped so one bad preset does not hide the others.
    """
    if not text:
        return []
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning(f"Stored presets are not valid JSON, ignoring: {e}")
        return []
    if not isinstance(payload, list):
        logger.warning("Stored presets are not a JSON array, ignoring")
        return []

    presets: list[Preset] = []
    for index, entry in enumerate(payload):
        try:
            presets.append(deserialize_preset(entry))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Skipping malformed preset at index {index}: {e}")
    return presets
