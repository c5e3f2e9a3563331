from .serialization import (
    deserialize_preset,
    presets_from_json,
    presets_to_json,
    serialize_preset,
)

__all__ = [
    "deserialize_preset",
    "presets_from_json",
    "presets_to_json",
    "serialize_preset",
]
