"""
Module: presets

Purpose:
    Named layout snapshots persisted through a key-value store.
"""

from .builtins import build_builtin_presets
from .kv_store import JsonFileKeyValueStore, KeyValueStore, MemoryKeyValueStore
from .store import (
    STORAGE_KEY,
    BuiltInPresetError,
    DuplicatePresetNameError,
    EmptyPresetNameError,
    LoadedPreset,
    PresetError,
    PresetStore,
)

__all__ = [
    "STORAGE_KEY",
    "BuiltInPresetError",
    "DuplicatePresetNameError",
    "EmptyPresetNameError",
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "LoadedPreset",
    "MemoryKeyValueStore",
    "PresetError",
    "PresetStore",
    "build_builtin_presets",
]
