"""
Module: presets.store

Purpose:
    Named collection of layout snapshots persisted as one JSON array
    under a fixed key of a key-value store.

Key Classes:
    - PresetStore: initialize / save / delete / load
    - LoadedPreset: Working copy returned by load()
    - PresetError and subclasses: Validation failures

Dependencies:
    - presets.kv_store: Durable string storage
    - presets.builtins: Built-in definitions
    - core.utils.serialization: JSON document format

Used By:
    - gui.main_window: Presets panel
    - cli: Export by preset name
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Iterable, Iterator, Optional, Union

from vision_trainer.core.geometry import Orientation
from vision_trainer.core.models import GridLayout, PageSettings, PositionedCharacter, Preset
from vision_trainer.core.utils.serialization import presets_from_json, presets_to_json

from .builtins import build_builtin_presets
from .kv_store import KeyValueStore

logger = logging.getLogger(__name__)

STORAGE_KEY = "visionTrainerPresets"


class PresetError(ValueError):
    """Preset request rejected."""


class EmptyPresetNameError(PresetError):
    def __init__(self) -> None:
        super().__init__("Preset name cannot be empty")


class DuplicatePresetNameError(PresetError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"A preset named {name!r} already exists")


class BuiltInPresetError(PresetError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Built-in preset {name!r} cannot be deleted")


@dataclass(frozen=True)
class LoadedPreset:
    """
    Working copy of a preset, ready to apply to the editor.

    Attributes:
        name: Preset name
        letters: Fresh list owned by the caller
        page_settings: Page colors and font
        orientation: Page orientation
        grid_layout: Grid dimensions, if recorded
    """

    name: str
    letters: list[PositionedCharacter]
    page_settings: PageSettings
    orientation: Orientation
    grid_layout: Optional[GridLayout]


class PresetStore:
    """
    Preset collection with case-insensitive unique names.

    Call initialize() once per process before use. Built-ins come first,
    then custom presets in creation order.

    Example:
        >>> store = PresetStore(JsonFileKeyValueStore(path))
        >>> store.initialize()
        >>> store.save("My chart", state.letters, settings, Orientation.LANDSCAPE)
        >>> store.load("my chart").letters
    """

    def __init__(
        self,
        kv_store: KeyValueStore,
        *,
        key: str = STORAGE_KEY,
        builtin_factory: Callable[[], Iterable[Preset]] = build_builtin_presets,
    ) -> None:
        self.kv_store = kv_store
        self.key = key
        self._builtin_factory = builtin_factory
        self._presets: list[Preset] = []

    # ─────────────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────────────

    def initialize(self) -> tuple[Preset, ...]:
        """
        Load stored presets and merge them with fresh built-ins.

        Stored built-ins are discarded in favour of the current code's
        definitions. Custom presets survive unless their name now clashes
        with a built-in.

        Returns:
            The merged preset tuple
        """
        builtins = list(self._builtin_factory())
        stored = self._read()

        if not stored:
            logger.info(f"No stored presets, seeding {len(builtins)} built-ins")
            self._presets = builtins
            self._persist()
            return self.presets

        builtin_keys = {p.key for p in builtins}
        customs: list[Preset] = []
        seen = set(builtin_keys)
        for preset in stored:
            if preset.is_built_in:
                continue
            if preset.key in seen:
                logger.warning(f"Dropping stored preset {preset.name!r}: name already in use")
                continue
            seen.add(preset.key)
            customs.append(preset)

        self._presets = builtins + customs
        self._persist()
        logger.info(f"Loaded {len(builtins)} built-in and {len(customs)} custom presets")
        return self.presets

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def presets(self) -> tuple[Preset, ...]:
        return tuple(self._presets)

    def __len__(self) -> int:
        return len(self._presets)

    def __iter__(self) -> Iterator[Preset]:
        return iter(self.presets)

    def names(self) -> list[str]:
        return [p.name for p in self._presets]

    def get(self, name: str) -> Optional[Preset]:
        """Find a preset by case-insensitive name."""
        key = name.strip().casefold()
        for preset in self._presets:
            if preset.key == key:
                return preset
        return None

    # ─────────────────────────────────────────────────────────────────────────
    # Operations
    # ─────────────────────────────────────────────────────────────────────────

    def save(
        self,
        name: str,
        letters: Iterable[PositionedCharacter],
        page_settings: PageSettings,
        orientation: Orientation = Orientation.LANDSCAPE,
        grid_layout: Optional[GridLayout] = None,
    ) -> Preset:
        """
        Save the current layout as a new custom preset.

        Raises:
            EmptyPresetNameError: If the trimmed name is empty
            DuplicatePresetNameError: If any preset has the same name ignoring case
        """
        trimmed = name.strip()
        if not trimmed:
            raise EmptyPresetNameError()
        if self.get(trimmed) is not None:
            raise DuplicatePresetNameError(trimmed)

        preset = Preset(
            name=trimmed,
            is_built_in=False,
            letters=tuple(letters),
            page_settings=page_settings,
            orientation=Orientation.parse(orientation),
            created_at=datetime.now(timezone.utc).isoformat(),
            grid_layout=grid_layout,
        )
        self._presets.append(preset)
        self._persist()
        logger.info(f"Saved preset {trimmed!r} with {preset.letter_count} letters")
        return preset

    def delete(self, name: str) -> bool:
        """
        Delete a custom preset.

        Returns:
            True if a preset was removed, False if no preset has that name

        Raises:
            BuiltInPresetError: If the preset is built in
        """
        preset = self.get(name)
        if preset is None:
            return False
        if preset.is_built_in:
            raise BuiltInPresetError(preset.name)
        self._presets.remove(preset)
        self._persist()
        logger.info(f"Deleted preset {preset.name!r}")
        return True

    def load(self, preset: Union[str, Preset]) -> LoadedPreset:
        """
        Return a working copy of a preset without altering the store.

        Raises:
            KeyError: If a name is given and no preset matches
        """
        if isinstance(preset, str):
            found = self.get(preset)
            if found is None:
                raise KeyError(f"No preset named {preset!r}")
            preset = found
        return LoadedPreset(
            name=preset.name,
            letters=list(preset.letters),
            page_settings=preset.page_settings,
            orientation=preset.orientation,
            grid_layout=preset.grid_layout,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Persistence
    # ─────────────────────────────────────────────────────────────────────────

    def _read(self) -> list[Preset]:
        try:
            return presets_from_json(self.kv_store.get(self.key))
        except OSError as e:
            logger.warning(f"Failed to read presets: {e}")
            return []

    def _persist(self) -> None:
        try:
            self.kv_store.set(self.key, presets_to_json(self._presets))
        except OSError as e:
            logger.warning(f"Failed to save presets: {e}")
