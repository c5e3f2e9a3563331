"""
Key-value persistence backing presets and editor settings.

The store is an opaque string-by-key mapping. The file-backed variant keeps
every key in one JSON object and writes it atomically. Read or write
failures are logged and never raised to the caller.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Durable get/set-by-key string store."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryKeyValueStore:
    """Dictionary-backed store for tests and headless runs."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileKeyValueStore:
    """Lightweight JSON-backed store; one file holds all keys."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def _read(self) -> Dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            logger.warning(f"Storage file {self.path} is corrupted, ignoring: {e}")
            return {}
        except OSError as e:
            logger.warning(f"Failed to read storage file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Storage file {self.path} does not hold a JSON object, ignoring")
            return {}
        return data

    def _write(self, data: Dict[str, object]) -> None:
        """Safely write with atomic replacement.

        Uses a temp file to prevent corruption if write is interrupted.
        """
        temp_path = self.path.with_suffix(".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
            # Atomic rename (overwrites existing)
            temp_path.replace(self.path)
        except OSError as e:
            logger.warning(f"Failed to save storage file {self.path}: {e}")
            try:
                if temp_path.exists():
                    temp_path.unlink()
            except OSError:
                pass
