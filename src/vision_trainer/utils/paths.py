"""
Path utilities for handling dev vs production (frozen) file locations.

Dev mode: Uses local workspace/ directory
Frozen mode: Uses system-standard paths (Documents, AppData)
"""
from __future__ import annotations

import os
import platform
import sys
from pathlib import Path

APP_NAME = "Vision Trainer"


def is_frozen() -> bool:
    """Check if running as a frozen (PyInstaller) application."""
    return getattr(sys, 'frozen', False) or hasattr(sys, '_MEIPASS')


def _qt_location(kind: str) -> Path | None:
    """Ask Qt for a standard location; None if Qt has no answer."""
    from PySide6.QtCore import QStandardPaths

    location = QStandardPaths.writableLocation(getattr(QStandardPaths.StandardLocation, kind))
    return Path(location) if location else None


def get_app_data_dir() -> Path:
    """
    Get the application data directory for internal state files.

    Frozen: ~/Library/Application Support/Vision Trainer (macOS)
            or %LOCALAPPDATA%/Vision Trainer (Windows)
    Dev: workspace/
    """
    if not is_frozen():
        return Path.cwd() / "workspace"

    app_data = _qt_location("AppLocalDataLocation")
    if app_data is not None:
        return app_data
    if platform.system() == "Windows":
        base = os.environ.get("LOCALAPPDATA", os.environ.get("APPDATA"))
        return Path(base) / APP_NAME if base else Path.home() / ".vision_trainer"
    if platform.system() == "Darwin":
        return Path.home() / "Library/Application Support" / APP_NAME
    return Path.home() / ".local/share" / APP_NAME


def get_export_dir() -> Path:
    """
    Get the folder exported PDFs are written to.

    Frozen: ~/Documents/Vision Trainer/Exports
    Dev: workspace/exports
    """
    if not is_frozen():
        return Path.cwd() / "workspace" / "exports"
    docs = _qt_location("DocumentsLocation") or Path.home() / "Documents"
    return docs / APP_NAME / "Exports"


def get_storage_path() -> Path:
    """Get the key-value file holding presets and editor settings."""
    return get_app_data_dir() / "storage.json"
