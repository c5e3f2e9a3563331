"""Top-level package for the Vision Trainer pattern editor.

Provides subpackages:
- vision_trainer.core – geometry, character pool, data models, serialization
- vision_trainer.generators – grid, radial, word-shape and literal chart layouts
- vision_trainer.editing – layout state, regeneration and drag handling
- vision_trainer.presets – preset persistence
- vision_trainer.export – multi-page PDF export
- vision_trainer.gui – PySide6 editor
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    import sys
    from pathlib import Path

    # In dev mode, read directly from pyproject.toml
    if not getattr(sys, 'frozen', False):
        pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    else:
        # In frozen mode, read from bundle root
        pyproject = Path(getattr(sys, "_MEIPASS", ".")) / "pyproject.toml"

    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.1"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    # Fallback to importlib.metadata for installed package
    try:
        from importlib.metadata import version as pkg_version, PackageNotFoundError
        return pkg_version("vision_trainer")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
