"""
Module: cli

Purpose:
    Command line interface: launch the editor, list presets, or export a
    chart to PDF without the GUI.

Key Functions:
    - main(): Parse arguments and dispatch; returns the exit status
    - build_parser(): argparse definition

Dependencies:
    - argparse (std)
    - presets, generators, export

Used By:
    - python -m vision_trainer
    - vision-trainer console script
"""

from __future__ import annotations

import argparse
import logging
import random
import re
import sys
from pathlib import Path
from typing import Optional, Sequence

from vision_trainer import __version__
from vision_trainer.core.geometry import Orientation
from vision_trainer.core.models import PageSettings
from vision_trainer.export import MAX_COPIES, MIN_COPIES, ExportConfig, ExportError, export_pdf
from vision_trainer.generators import generate_grid_letters
from vision_trainer.gui.models.settings import MAX_GRID_COLS, MAX_GRID_ROWS
from vision_trainer.presets import JsonFileKeyValueStore, PresetStore
from vision_trainer.utils.logging_utils import configure_logging
from vision_trainer.utils.paths import get_storage_path

logger = logging.getLogger(__name__)

_GRID_PATTERN = re.compile(r"^\s*(\d+)\s*[xX]\s*(\d+)\s*$")


def _grid_size(value: str) -> tuple[int, int]:
    """argparse type for ROWSxCOLS."""
    match = _GRID_PATTERN.match(value)
    if not match:
        raise argparse.ArgumentTypeError(f"expected ROWSxCOLS, got {value!r}")
    rows, cols = int(match.group(1)), int(match.group(2))
    if not (1 <= rows <= MAX_GRID_ROWS and 1 <= cols <= MAX_GRID_COLS):
        raise argparse.ArgumentTypeError(
            f"grid must be between 1x1 and {MAX_GRID_ROWS}x{MAX_GRID_COLS}"
        )
    return rows, cols


def _copies(value: str) -> int:
    try:
        copies = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if not MIN_COPIES <= copies <= MAX_COPIES:
        raise argparse.ArgumentTypeError(f"copies must be between {MIN_COPIES} and {MAX_COPIES}")
    return copies


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vision-trainer",
        description="Printable optotype chart editor and PDF exporter",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--storage",
        type=Path,
        default=None,
        help="Preset storage file (default: application data folder)",
    )

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("gui", help="Launch the editor (default)")
    sub.add_parser("presets", help="List preset names")

    export = sub.add_parser("export", help="Export a chart as a multi-page PDF")
    source = export.add_mutually_exclusive_group()
    source.add_argument("--preset", help="Preset name (case-insensitive)")
    source.add_argument("--grid", type=_grid_size, metavar="ROWSxCOLS", help="Generate a grid layout")
    export.add_argument("--copies", type=_copies, default=1, help="Pages to export (1-30)")
    export.add_argument(
        "--orientation",
        choices=[o.value for o in Orientation],
        default=None,
        help="Page orientation (default: preset's, or landscape)",
    )
    export.add_argument("--include-digits", action="store_true", help="Regenerate with digits too")
    export.add_argument("--unique", action="store_true", help="No repeated characters on later pages")
    export.add_argument("--fixation", action="store_true", help="Draw the center fixation marker")
    export.add_argument("--seed", type=int, default=None, help="Seed for regenerated pages")
    export.add_argument("--output-dir", type=Path, default=None, help="Folder for the PDF")
    return parser


def _open_store(storage: Optional[Path]) -> PresetStore:
    kv_store = JsonFileKeyValueStore(storage or get_storage_path())
    store = PresetStore(kv_store)
    store.initialize()
    return store


def _cmd_presets(args: argparse.Namespace) -> int:
    store = _open_store(args.storage)
    for preset in store:
        marker = " (built-in)" if preset.is_built_in else ""
        print(f"{preset.name}{marker}  [{preset.letter_count} letters, {preset.orientation.value}]")
    return 0


def _cmd_export(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    rng = random.Random(args.seed)

    if args.preset:
        store = _open_store(args.storage)
        preset = store.get(args.preset)
        if preset is None:
            parser.error(f"unknown preset {args.preset!r}")
        loaded = store.load(preset)
        letters = loaded.letters
        page_settings = loaded.page_settings
        orientation = Orientation.parse(args.orientation or loaded.orientation)
    else:
        rows, cols = args.grid or (4, 7)
        orientation = Orientation.parse(args.orientation)
        letters = generate_grid_letters(rows, cols, orientation)
        page_settings = PageSettings()

    try:
        config = ExportConfig(
            letters=letters,
            copies=args.copies,
            page_settings=page_settings,
            orientation=orientation,
            show_fixation=args.fixation,
            include_digits=args.include_digits,
            allow_duplicates=not args.unique,
            output_dir=args.output_dir,
        )
    except ValueError as e:
        parser.error(str(e))

    def report(done: int, total: int) -> None:
        logger.info(f"Page {done} of {total}")

    try:
        result = export_pdf(config, on_progress=report, rng=rng)
    except ExportError as e:
        logger.error(f"Export failed: {e}")
        return 1

    print(result.pdf_path)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "presets":
        return _cmd_presets(args)
    if args.command == "export":
        return _cmd_export(args, parser)

    from vision_trainer.gui.app import run
    return run(verbose=args.verbose)


if __name__ == "__main__":
    sys.exit(main())
