"""
Main Window for the Vision Trainer editor.

Owns the editing state (LayoutState, PageSettings, orientation) and wires
the canvas, side panels and toolbar to it. PDF export runs on a worker
thread and reports back through signals.
"""
from __future__ import annotations

import logging
import queue
import threading
from typing import Optional

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtPrintSupport import QPrintDialog, QPrinter
from PySide6.QtWidgets import (
    QLabel,
    QMainWindow,
    QMessageBox,
    QProgressDialog,
    QScrollArea,
    QSpinBox,
    QSplitter,
    QStatusBar,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

from vision_trainer import __version__
from vision_trainer.core.geometry import Orientation, get_page_geometry
from vision_trainer.core.models import GridLayout, PageSettings
from vision_trainer.editing import InsufficientPoolError, LayoutState
from vision_trainer.export import MAX_COPIES, MIN_COPIES, ExportConfig, ExportError, export_pdf
from vision_trainer.generators import generate_grid_letters
from vision_trainer.gui.models.settings import EditorSettings, save_editor_settings
from vision_trainer.gui.printing import print_pages
from vision_trainer.gui.widgets.letter_editor import LetterEditor
from vision_trainer.gui.widgets.page_canvas import PageCanvas
from vision_trainer.gui.widgets.page_settings_panel import PageSettingsPanel
from vision_trainer.gui.widgets.presets_panel import PresetsPanel
from vision_trainer.presets import KeyValueStore, LoadedPreset, PresetStore
from vision_trainer.utils.logging_utils import attach_queue_handler, detach_queue_handler

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    # Worker thread -> GUI thread
    exportProgress = Signal(int, int)
    exportFinished = Signal(bool, object)  # success, ExportResult or error message

    def __init__(
        self,
        store: PresetStore,
        kv_store: KeyValueStore,
        editor_settings: Optional[EditorSettings] = None,
    ):
        super().__init__()
        self.store = store
        self.kv_store = kv_store
        self.editor_settings = editor_settings or EditorSettings()
        self.page_settings = PageSettings()
        self.orientation = self.editor_settings.orientation
        self.grid_layout: Optional[GridLayout] = GridLayout(
            self.editor_settings.grid_rows, self.editor_settings.grid_cols
        )
        self.layout_state = LayoutState(generate_grid_letters(
            self.editor_settings.grid_rows, self.editor_settings.grid_cols, self.orientation,
        ))
        self._export_thread: Optional[threading.Thread] = None
        self._progress_dialog: Optional[QProgressDialog] = None

        self.setWindowTitle("Vision Trainer")
        self.resize(1280, 820)

        # --- Toolbar ---
        toolbar = QToolBar("Main")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self.regenerate_action = QAction("Regenerate Pattern", self)
        self.regenerate_action.setShortcut(QKeySequence("Ctrl+R"))
        self.regenerate_action.triggered.connect(self.regenerate)
        toolbar.addAction(self.regenerate_action)

        self.print_action = QAction("Print Layout", self)
        self.print_action.setShortcut(QKeySequence.StandardKey.Print)
        self.print_action.triggered.connect(self._on_print_clicked)
        toolbar.addAction(self.print_action)

        toolbar.addSeparator()
        toolbar.addWidget(QLabel(" Copies "))
        self.copies_spin = QSpinBox()
        self.copies_spin.setRange(MIN_COPIES, MAX_COPIES)
        self.copies_spin.setValue(self.editor_settings.copies)
        toolbar.addWidget(self.copies_spin)

        self.export_action = QAction("Export PDF", self)
        self.export_action.setShortcut(QKeySequence("Ctrl+E"))
        self.export_action.triggered.connect(self._on_export_clicked)
        toolbar.addAction(self.export_action)

        # --- Central area ---
        self.canvas = PageCanvas(self.layout_state)
        self.settings_panel = PageSettingsPanel()
        self.letter_editor = LetterEditor()
        self.presets_panel = PresetsPanel(store, self._preset_snapshot)

        side = QWidget()
        side_layout = QVBoxLayout(side)
        side_layout.addWidget(self.settings_panel)
        side_layout.addWidget(self.letter_editor)
        side_layout.addWidget(self.presets_panel)
        side_layout.addStretch()
        scroll = QScrollArea()
        scroll.setWidget(side)
        scroll.setWidgetResizable(True)
        scroll.setMinimumWidth(300)

        self.splitter = QSplitter(Qt.Orientation.Horizontal)
        self.splitter.addWidget(scroll)
        self.splitter.addWidget(self.canvas)
        self.splitter.setStretchFactor(1, 1)
        self.setCentralWidget(self.splitter)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

        # Initialize Logging
        self.log_queue: queue.Queue = queue.Queue()
        self.log_timer = QTimer(self)
        self.log_timer.timeout.connect(self._drain_log_queue)
        self.log_timer.start(100)

        # --- Wiring ---
        self.canvas.selectionChanged.connect(lambda _: self._sync_letter_editor())
        self.canvas.letterMoved.connect(lambda _: self._sync_letter_editor())
        self.letter_editor.letterEdited.connect(self._on_letter_edited)

        self.settings_panel.pageSettingsChanged.connect(self.set_page_settings)
        self.settings_panel.orientationChanged.connect(self.set_orientation)
        self.settings_panel.showGridChanged.connect(self._on_show_grid_changed)
        self.settings_panel.showFixationChanged.connect(self._on_show_fixation_changed)
        self.settings_panel.optionsChanged.connect(self._save_editor_settings)
        self.settings_panel.gridRequested.connect(self.apply_grid)
        self.copies_spin.valueChanged.connect(lambda _: self._save_editor_settings())

        self.presets_panel.presetLoaded.connect(self.apply_preset)

        self.exportProgress.connect(self._on_export_progress)
        self.exportFinished.connect(self._finish_export)

        self._restore_state()

    def _restore_state(self) -> None:
        settings = self.editor_settings
        self.settings_panel.apply_editor_settings(settings)
        self.settings_panel.set_page_settings(self.page_settings)
        self.canvas.set_orientation(self.orientation)
        self.letter_editor.set_orientation(self.orientation)
        self.canvas.set_show_grid(settings.show_grid)
        self.canvas.set_show_fixation(settings.show_fixation)
        self.canvas.set_page_settings(self.page_settings)
        self._sync_letter_editor()
        self.status_bar.showMessage(f"Vision Trainer {__version__}", 3000)

    # ─────────────────────────────────────────────────────────────────────────
    # Editing
    # ─────────────────────────────────────────────────────────────────────────

    def regenerate(self) -> bool:
        """Assign fresh characters; warn and keep the layout if impossible."""
        try:
            self.layout_state.regenerate(
                include_digits=self.settings_panel.digits_check.isChecked(),
                allow_duplicates=self.settings_panel.duplicates_check.isChecked(),
            )
        except InsufficientPoolError as e:
            logger.warning(f"Regeneration refused: short by {e.shortfall} characters")
            QMessageBox.warning(self, "Not Enough Characters", str(e))
            return False
        self._refresh_layout()
        return True

    def apply_grid(self, rows: int, cols: int) -> None:
        self.layout_state.replace_letters(generate_grid_letters(rows, cols, self.orientation))
        self.grid_layout = GridLayout(rows, cols)
        self._save_editor_settings()
        self._refresh_layout()

    def apply_preset(self, loaded: LoadedPreset) -> None:
        self.layout_state.replace_letters(loaded.letters)
        self.grid_layout = loaded.grid_layout
        self.set_page_settings(loaded.page_settings)
        self.settings_panel.set_page_settings(loaded.page_settings)
        self.settings_panel.set_orientation(loaded.orientation)
        self.set_orientation(loaded.orientation, clamp=False)
        if loaded.grid_layout is not None:
            self.settings_panel.rows_spin.setValue(loaded.grid_layout.rows)
            self.settings_panel.cols_spin.setValue(loaded.grid_layout.cols)
        self._refresh_layout()
        self.status_bar.showMessage(f"Loaded preset {loaded.name!r}", 3000)

    def set_page_settings(self, settings: PageSettings) -> None:
        self.page_settings = settings
        self.canvas.set_page_settings(settings)

    def set_orientation(self, orientation: Orientation, clamp: bool = True) -> None:
        """Switch orientation, pulling letters that fall off the new page back onto it."""
        self.orientation = Orientation.parse(orientation)
        if clamp:
            geometry = get_page_geometry(self.orientation)
            for letter in self.layout_state.letters:
                x, y = geometry.clamp(letter.x, letter.y)
                if (x, y) != (letter.x, letter.y):
                    self.layout_state.move_letter(letter.id, x, y)
        self.canvas.set_orientation(self.orientation)
        self.letter_editor.set_orientation(self.orientation)
        self._save_editor_settings()
        self._sync_letter_editor()

    def _on_letter_edited(self, letter_id: int, field_name: str, value: object) -> None:
        try:
            self.layout_state.update_letter(letter_id, field_name, value)
        except (KeyError, ValueError) as e:
            logger.warning(f"Rejected edit of {field_name} on letter {letter_id}: {e}")
            return
        self.canvas.update()

    def _on_show_grid_changed(self, enabled: bool) -> None:
        self.canvas.set_show_grid(enabled)
        self._save_editor_settings()

    def _on_show_fixation_changed(self, enabled: bool) -> None:
        self.canvas.set_show_fixation(enabled)
        self._save_editor_settings()

    def _refresh_layout(self) -> None:
        self.canvas.update()
        self._sync_letter_editor()

    def _sync_letter_editor(self) -> None:
        self.letter_editor.set_letter(self.layout_state.selected_letter)

    def _preset_snapshot(self) -> tuple:
        return (
            self.layout_state.snapshot(),
            self.page_settings,
            self.orientation,
            self.grid_layout,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Settings
    # ─────────────────────────────────────────────────────────────────────────

    def current_editor_settings(self) -> EditorSettings:
        panel = self.settings_panel
        return EditorSettings(
            orientation=self.orientation,
            show_grid=panel.grid_check.isChecked(),
            show_fixation=panel.fixation_check.isChecked(),
            include_digits=panel.digits_check.isChecked(),
            allow_duplicates=panel.duplicates_check.isChecked(),
            copies=self.copies_spin.value(),
            grid_rows=panel.rows_spin.value(),
            grid_cols=panel.cols_spin.value(),
        )

    def _save_editor_settings(self) -> None:
        self.editor_settings = self.current_editor_settings()
        try:
            save_editor_settings(self.kv_store, self.editor_settings)
        except OSError as e:
            logger.warning(f"Failed to save editor settings: {e}")

    def build_export_config(self) -> ExportConfig:
        """Immutable snapshot of everything the export and print need."""
        settings = self.current_editor_settings()
        return ExportConfig(
            letters=self.layout_state.snapshot(),
            copies=settings.copies,
            page_settings=self.page_settings,
            orientation=self.orientation,
            show_fixation=settings.show_fixation,
            include_digits=settings.include_digits,
            allow_duplicates=settings.allow_duplicates,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Print
    # ─────────────────────────────────────────────────────────────────────────

    def _on_print_clicked(self) -> None:
        printer = QPrinter(QPrinter.PrinterMode.HighResolution)
        dialog = QPrintDialog(printer, self)
        if dialog.exec() != QPrintDialog.DialogCode.Accepted:
            return
        count = print_pages(printer, self.build_export_config())
        self.status_bar.showMessage(f"Sent {count} page(s) to the printer", 5000)

    # ─────────────────────────────────────────────────────────────────────────
    # Export
    # ─────────────────────────────────────────────────────────────────────────

    def _on_export_clicked(self) -> None:
        """Start the export on a worker thread."""
        if self._export_thread is not None and self._export_thread.is_alive():
            return
        # Build config on the GUI thread
        config = self.build_export_config()

        self.set_ui_locked(True)
        self._progress_dialog = QProgressDialog(
            f"Page 0 of {config.copies}", None, 0, config.copies, self
        )
        self._progress_dialog.setWindowTitle("Exporting PDF")
        self._progress_dialog.setWindowModality(Qt.WindowModality.WindowModal)
        self._progress_dialog.setMinimumDuration(0)
        self._progress_dialog.setValue(0)

        def run_export(config: ExportConfig) -> None:
            success = False
            payload: object = None
            handler = attach_queue_handler(self.log_queue, "vision_trainer")
            try:
                payload = export_pdf(config, on_progress=self.exportProgress.emit)
                success = True
            except ExportError as e:
                logger.exception("Export failed")
                payload = str(e)
            except Exception as e:
                logger.exception("Unexpected export failure")
                payload = f"Unexpected error: {e}"
            finally:
                detach_queue_handler(handler, "vision_trainer")
                # Always emit signal to finish export on main thread
                self.exportFinished.emit(success, payload)

        self._export_thread = threading.Thread(target=run_export, args=(config,), daemon=True)
        self._export_thread.start()

    def _on_export_progress(self, done: int, total: int) -> None:
        if self._progress_dialog is not None:
            self._progress_dialog.setLabelText(f"Page {done} of {total}")
            self._progress_dialog.setValue(done)

    def _finish_export(self, success: bool, payload: object) -> None:
        """Restore UI state after export and report the outcome."""
        if self._progress_dialog is not None:
            self._progress_dialog.close()
            self._progress_dialog.deleteLater()
            self._progress_dialog = None
        self.set_ui_locked(False)

        if success:
            self.status_bar.showMessage(f"Saved {payload.pdf_path}", 8000)
        else:
            QMessageBox.critical(
                self,
                "Export Failed",
                f"Failed to generate PDF. Please try again.\n\n{payload}",
            )

    def set_ui_locked(self, locked: bool) -> None:
        """Lock or unlock UI elements during export."""
        for action in (self.regenerate_action, self.print_action, self.export_action):
            action.setEnabled(not locked)
        self.copies_spin.setEnabled(not locked)

    # ─────────────────────────────────────────────────────────────────────────
    # Logging
    # ─────────────────────────────────────────────────────────────────────────

    def _drain_log_queue(self) -> None:
        while True:
            try:
                msg = self.log_queue.get_nowait()
            except queue.Empty:
                break
            if isinstance(msg, tuple) and len(msg) == 2:
                text, _level = msg
                self.status_bar.showMessage(text, 5000)
            else:
                self.status_bar.showMessage(str(msg), 5000)
            self.log_queue.task_done()

    def closeEvent(self, event) -> None:
        """Save editor state on close."""
        self._save_editor_settings()
        super().closeEvent(event)
