"""
Preset list with load, delete and save-as.

The panel talks to PresetStore directly for listing, saving and deleting.
Loading is forwarded to the main window, which owns the layout.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from vision_trainer.core.models import Preset
from vision_trainer.presets import LoadedPreset, PresetError, PresetStore

logger = logging.getLogger(__name__)

BUILT_IN_SUFFIX = " (built-in)"

# Returns the arguments for PresetStore.save(): letters, page settings,
# orientation and grid layout of the current editor state
SnapshotProvider = Callable[[], tuple]


class PresetsPanel(QGroupBox):
    presetLoaded = Signal(object)  # LoadedPreset

    def __init__(
        self,
        store: PresetStore,
        snapshot: SnapshotProvider,
        parent: Optional[QWidget] = None,
    ):
        super().__init__("Presets", parent)
        self.store = store
        self._snapshot = snapshot

        layout = QVBoxLayout(self)

        self.list_widget = QListWidget()
        self.list_widget.setMinimumHeight(140)
        layout.addWidget(self.list_widget)

        buttons = QHBoxLayout()
        self.load_btn = QPushButton("Load")
        self.delete_btn = QPushButton("Delete")
        buttons.addWidget(self.load_btn)
        buttons.addWidget(self.delete_btn)
        layout.addLayout(buttons)

        save_row = QHBoxLayout()
        self.name_edit = QLineEdit()
        self.name_edit.setPlaceholderText("New preset name")
        self.save_btn = QPushButton("Save As")
        save_row.addWidget(self.name_edit)
        save_row.addWidget(self.save_btn)
        layout.addLayout(save_row)

        self.error_label = QLabel()
        self.error_label.setObjectName("errorLabel")
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        layout.addWidget(self.error_label)

        self.load_btn.clicked.connect(self.load_selected)
        self.delete_btn.clicked.connect(self.delete_selected)
        self.save_btn.clicked.connect(self.save_current)
        self.name_edit.returnPressed.connect(self.save_current)
        self.name_edit.textEdited.connect(lambda _: self._show_error(None))
        self.list_widget.itemDoubleClicked.connect(lambda _: self.load_selected())
        self.list_widget.currentItemChanged.connect(lambda *_: self._update_buttons())

        self.refresh()

    # ─────────────────────────────────────────────────────────────────────────
    # List
    # ─────────────────────────────────────────────────────────────────────────

    def refresh(self, select: Optional[str] = None) -> None:
        self.list_widget.clear()
        for preset in self.store.presets:
            label = preset.name + (BUILT_IN_SUFFIX if preset.is_built_in else "")
            item = QListWidgetItem(label)
            item.setData(Qt.ItemDataRole.UserRole, preset.name)
            self.list_widget.addItem(item)
            if select is not None and preset.key == select.casefold():
                self.list_widget.setCurrentItem(item)
        self._update_buttons()

    def selected_preset(self) -> Optional[Preset]:
        item = self.list_widget.currentItem()
        if item is None:
            return None
        return self.store.get(item.data(Qt.ItemDataRole.UserRole))

    def _update_buttons(self) -> None:
        preset = self.selected_preset()
        self.load_btn.setEnabled(preset is not None)
        self.delete_btn.setEnabled(preset is not None and not preset.is_built_in)

    # ─────────────────────────────────────────────────────────────────────────
    # Actions
    # ─────────────────────────────────────────────────────────────────────────

    def load_selected(self) -> Optional[LoadedPreset]:
        preset = self.selected_preset()
        if preset is None:
            return None
        loaded = self.store.load(preset)
        self._show_error(None)
        self.presetLoaded.emit(loaded)
        return loaded

    def delete_selected(self) -> bool:
        preset = self.selected_preset()
        if preset is None:
            return False
        try:
            removed = self.store.delete(preset.name)
        except PresetError as e:
            self._show_error(str(e))
            return False
        self.refresh()
        return removed

    def save_current(self) -> Optional[Preset]:
        letters, page_settings, orientation, grid_layout = self._snapshot()
        try:
            preset = self.store.save(
                self.name_edit.text(), letters, page_settings, orientation, grid_layout
            )
        except PresetError as e:
            self._show_error(str(e))
            return None
        self.name_edit.clear()
        self._show_error(None)
        self.refresh(select=preset.name)
        return preset

    def _show_error(self, message: Optional[str]) -> None:
        self.error_label.setText(message or "")
        self.error_label.setVisible(bool(message))
