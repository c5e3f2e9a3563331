"""
Side panel for page appearance and generation options.

Colors and font feed PageSettings; the toggles and grid size feed
EditorSettings. The panel only emits signals, the main window owns state.
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QCheckBox,
    QColorDialog,
    QComboBox,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from vision_trainer.core.geometry import Orientation
from vision_trainer.core.models import FONT_FAMILIES, PageSettings
from vision_trainer.gui.models.settings import MAX_GRID_COLS, MAX_GRID_ROWS, EditorSettings


class ColorButton(QPushButton):
    """Push button that shows a color swatch and opens a color picker."""

    colorChanged = Signal(str)

    def __init__(self, color: str, title: str, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._title = title
        self._color = color
        self.setFixedWidth(90)
        self.clicked.connect(self._pick)
        self._refresh()

    def color(self) -> str:
        return self._color

    def set_color(self, color: str) -> None:
        self._color = color.upper()
        self._refresh()

    def _pick(self) -> None:
        chosen = QColorDialog.getColor(QColor(self._color), self, self._title)
        if chosen.isValid():
            self.set_color(chosen.name())
            self.colorChanged.emit(self._color)

    def _refresh(self) -> None:
        text = "#ffffff" if QColor(self._color).lightness() < 128 else "#000000"
        self.setText(self._color)
        self.setStyleSheet(
            f"background-color: {self._color}; color: {text}; border: 1px solid #999;"
        )


class PageSettingsPanel(QGroupBox):
    pageSettingsChanged = Signal(object)  # PageSettings
    orientationChanged = Signal(object)  # Orientation
    showGridChanged = Signal(bool)
    showFixationChanged = Signal(bool)
    optionsChanged = Signal()  # digits / duplicates
    gridRequested = Signal(int, int)

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__("Page", parent)
        layout = QVBoxLayout(self)

        form = QFormLayout()
        self.bg_button = ColorButton("#FFFFFF", "Background color")
        self.text_button = ColorButton("#000000", "Text color")
        form.addRow("Background", self.bg_button)
        form.addRow("Text", self.text_button)

        self.font_combo = QComboBox()
        for css, label in FONT_FAMILIES:
            self.font_combo.addItem(label, css)
        form.addRow("Font", self.font_combo)

        self.orientation_combo = QComboBox()
        self.orientation_combo.addItem("Landscape", Orientation.LANDSCAPE.value)
        self.orientation_combo.addItem("Portrait", Orientation.PORTRAIT.value)
        form.addRow("Orientation", self.orientation_combo)
        layout.addLayout(form)

        self.fixation_check = QCheckBox("Show fixation point")
        self.digits_check = QCheckBox("Include numbers")
        self.duplicates_check = QCheckBox("Allow duplicates")
        self.grid_check = QCheckBox("Show grid overlay")
        for check in (self.fixation_check, self.digits_check, self.duplicates_check, self.grid_check):
            layout.addWidget(check)

        grid_row = QHBoxLayout()
        self.rows_spin = QSpinBox()
        self.rows_spin.setRange(1, MAX_GRID_ROWS)
        self.rows_spin.setPrefix("Rows ")
        self.cols_spin = QSpinBox()
        self.cols_spin.setRange(1, MAX_GRID_COLS)
        self.cols_spin.setPrefix("Cols ")
        self.apply_grid_btn = QPushButton("Apply Grid")
        grid_row.addWidget(self.rows_spin)
        grid_row.addWidget(self.cols_spin)
        grid_row.addWidget(self.apply_grid_btn)
        layout.addLayout(grid_row)

        self.bg_button.colorChanged.connect(self._emit_page_settings)
        self.text_button.colorChanged.connect(self._emit_page_settings)
        self.font_combo.currentIndexChanged.connect(self._emit_page_settings)
        self.orientation_combo.currentIndexChanged.connect(
            lambda _: self.orientationChanged.emit(self.orientation())
        )
        self.fixation_check.toggled.connect(self.showFixationChanged)
        self.grid_check.toggled.connect(self.showGridChanged)
        self.digits_check.toggled.connect(lambda _: self.optionsChanged.emit())
        self.duplicates_check.toggled.connect(lambda _: self.optionsChanged.emit())
        self.apply_grid_btn.clicked.connect(
            lambda: self.gridRequested.emit(self.rows_spin.value(), self.cols_spin.value())
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Values
    # ─────────────────────────────────────────────────────────────────────────

    def page_settings(self) -> PageSettings:
        return PageSettings(
            background_color=self.bg_button.color(),
            text_color=self.text_button.color(),
            font_family=self.font_combo.currentData(),
        )

    def orientation(self) -> Orientation:
        return Orientation.parse(self.orientation_combo.currentData())

    def set_page_settings(self, settings: PageSettings) -> None:
        """Show settings without emitting change signals."""
        self.blockSignals(True)
        self.bg_button.set_color(settings.background_color)
        self.text_button.set_color(settings.text_color)
        index = self.font_combo.findData(settings.font_family)
        self.font_combo.blockSignals(True)
        self.font_combo.setCurrentIndex(max(index, 0))
        self.font_combo.blockSignals(False)
        self.blockSignals(False)

    def set_orientation(self, orientation: Orientation) -> None:
        self.orientation_combo.blockSignals(True)
        self.orientation_combo.setCurrentIndex(self.orientation_combo.findData(Orientation.parse(orientation).value))
        self.orientation_combo.blockSignals(False)

    def apply_editor_settings(self, settings: EditorSettings) -> None:
        widgets = (
            self.fixation_check, self.digits_check, self.duplicates_check,
            self.grid_check, self.rows_spin, self.cols_spin,
        )
        for widget in widgets:
            widget.blockSignals(True)
        self.fixation_check.setChecked(settings.show_fixation)
        self.digits_check.setChecked(settings.include_digits)
        self.duplicates_check.setChecked(settings.allow_duplicates)
        self.grid_check.setChecked(settings.show_grid)
        self.rows_spin.setValue(settings.grid_rows)
        self.cols_spin.setValue(settings.grid_cols)
        for widget in widgets:
            widget.blockSignals(False)
        self.set_orientation(settings.orientation)

    def _emit_page_settings(self, *_args) -> None:
        self.pageSettingsChanged.emit(self.page_settings())
