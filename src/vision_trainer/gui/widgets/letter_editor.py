"""
Editor for the selected letter's character, position and size.
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QDoubleSpinBox,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QSlider,
    QWidget,
)

from vision_trainer.core.geometry import Orientation, get_page_geometry
from vision_trainer.core.models import PositionedCharacter

MIN_FONT_SIZE = 8
MAX_FONT_SIZE = 120


class LetterEditor(QGroupBox):
    """
    Form bound to one PositionedCharacter.

    Emits letterEdited(id, field, value) for each user change; setting a
    letter programmatically emits nothing. Disabled when nothing is selected.
    """

    letterEdited = Signal(int, str, object)

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__("Selected Letter", parent)
        self._letter_id: Optional[int] = None

        form = QFormLayout(self)

        self.char_edit = QLineEdit()
        self.char_edit.setMaxLength(1)
        self.char_edit.setFixedWidth(48)
        self.char_edit.setAlignment(Qt.AlignmentFlag.AlignCenter)
        form.addRow("Character", self.char_edit)

        self.x_spin = self._make_position_spin()
        self.y_spin = self._make_position_spin()
        form.addRow("X (mm)", self.x_spin)
        form.addRow("Y (mm)", self.y_spin)
        self.set_orientation(Orientation.LANDSCAPE)

        size_row = QHBoxLayout()
        self.size_slider = QSlider(Qt.Orientation.Horizontal)
        self.size_slider.setRange(MIN_FONT_SIZE, MAX_FONT_SIZE)
        self.size_label = QLabel()
        self.size_label.setFixedWidth(44)
        size_row.addWidget(self.size_slider)
        size_row.addWidget(self.size_label)
        form.addRow("Size", size_row)

        self.char_edit.textEdited.connect(self._on_char_edited)
        self.x_spin.valueChanged.connect(lambda v: self._emit("x", v))
        self.y_spin.valueChanged.connect(lambda v: self._emit("y", v))
        self.size_slider.valueChanged.connect(self._on_size_changed)

        self.set_letter(None)

    @property
    def letter_id(self) -> Optional[int]:
        return self._letter_id

    def _make_position_spin(self) -> QDoubleSpinBox:
        spin = QDoubleSpinBox()
        spin.setDecimals(1)
        spin.setSingleStep(1.0)
        return spin

    def set_orientation(self, orientation: Orientation) -> None:
        """Bound the position fields to the page size."""
        geometry = get_page_geometry(orientation)
        for spin, limit in ((self.x_spin, geometry.width_mm), (self.y_spin, geometry.height_mm)):
            spin.blockSignals(True)
            spin.setRange(0.0, limit)
            spin.blockSignals(False)

    def set_letter(self, letter: Optional[PositionedCharacter]) -> None:
        """Show a letter (or nothing) without emitting edits."""
        self._letter_id = letter.id if letter is not None else None
        controls = (self.char_edit, self.x_spin, self.y_spin, self.size_slider)
        for control in controls:
            control.blockSignals(True)
            control.setEnabled(letter is not None)

        if letter is None:
            self.char_edit.clear()
            self.x_spin.setValue(0.0)
            self.y_spin.setValue(0.0)
            self.size_label.setText("")
        else:
            self.char_edit.setText(letter.char)
            self.x_spin.setValue(letter.x)
            self.y_spin.setValue(letter.y)
            self.size_slider.setValue(round(letter.font_size))
            self.size_label.setText(f"{letter.font_size:g}pt")

        for control in controls:
            control.blockSignals(False)

    def _on_char_edited(self, text: str) -> None:
        # An empty field is a transient state while typing
        if text:
            self._emit("char", text.upper())

    def _on_size_changed(self, value: int) -> None:
        self.size_label.setText(f"{value}pt")
        self._emit("font_size", float(value))

    def _emit(self, field_name: str, value: object) -> None:
        if self._letter_id is not None:
            self.letterEdited.emit(self._letter_id, field_name, value)
