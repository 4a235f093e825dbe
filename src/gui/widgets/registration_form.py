"""
Registration form page widget.
"""

from __future__ import annotations

from PySide6.QtWidgets import QGridLayout, QLineEdit, QPushButton, QWidget

from core.config import SUBMIT_BUTTON_TEXT
from core.fields import FieldKind, placeholder_for


class RegistrationFormWidget(QWidget):
    """
    Grid of one line edit per field, followed by the submit button.

    Holds widgets only; validation is attached by FormBinder.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.inputs: dict[FieldKind, QLineEdit] = {}
        self.submit_button = QPushButton(SUBMIT_BUTTON_TEXT)
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QGridLayout(self)

        for row, kind in enumerate(FieldKind):
            line_edit = QLineEdit()
            line_edit.setObjectName(f"{kind.value}Input")
            line_edit.setPlaceholderText(placeholder_for(kind))
            layout.addWidget(line_edit, row, 0)
            self.inputs[kind] = line_edit

        self.submit_button.setObjectName("submitButton")
        self.submit_button.setEnabled(False)
        layout.addWidget(self.submit_button, len(self.inputs), 0)

    def input_for(self, kind: FieldKind) -> QLineEdit:
        return self.inputs[kind]
