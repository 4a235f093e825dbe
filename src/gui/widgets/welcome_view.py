"""
Static screen shown after a successful registration.
"""

from __future__ import annotations

from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from gui.utils.styling import StyleSheets


class WelcomeView(QWidget):
    """Single label that displays the welcome message."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)

        self.message_label = QLabel()
        self.message_label.setObjectName("welcomeLabel")
        self.message_label.setStyleSheet(StyleSheets.get_welcome_label_style())
        layout.addWidget(self.message_label)
        layout.addStretch()

    def set_message(self, message: str) -> None:
        self.message_label.setText(message)

    def message(self) -> str:
        return self.message_label.text()
