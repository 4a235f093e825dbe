"""
Main window for the Registration Form application.

Shows the registration form and swaps it for the welcome screen once the
form is submitted.
"""

import logging

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QStackedWidget

from core.config import FORM_WINDOW_TITLE, WELCOME_WINDOW_TITLE, WINDOW_HEIGHT, WINDOW_WIDTH
from core.form_state import FormController
from gui.validation.form_binder import FormBinder
from gui.widgets.registration_form import RegistrationFormWidget
from gui.widgets.welcome_view import WelcomeView


class RegistrationWindow(QMainWindow):
    """
    Main application window.

    Owns the FormController for the lifetime of the form page.
    """

    def __init__(self) -> None:
        super().__init__()
        self._logger = logging.getLogger(__name__)

        self.setWindowTitle(FORM_WINDOW_TITLE)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)

        self.stack = QStackedWidget()
        self.form_page = RegistrationFormWidget()
        self.welcome_page = WelcomeView()
        self.stack.addWidget(self.form_page)
        self.stack.addWidget(self.welcome_page)
        self.setCentralWidget(self.stack)

        self.controller = FormController()
        self.binder = FormBinder(self.controller, self)
        self._connect_signals()

    def _connect_signals(self) -> None:
        for kind, line_edit in self.form_page.inputs.items():
            self.binder.bind_field(kind, line_edit)
        self.binder.bind_submit_button(self.form_page.submit_button)
        self.binder.submitted.connect(self.on_submitted)

    def on_submitted(self, message: str) -> None:
        """Replace the form with the welcome screen."""
        self.welcome_page.set_message(message)
        self.stack.setCurrentWidget(self.welcome_page)
        self.setWindowTitle(WELCOME_WINDOW_TITLE)

    def is_showing_welcome(self) -> bool:
        return self.stack.currentWidget() is self.welcome_page

    def closeEvent(self, event: QCloseEvent) -> None:
        if not self.controller.closed:
            self._logger.debug("Window closed before submit, discarding form state")
            self.binder.cleanup()
            self.controller.close()
        super().closeEvent(event)
