"""
Tests for the RegistrationWindow class.
"""

from PySide6.QtWidgets import QLineEdit, QPushButton

from core.fields import FieldKind
from gui.main_window import RegistrationWindow
from gui.widgets import RegistrationFormWidget, WelcomeView

VALID_VALUES = {
    FieldKind.FIRST_NAME: "Matthew",
    FieldKind.LAST_NAME: "DeSouza",
    FieldKind.EMAIL: "mdesouza@farmingdale.edu",
    FieldKind.DATE_OF_BIRTH: "02/30/2000",
    FieldKind.ZIP_CODE: "11735",
}


def make_window(qtbot):
    window = RegistrationWindow()
    qtbot.addWidget(window)
    return window


def fill(window, values=VALID_VALUES):
    for kind, text in values.items():
        window.form_page.input_for(kind).setText(text)


class TestRegistrationWindowInitialization:
    """Test window setup."""

    def test_window_properties(self, qtbot):
        window = make_window(qtbot)

        assert window.windowTitle() == "Registration Form"
        assert window.size().width() == 300
        assert window.size().height() == 250
        assert not window.is_showing_welcome()

    def test_form_components(self, qtbot):
        window = make_window(qtbot)
        form = window.form_page

        assert isinstance(form, RegistrationFormWidget)
        assert isinstance(window.welcome_page, WelcomeView)
        assert list(form.inputs) == list(FieldKind)
        assert all(isinstance(widget, QLineEdit) for widget in form.inputs.values())
        assert isinstance(form.submit_button, QPushButton)
        assert form.submit_button.text() == "Add"
        assert not form.submit_button.isEnabled()

    def test_placeholders(self, qtbot):
        window = make_window(qtbot)
        placeholders = [widget.placeholderText() for widget in window.form_page.inputs.values()]

        assert placeholders == ["First Name", "Last Name", "Email", "Date of Birth (MM/DD/YYYY)", "Zip Code"]


class TestRegistrationFlow:
    """Test filling and submitting the form."""

    def test_button_follows_validity(self, qtbot):
        window = make_window(qtbot)
        button = window.form_page.submit_button

        fill(window)
        assert button.isEnabled()

        window.form_page.input_for(FieldKind.ZIP_CODE).setText("1173")
        assert not button.isEnabled()

    def test_submit_shows_welcome_screen(self, qtbot):
        window = make_window(qtbot)
        fill(window)

        window.form_page.submit_button.click()

        assert window.is_showing_welcome()
        assert window.windowTitle() == "New UI"
        assert window.welcome_page.message() == "Welcome to the new UI Matthew!"
        assert window.controller.closed is True

    def test_close_discards_form(self, qtbot):
        window = make_window(qtbot)
        window.show()

        window.close()

        assert window.controller.closed is True
