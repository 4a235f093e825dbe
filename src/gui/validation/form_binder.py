"""
Qt bridge between the registration form widgets and FormController.

Forwards line edit text changes and focus loss to the controller, and turns
controller notifications into Qt signals, border styling and the submit
button's enabled state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from PySide6.QtCore import QEvent, QObject, Signal
from PySide6.QtWidgets import QAbstractButton, QLineEdit

from core.error_handler import get_error_handler
from core.errors import BaseAppError
from core.fields import FieldKind, hint_for
from core.form_state import FormController
from gui.utils.styling import apply_validation_style


class FormBinder(QObject):
    """
    Binds QLineEdit widgets and a submit button to a FormController.

    Field keys in signals are FieldKind values.
    """

    # Signals
    fieldIndicatorChanged = Signal(str, bool)  # key, valid
    canSubmitChanged = Signal(bool)  # can_submit
    submitted = Signal(str)  # welcome message

    def __init__(self, controller: FormController, parent: QObject | None = None):
        super().__init__(parent)
        self._logger = logging.getLogger(__name__)
        self._controller = controller
        self._widgets: dict[FieldKind, QLineEdit] = {}
        self._text_slots: dict[FieldKind, Callable[[str], None]] = {}
        self._submit_button: QAbstractButton | None = None
        self._unsubscribers: list[Callable[[], None]] = [
            controller.subscribe_can_submit(self._on_can_submit),
            controller.subscribe_indicator(self._on_indicator),
            controller.subscribe_submitted(self._on_submitted),
        ]

    @property
    def controller(self) -> FormController:
        return self._controller

    def bind_field(self, kind: FieldKind, widget: QLineEdit) -> None:
        """
        Bind a line edit to a field.

        Args:
            kind: Field the widget edits
            widget: The input widget
        """
        self._widgets[kind] = widget
        slot = lambda text: self._on_text_changed(kind, text)  # noqa: E731
        self._text_slots[kind] = slot
        widget.textChanged.connect(slot)
        widget.installEventFilter(self)

        # Pick up text typed before binding
        if widget.text():
            self._on_text_changed(kind, widget.text())

    def bind_submit_button(self, button: QAbstractButton) -> None:
        """Bind the button whose enabled state follows can_submit."""
        self._submit_button = button
        button.setEnabled(self._controller.can_submit)
        button.clicked.connect(self.submit)

    def widget_for(self, kind: FieldKind) -> QLineEdit | None:
        return self._widgets.get(kind)

    def submit(self) -> str | None:
        """
        Submit the form.

        Rejections from the controller (invalid fields, form already closed)
        are routed through the error handler.

        Returns:
            The welcome message, or None if the form could not be submitted
        """
        try:
            return self._controller.on_submit()
        except BaseAppError as e:
            self._logger.debug(f"Submit rejected: {e}")
            get_error_handler().handle(e, {"source": "submit"})
            return None

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if event.type() == QEvent.Type.FocusOut and not self._controller.closed:
            for kind, widget in self._widgets.items():
                if widget is watched:
                    self._controller.on_focus_lost(kind)
                    break
        return super().eventFilter(watched, event)

    def _on_text_changed(self, kind: FieldKind, text: str) -> None:
        if self._controller.closed:
            return
        self._controller.on_text_changed(kind, text)

    def _on_can_submit(self, can_submit: bool) -> None:
        if self._submit_button is not None:
            self._submit_button.setEnabled(can_submit)
        self.canSubmitChanged.emit(can_submit)

    def _on_indicator(self, kind: FieldKind, is_valid: bool) -> None:
        widget = self._widgets.get(kind)
        if widget is not None:
            apply_validation_style(widget, is_valid)
            widget.setToolTip("" if is_valid else hint_for(kind))
        self.fieldIndicatorChanged.emit(kind.value, is_valid)

    def _on_submitted(self, message: str) -> None:
        self.cleanup()
        self.submitted.emit(message)

    def cleanup(self) -> None:
        """Detach from the widgets and the controller."""
        for kind, widget in self._widgets.items():
            widget.removeEventFilter(self)
            slot = self._text_slots.pop(kind, None)
            if slot is not None:
                widget.textChanged.disconnect(slot)

        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

        if self._submit_button is not None:
            self._submit_button.setEnabled(False)
