"""
Form state and controller for the registration form.

The controller owns one FormState, updates it synchronously on every input
event and notifies plain callback listeners. It has no dependency on any UI
toolkit; the Qt wiring lives in gui.validation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, replace

from .errors import ErrorCode, FormClosedError, ValidationError
from .fields import FieldKind, validate

logger = logging.getLogger(__name__)

CanSubmitListener = Callable[[bool], None]
IndicatorListener = Callable[[FieldKind, bool], None]
SubmittedListener = Callable[[str], None]


def welcome_message(first_name: str) -> str:
    """Build the text shown on the screen that replaces the form."""
    return "Welcome to the new UI " + first_name + "!"


@dataclass(frozen=True)
class FieldState:
    """
    Snapshot of the input and derived flags for a single field.

    last_indicator is the value most recently sent to indicator listeners,
    None until the field first loses focus.
    """

    text: str = ""
    is_valid: bool = False
    touched: bool = False
    last_indicator: bool | None = None


class FormState(Mapping[FieldKind, FieldState]):
    """
    Ordered mapping of every FieldKind to its FieldState.

    can_submit is computed on access, so it always reflects the current
    validity of all fields.
    """

    def __init__(self) -> None:
        self._fields: dict[FieldKind, FieldState] = {
            kind: FieldState(is_valid=validate(kind, "")) for kind in FieldKind
        }

    def __getitem__(self, kind: FieldKind) -> FieldState:
        return self._fields[kind]

    def __iter__(self) -> Iterator[FieldKind]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def _store(self, kind: FieldKind, field: FieldState) -> None:
        self._fields[kind] = field

    @property
    def can_submit(self) -> bool:
        return all(field.is_valid for field in self._fields.values())


class FormController:
    """
    Reacts to text, focus and submit events for the registration form.

    Listeners are called synchronously from inside the event handler that
    changed the state.
    """

    def __init__(self) -> None:
        self._state = FormState()
        self._closed = False
        self._can_submit_listeners: list[CanSubmitListener] = []
        self._indicator_listeners: list[IndicatorListener] = []
        self._submitted_listeners: list[SubmittedListener] = []

    # Subscriptions

    def subscribe_can_submit(self, listener: CanSubmitListener) -> Callable[[], None]:
        """
        Register a listener for the aggregate submit flag.

        Returns:
            Callable that removes the listener
        """
        return self._subscribe(self._can_submit_listeners, listener)

    def subscribe_indicator(self, listener: IndicatorListener) -> Callable[[], None]:
        """
        Register a listener for per-field valid/invalid indicators.

        Returns:
            Callable that removes the listener
        """
        return self._subscribe(self._indicator_listeners, listener)

    def subscribe_submitted(self, listener: SubmittedListener) -> Callable[[], None]:
        """
        Register a listener that receives the welcome message on submit.

        Returns:
            Callable that removes the listener
        """
        return self._subscribe(self._submitted_listeners, listener)

    @staticmethod
    def _subscribe(listeners: list, listener: Callable) -> Callable[[], None]:
        listeners.append(listener)

        def unsubscribe() -> None:
            if listener in listeners:
                listeners.remove(listener)

        return unsubscribe

    # Read access

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def can_submit(self) -> bool:
        return self._state.can_submit

    @property
    def closed(self) -> bool:
        return self._closed

    def field(self, kind: FieldKind) -> FieldState:
        return self._state[kind]

    def is_valid(self, kind: FieldKind) -> bool:
        return self._state[kind].is_valid

    def is_touched(self, kind: FieldKind) -> bool:
        return self._state[kind].touched

    def indicator(self, kind: FieldKind) -> bool | None:
        """
        Get the visual indicator for a field.

        Returns:
            None while the field has never lost focus, else the validity
            published on the most recent focus loss
        """
        return self._state[kind].last_indicator

    def invalid_fields(self) -> list[FieldKind]:
        return [kind for kind, field in self._state.items() if not field.is_valid]

    def values(self) -> dict[FieldKind, str]:
        return {kind: field.text for kind, field in self._state.items()}

    # Events

    def on_text_changed(self, kind: FieldKind, new_text: str) -> None:
        """Store new text for a field and publish the aggregate submit flag."""
        self._ensure_open("on_text_changed")

        was_valid = self._state[kind].is_valid
        field = replace(self._state[kind], text=new_text, is_valid=validate(kind, new_text))
        self._state._store(kind, field)

        if field.is_valid != was_valid:
            logger.debug(f"Field {kind.value} is now {'valid' if field.is_valid else 'invalid'}")

        can_submit = self._state.can_submit
        for listener in list(self._can_submit_listeners):
            listener(can_submit)

    def on_focus_lost(self, kind: FieldKind) -> None:
        """Mark a field as touched and publish its indicator."""
        self._ensure_open("on_focus_lost")

        current = self._state[kind]
        is_valid = validate(kind, current.text)
        field = replace(current, is_valid=is_valid, touched=True, last_indicator=is_valid)
        self._state._store(kind, field)

        for listener in list(self._indicator_listeners):
            listener(kind, field.is_valid)

    def on_submit(self) -> str:
        """
        Submit the form.

        Only the first name is used. After a successful submit the form state
        is discarded and further events are rejected.

        Returns:
            The welcome message for the replacement screen

        Raises:
            ValidationError: If any field is currently invalid
            FormClosedError: If the form was already submitted or closed
        """
        self._ensure_open("on_submit")

        if not self._state.can_submit:
            invalid = [kind.value for kind in self.invalid_fields()]
            raise ValidationError(
                code=ErrorCode.INVALID_INPUT,
                user_message="All fields must be valid before submitting",
                technical_message=f"Submit attempted with invalid fields: {', '.join(invalid)}",
                context={"invalid_fields": invalid},
            )

        message = welcome_message(self._state[FieldKind.FIRST_NAME].text)
        logger.info("Navigation to new UI")

        listeners = list(self._submitted_listeners)
        self.close()
        for listener in listeners:
            listener(message)

        return message

    def close(self) -> None:
        """Discard the form state and drop all listeners."""
        if self._closed:
            return
        self._closed = True
        self._can_submit_listeners.clear()
        self._indicator_listeners.clear()
        self._submitted_listeners.clear()

    def _ensure_open(self, operation: str) -> None:
        if self._closed:
            raise FormClosedError(operation)
