"""
Error taxonomy for the Registration Form application.

Field validation never raises; these errors cover programmatic misuse of the
form controller and unexpected failures routed through the error handler.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ErrorType(Enum):
    """Error type categories."""

    VALIDATION = "validation"
    STATE = "state"
    SYSTEM = "system"


class ErrorCode(Enum):
    """Specific error codes."""

    # Validation errors
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_FORMAT = "INVALID_FORMAT"

    # Form lifecycle errors
    FORM_CLOSED = "FORM_CLOSED"

    # System errors
    OS_ERROR = "OS_ERROR"
    MEMORY_ERROR = "MEMORY_ERROR"

    # Generic
    UNKNOWN = "UNKNOWN"


class ErrorSeverity(Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class BaseAppError(Exception):
    """
    Base application error with structured metadata.

    Root of all custom application errors.
    """

    type: ErrorType
    code: ErrorCode
    user_message: str
    technical_message: str | None = None
    severity: ErrorSeverity = ErrorSeverity.MEDIUM
    context: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.user_message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type={self.type.value}, code={self.code.value}, message='{self.user_message}')"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "type": self.type.value,
            "code": self.code.value,
            "user_message": self.user_message,
            "technical_message": self.technical_message,
            "severity": self.severity.value,
            "context": self.context,
        }


class ValidationError(BaseAppError):
    """Input validation errors, optionally tied to one field."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        field: str | None = None,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.LOW,
        context: dict[str, Any] | None = None,
    ):
        context = context or {}
        if field:
            context["field"] = field

        super().__init__(
            type=ErrorType.VALIDATION,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            context=context,
        )

    @property
    def field(self) -> str | None:
        """Get the field that caused the validation error."""
        return self.context.get("field")


class StateError(BaseAppError):
    """Operation attempted in a state that does not allow it."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            type=ErrorType.STATE,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            context=context or {},
        )


class FormClosedError(StateError):
    """The form was already submitted or closed."""

    def __init__(self, operation: str):
        super().__init__(
            code=ErrorCode.FORM_CLOSED,
            user_message="The registration form is no longer open",
            technical_message=f"'{operation}' called after the form was discarded",
            context={"operation": operation},
        )


class SystemError(BaseAppError):
    """Unexpected runtime failures."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.HIGH,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            type=ErrorType.SYSTEM,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            context=context or {},
        )


_EXCEPTION_MAPPING: dict[type[Exception], tuple[ErrorCode, str]] = {
    OSError: (ErrorCode.OS_ERROR, "System error occurred"),
    MemoryError: (ErrorCode.MEMORY_ERROR, "Insufficient memory"),
}


def map_exception(exc: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
    """
    Map any exception to an application error.

    Args:
        exc: The exception to map
        context: Optional context information

    Returns:
        The exception itself if it is already a BaseAppError, else a wrapped error
    """
    context = context or {}

    if isinstance(exc, BaseAppError):
        return exc

    exc_type = type(exc)
    technical = f"{exc_type.__name__}: {exc}"

    if exc_type is ValueError:
        return ValidationError(
            code=ErrorCode.INVALID_INPUT,
            user_message=str(exc) or "Invalid input provided",
            technical_message=technical,
            context=context,
        )

    for mapped_type, (code, default_message) in _EXCEPTION_MAPPING.items():
        if isinstance(exc, mapped_type):
            return SystemError(
                code=code,
                user_message=str(exc) or default_message,
                technical_message=technical,
                context=context,
            )

    logger.warning(f"Unknown exception type: {technical}")
    return SystemError(
        code=ErrorCode.UNKNOWN,
        user_message="An unexpected error occurred",
        technical_message=technical,
        context=context,
    )


def from_exception(exc: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
    """Alias for map_exception."""
    return map_exception(exc, context)
