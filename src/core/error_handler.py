"""
Centralized error handling and logging for the Registration Form application.

Provides a singleton ErrorHandler that normalizes exceptions, writes them to a
rotating log file and re-emits them as a Qt signal for the UI.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
import traceback
from typing import Any, ClassVar

from PySide6.QtCore import QObject, Signal

from .config import LOG_BACKUP_COUNT, LOG_DATE_FORMAT, LOG_FILE_NAME, LOG_FORMAT, LOG_MAX_BYTES, get_logs_dir
from .errors import BaseAppError, from_exception

ERROR_LOGGER_NAME = "registration_form.errors"


class ErrorHandler(QObject):
    """
    Centralized error handler.

    Captures exceptions, logs them with their error code and emits
    errorOccurred so widgets can react.
    """

    errorOccurred = Signal(object)  # BaseAppError

    _instance: ClassVar[ErrorHandler | None] = None
    _logger: ClassVar[logging.Logger | None] = None

    def __new__(cls) -> ErrorHandler:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if hasattr(self, "_initialized"):
            return

        super().__init__()
        self._initialized = True
        self._original_excepthook = sys.excepthook
        self._setup_logging()

    def capture(self, exception: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
        """
        Normalize an exception into a BaseAppError.

        Args:
            exception: The exception to capture
            context: Optional context information

        Returns:
            BaseAppError with normalized metadata
        """
        safe_context = self._sanitize_context(context or {})
        app_error = from_exception(exception, safe_context)

        if not app_error.technical_message:
            app_error.technical_message = f"{type(exception).__name__}: {exception}"

        if "traceback" not in app_error.context:
            tb_str = traceback.format_exc()
            if tb_str == "NoneType: None\n":
                tb_str = f"{type(exception).__name__}: {exception}\n"
            app_error.context["traceback"] = tb_str

        return app_error

    def handle(self, exception: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
        """
        Capture, log and broadcast an exception.

        Args:
            exception: The exception to handle
            context: Optional context information

        Returns:
            BaseAppError for further processing
        """
        if isinstance(exception, SystemExit | KeyboardInterrupt):
            raise exception

        app_error = self.capture(exception, context)

        if self._logger:
            self._logger.error(
                f"[{app_error.code.value}] {app_error.user_message}",
                extra={"app_code": app_error.code.value, "error_type": app_error.type.value},
                exc_info=exception,
            )

        self.errorOccurred.emit(app_error)
        return app_error

    def _setup_logging(self) -> None:
        """Set up rotating file logging in the app data directory."""
        ErrorHandler._logger = logging.getLogger(ERROR_LOGGER_NAME)
        ErrorHandler._logger.setLevel(logging.DEBUG)
        ErrorHandler._logger.propagate = False

        if ErrorHandler._logger.handlers:
            return

        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | code=%(app_code)s | %(message)s",
            datefmt=LOG_DATE_FORMAT,
        )

        try:
            logs_dir = get_logs_dir()
            logs_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                logs_dir / LOG_FILE_NAME,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
            file_handler.setFormatter(formatter)
            ErrorHandler._logger.addHandler(file_handler)
        except OSError as e:
            logging.getLogger(__name__).error(f"Failed to set up error log file: {e}")

        if __debug__:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            console_handler.setLevel(logging.WARNING)
            ErrorHandler._logger.addHandler(console_handler)

    def _sanitize_context(self, context: dict[str, Any]) -> dict[str, Any]:
        """Truncate long values so log lines stay bounded."""
        safe_context: dict[str, Any] = {}
        for key, value in context.items():
            if isinstance(value, str):
                safe_context[key] = value if len(value) <= 200 else value[:200] + "..."
            else:
                safe_context[key] = repr(value)[:200]
        return safe_context

    def install_hooks(self) -> None:
        """Route unhandled exceptions through this handler."""

        def exception_hook(exc_type: type[BaseException], exc_value: BaseException, exc_traceback: Any) -> None:
            if issubclass(exc_type, KeyboardInterrupt) or not isinstance(exc_value, Exception):
                self._original_excepthook(exc_type, exc_value, exc_traceback)
                return
            self.handle(exc_value, {"source": "sys.excepthook"})

        sys.excepthook = exception_hook

    def restore_hooks(self) -> None:
        """Restore the original exception hook."""
        sys.excepthook = self._original_excepthook


def get_error_handler() -> ErrorHandler:
    """Get the singleton ErrorHandler instance."""
    return ErrorHandler()


def setup_error_handling() -> ErrorHandler:
    """
    Set up global error handling.

    Call once during application startup.
    """
    handler = get_error_handler()
    handler.install_hooks()
    return handler


def init_logging(level: int = logging.INFO) -> None:
    """
    Initialize logging for the application.

    Builds the error handler's file log and configures the root logger.
    """
    get_error_handler()

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
