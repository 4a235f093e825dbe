"""
Main entry point for the Registration Form application.
"""

import sys

from PySide6.QtWidgets import QApplication

from core.config import setup_qsettings
from core.error_handler import init_logging, setup_error_handling
from gui.main_window import RegistrationWindow


def main() -> int:
    """Main application entry point."""
    app = QApplication(sys.argv)

    # App identifiers must be set before the error handler resolves its log directory
    setup_qsettings()
    init_logging()
    setup_error_handling()

    window = RegistrationWindow()
    window.show()

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
