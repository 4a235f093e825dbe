"""
Configuration constants for the Registration Form application.

All values here are process-wide and immutable; there are no configuration
files or environment overrides.
"""

from pathlib import Path

from PySide6.QtCore import QCoreApplication, QStandardPaths

# Application identifiers for QSettings and QStandardPaths
APP_ORGANIZATION = "RegistrationDemo"
APP_NAME = "RegistrationForm"

# The only email domain accepted by the form
EMAIL_DOMAIN = "farmingdale.edu"

# Window geometry and titles
WINDOW_WIDTH = 300
WINDOW_HEIGHT = 250
FORM_WINDOW_TITLE = "Registration Form"
WELCOME_WINDOW_TITLE = "New UI"
SUBMIT_BUTTON_TEXT = "Add"

# Logging
LOG_FILE_NAME = "app.log"
LOG_MAX_BYTES = 1_048_576  # 1MB
LOG_BACKUP_COUNT = 3
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_app_data_dir() -> Path:
    """
    Get the writable data directory for this application.

    Falls back to the config location when Qt reports no app data location.
    """
    location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)
    if location:
        return Path(location)

    config_location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.ConfigLocation)
    return Path(config_location) / APP_ORGANIZATION / APP_NAME


def get_logs_dir() -> Path:
    """Get the directory where rotating log files are written."""
    return get_app_data_dir() / "logs"


def setup_qsettings() -> None:
    """
    Configure QSettings with application identifiers.

    Call early in startup so QStandardPaths resolves per-application paths.
    """
    QCoreApplication.setOrganizationName(APP_ORGANIZATION)
    QCoreApplication.setApplicationName(APP_NAME)
