"""
Shared styling utilities for the Registration Form GUI.

Colors meet WCAG AA contrast against the default white input background.
"""

from typing import Any, Protocol


class StyleableWidget(Protocol):
    """Protocol for widgets that can be styled."""

    def setStyleSheet(self, styleSheet: str) -> None: ...
    def style(self) -> Any: ...


class AccessiblePalette:
    """Centralized color palette."""

    BORDER_ERROR = "#dc3545"  # Invalid field border
    BORDER_SUCCESS = "#198754"  # Valid field border

    BACKGROUND_DEFAULT = "#ffffff"
    TEXT_PRIMARY = "#212529"


class StyleSheets:
    """Reusable stylesheet definitions built from the palette."""

    @staticmethod
    def get_input_validation_style(is_valid: bool) -> str:
        """Get the border style for a validated line edit."""
        border = AccessiblePalette.BORDER_SUCCESS if is_valid else AccessiblePalette.BORDER_ERROR
        return f"""
            QLineEdit {{
                border: 2px solid {border};
                background-color: {AccessiblePalette.BACKGROUND_DEFAULT};
                color: {AccessiblePalette.TEXT_PRIMARY};
            }}
        """

    @staticmethod
    def get_welcome_label_style() -> str:
        """Get the style of the post-submit welcome label."""
        return f"""
            QLabel {{
                color: {AccessiblePalette.TEXT_PRIMARY};
                font-size: 14px;
                padding: 10px;
            }}
        """


def apply_validation_style(widget: StyleableWidget, is_valid: bool) -> None:
    """
    Apply validation-based styling to an input widget.

    Args:
        widget: The input widget to style
        is_valid: Whether the input is valid
    """
    widget.setStyleSheet(StyleSheets.get_input_validation_style(is_valid))
    # Force style refresh
    widget.style().unpolish(widget)
    widget.style().polish(widget)

