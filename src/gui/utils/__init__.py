"""
GUI-specific utilities for the Registration Form application.
"""

from .styling import (
    AccessiblePalette,
    StyleSheets,
    apply_validation_style,
)

__all__ = [
    "AccessiblePalette",
    "StyleSheets",
    "apply_validation_style",
]
