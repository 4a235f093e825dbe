"""
Live input validation for the registration form.

Wires Qt widgets to the toolkit-independent FormController.
"""

from .form_binder import FormBinder

__all__ = [
    "FormBinder",
]
