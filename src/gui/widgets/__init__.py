"""
Widgets for the Registration Form application pages.
"""

from .registration_form import RegistrationFormWidget
from .welcome_view import WelcomeView

__all__ = ["RegistrationFormWidget", "WelcomeView"]
