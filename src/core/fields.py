"""
Field kinds and their validation patterns.

Each registration field is checked against one fixed regular expression.
Validation is a pure, total function: it never raises and returns False for
anything that does not fully match, including the empty string.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from .config import EMAIL_DOMAIN


class FieldKind(Enum):
    """The registration form fields, in display order."""

    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    EMAIL = "email"
    DATE_OF_BIRTH = "date_of_birth"
    ZIP_CODE = "zip_code"


# 2-25 ASCII letters
NAME_PATTERN = r"[A-Za-z]{2,25}"
# MM/DD/YYYY, syntactic only: 02/30/2024 is accepted
DOB_PATTERN = r"(0[1-9]|1[012])/(0[1-9]|[12][0-9]|3[01])/(19|20)[0-9]{2}"
EMAIL_PATTERN = r"[a-zA-Z0-9._%+-]+@" + re.escape(EMAIL_DOMAIN)
ZIP_CODE_PATTERN = r"[0-9]{5}"

FIELD_PATTERNS: Mapping[FieldKind, re.Pattern[str]] = MappingProxyType(
    {
        FieldKind.FIRST_NAME: re.compile(NAME_PATTERN, re.ASCII),
        FieldKind.LAST_NAME: re.compile(NAME_PATTERN, re.ASCII),
        FieldKind.EMAIL: re.compile(EMAIL_PATTERN, re.ASCII),
        FieldKind.DATE_OF_BIRTH: re.compile(DOB_PATTERN, re.ASCII),
        FieldKind.ZIP_CODE: re.compile(ZIP_CODE_PATTERN, re.ASCII),
    }
)

FIELD_PLACEHOLDERS: Mapping[FieldKind, str] = MappingProxyType(
    {
        FieldKind.FIRST_NAME: "First Name",
        FieldKind.LAST_NAME: "Last Name",
        FieldKind.EMAIL: "Email",
        FieldKind.DATE_OF_BIRTH: "Date of Birth (MM/DD/YYYY)",
        FieldKind.ZIP_CODE: "Zip Code",
    }
)

FIELD_HINTS: Mapping[FieldKind, str] = MappingProxyType(
    {
        FieldKind.FIRST_NAME: "First name must be 2-25 letters",
        FieldKind.LAST_NAME: "Last name must be 2-25 letters",
        FieldKind.EMAIL: f"Email must be an @{EMAIL_DOMAIN} address",
        FieldKind.DATE_OF_BIRTH: "Date of birth must be MM/DD/YYYY between 1900 and 2099",
        FieldKind.ZIP_CODE: "Zip code must be exactly 5 digits",
    }
)


def pattern_for(kind: FieldKind) -> re.Pattern[str]:
    """Return the compiled pattern for a field kind."""
    return FIELD_PATTERNS[kind]


def validate(kind: FieldKind, text: Any) -> bool:
    """
    Check whether text is valid for the given field.

    Args:
        kind: Field to validate against
        text: Raw input text

    Returns:
        True only if the whole text matches the field's pattern
    """
    if not isinstance(text, str):
        return False
    return FIELD_PATTERNS[kind].fullmatch(text) is not None


def placeholder_for(kind: FieldKind) -> str:
    """Return the placeholder text shown in an empty input."""
    return FIELD_PLACEHOLDERS[kind]


def hint_for(kind: FieldKind) -> str:
    """Return the message shown for invalid input."""
    return FIELD_HINTS[kind]
