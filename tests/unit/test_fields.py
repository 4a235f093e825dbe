"""
Tests for field kinds and their validation patterns.

Tests cover:
- Name, email, date of birth and zip code rules
- Syntactic-only date checks
- Totality over odd inputs
"""

import re

import pytest

from core.config import EMAIL_DOMAIN
from core.fields import (
    FIELD_PATTERNS,
    FieldKind,
    hint_for,
    pattern_for,
    placeholder_for,
    validate,
)

NAME_KINDS = [FieldKind.FIRST_NAME, FieldKind.LAST_NAME]


class TestNameValidation:
    """Test first and last name rules."""

    @pytest.mark.parametrize("kind", NAME_KINDS)
    @pytest.mark.parametrize("text", ["Al", "Li", "McDonald", "a" * 25, "ZZ"])
    def test_valid_names(self, kind, text):
        assert validate(kind, text) is True

    @pytest.mark.parametrize("kind", NAME_KINDS)
    @pytest.mark.parametrize(
        "text",
        [
            "",
            "A",  # Too short
            "a" * 26,  # Too long
            "Al1",
            "Al Li",
            "O'Neil",
            "Anne-Marie",
            "José",
            " Al",
            "Al\n",
        ],
    )
    def test_invalid_names(self, kind, text):
        assert validate(kind, text) is False

    def test_name_pattern_matches_reference_regex(self):
        """Names agree with ^[A-Za-z]{2,25}$ on a spread of samples."""
        reference = re.compile(r"^[A-Za-z]{2,25}$")
        samples = ["", "a", "ab", "aB", "a1", "abc def", "x" * 24, "x" * 25, "x" * 26, "ÄÖ", "_ab"]

        for text in samples:
            expected = reference.fullmatch(text) is not None
            assert validate(FieldKind.FIRST_NAME, text) is expected, text
            assert validate(FieldKind.LAST_NAME, text) is expected, text


class TestEmailValidation:
    """Test the fixed-domain email rule."""

    @pytest.mark.parametrize(
        "text",
        [
            f"a.b+c@{EMAIL_DOMAIN}",
            f"x@{EMAIL_DOMAIN}",
            f"John_Doe%1-2@{EMAIL_DOMAIN}",
        ],
    )
    def test_valid_emails(self, text):
        assert validate(FieldKind.EMAIL, text) is True

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "a.b+c@other.com",
            f"@{EMAIL_DOMAIN}",
            "x@farmingdaleXedu",
            f"x@sub.{EMAIL_DOMAIN}",
            f"x y@{EMAIL_DOMAIN}",
            f"x@{EMAIL_DOMAIN}.com",
            f"x@{EMAIL_DOMAIN.upper()}",
            "x@farmingdale",
        ],
    )
    def test_invalid_emails(self, text):
        assert validate(FieldKind.EMAIL, text) is False

    def test_domain_is_farmingdale(self):
        assert EMAIL_DOMAIN == "farmingdale.edu"


class TestDateOfBirthValidation:
    """Test the MM/DD/YYYY rule."""

    @pytest.mark.parametrize(
        "text",
        [
            "01/15/2000",
            "12/31/1900",
            "06/01/2099",
            "10/10/1999",
        ],
    )
    def test_valid_dates(self, text):
        assert validate(FieldKind.DATE_OF_BIRTH, text) is True

    @pytest.mark.parametrize("text", ["02/30/2024", "02/31/1999", "04/31/2001", "02/29/2023"])
    def test_impossible_calendar_dates_are_accepted(self, text):
        """Only the shape of the date is checked, not whether the day exists."""
        assert validate(FieldKind.DATE_OF_BIRTH, text) is True

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "13/01/2000",
            "00/10/2000",
            "01/32/2000",
            "01/00/2000",
            "1/15/2000",
            "01/5/2000",
            "01/15/1899",
            "01/15/2100",
            "01-15-2000",
            "01/15/00",
            "2000/01/15",
            "01/15/2000 ",
        ],
    )
    def test_invalid_dates(self, text):
        assert validate(FieldKind.DATE_OF_BIRTH, text) is False


class TestZipCodeValidation:
    """Test the five digit rule."""

    @pytest.mark.parametrize("text", ["11735", "00000", "99999"])
    def test_valid_zip_codes(self, text):
        assert validate(FieldKind.ZIP_CODE, text) is True

    @pytest.mark.parametrize(
        "text",
        ["", "1173", "117356", " 11735", "11735 ", "1173a", "11735\n", "١٢٣٤٥", "11-35"],
    )
    def test_invalid_zip_codes(self, text):
        assert validate(FieldKind.ZIP_CODE, text) is False


class TestValidateContract:
    """Test properties shared by every field."""

    @pytest.mark.parametrize("kind", list(FieldKind))
    def test_empty_string_is_invalid(self, kind):
        assert validate(kind, "") is False

    @pytest.mark.parametrize("kind", list(FieldKind))
    @pytest.mark.parametrize("value", [None, 12345, b"11735"])
    def test_non_string_input_is_invalid(self, kind, value):
        assert validate(kind, value) is False

    def test_deterministic(self):
        for _ in range(3):
            assert validate(FieldKind.ZIP_CODE, "11735") is True
            assert validate(FieldKind.ZIP_CODE, "1173") is False

    def test_every_kind_has_a_pattern(self):
        assert set(FIELD_PATTERNS) == set(FieldKind)
        for kind in FieldKind:
            assert pattern_for(kind) is FIELD_PATTERNS[kind]

    def test_patterns_are_read_only(self):
        with pytest.raises(TypeError):
            FIELD_PATTERNS[FieldKind.ZIP_CODE] = re.compile(".*")  # type: ignore[index]

    def test_field_order(self):
        assert list(FieldKind) == [
            FieldKind.FIRST_NAME,
            FieldKind.LAST_NAME,
            FieldKind.EMAIL,
            FieldKind.DATE_OF_BIRTH,
            FieldKind.ZIP_CODE,
        ]


class TestFieldMetadata:
    """Test placeholders and hints."""

    def test_placeholders(self):
        assert placeholder_for(FieldKind.FIRST_NAME) == "First Name"
        assert placeholder_for(FieldKind.LAST_NAME) == "Last Name"
        assert placeholder_for(FieldKind.EMAIL) == "Email"
        assert placeholder_for(FieldKind.DATE_OF_BIRTH) == "Date of Birth (MM/DD/YYYY)"
        assert placeholder_for(FieldKind.ZIP_CODE) == "Zip Code"

    @pytest.mark.parametrize("kind", list(FieldKind))
    def test_every_kind_has_a_hint(self, kind):
        assert hint_for(kind)

    def test_email_hint_names_domain(self):
        assert EMAIL_DOMAIN in hint_for(FieldKind.EMAIL)
