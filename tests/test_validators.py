"""Tests for field validators."""

import pytest

from bono.utils.validators import (
    PasswordErrors,
    password_error_message,
    validate_cedula,
    validate_email,
    validate_name,
    validate_password,
    validate_phone,
)


class TestValidateCedula:
    """Tests for cedula format and range checks."""

    def test_valid_cedula(self):
        assert validate_cedula("001-1234567-8") is True

    def test_short_first_segment(self):
        """Test wrong segment width is rejected."""
        assert validate_cedula("1-1234567-8") is False

    @pytest.mark.parametrize(
        "cedula",
        [
            "001-123456-8",
            "001-12345678-8",
            "001-1234567-89",
            "0011234567 8",
            "00112345678",
            "abc-1234567-8",
            "",
        ],
    )
    def test_malformed_cedula(self, cedula):
        assert validate_cedula(cedula) is False

    def test_zero_first_segment_out_of_range(self):
        """First segment must be between 1 and 999."""
        assert validate_cedula("000-1234567-8") is False

    def test_boundaries(self):
        assert validate_cedula("999-9999999-9") is True
        assert validate_cedula("001-0000000-0") is True

    def test_trailing_newline_rejected(self):
        assert validate_cedula("001-1234567-8\n") is False

    def test_non_ascii_digits_rejected(self):
        assert validate_cedula("٠٠١-1234567-8") is False


class TestValidatePhone:
    """Tests for Dominican phone numbers."""

    @pytest.mark.parametrize("phone", ["809-123-4567", "829-000-0000", "849-999-9999"])
    def test_allowed_area_codes(self, phone):
        assert validate_phone(phone) is True

    def test_disallowed_area_code(self):
        assert validate_phone("555-123-4567") is False

    @pytest.mark.parametrize("phone", ["8091234567", "809-1234-567", "(809) 123-4567", ""])
    def test_malformed_phone(self, phone):
        assert validate_phone(phone) is False


class TestValidateEmail:
    """Tests for email shape validation."""

    @pytest.mark.parametrize(
        "email", ["user@example.com", "a.b+c@gob.do", "x@y.z", "ñandú@correo.do"]
    )
    def test_valid_email(self, email):
        assert validate_email(email) is True

    @pytest.mark.parametrize(
        "email",
        ["plainaddress", "user@domain", "@example.com", "user@.com", "us er@x.com", "a@b@c.com", ""],
    )
    def test_invalid_email(self, email):
        assert validate_email(email) is False


class TestValidatePassword:
    """Tests for password strength reporting."""

    def test_valid_password(self):
        result = validate_password("Navidad2024")
        assert result.is_valid
        assert result.errors == PasswordErrors()

    def test_missing_uppercase(self):
        result = validate_password("abc12345")
        assert result.is_valid is False
        assert result.errors.upper is True
        assert result.errors.lower is False
        assert result.errors.length is False
        assert result.errors.number is False

    def test_all_failures_reported_together(self):
        result = validate_password("!!")
        assert result.is_valid is False
        assert result.errors == PasswordErrors(
            length=True, lower=True, upper=True, number=True
        )

    def test_empty_password(self):
        result = validate_password("")
        assert result.is_valid is False
        assert result.errors.length is True

    def test_exactly_eight_characters(self):
        assert validate_password("Abcdefg1").is_valid is True


class TestValidateName:
    """Tests for name length checks."""

    def test_two_characters(self):
        assert validate_name("Al") is True

    def test_single_character(self):
        assert validate_name("A") is False

    def test_whitespace_is_trimmed(self):
        assert validate_name("  A  ") is False


class TestPasswordErrorMessage:
    """Tests for the combined password message."""

    def test_lists_every_failed_rule(self):
        message = password_error_message(
            PasswordErrors(length=True, lower=False, upper=True, number=True)
        )
        assert message == (
            "La contraseña debe tener: al menos 8 caracteres, una mayúscula, un número"
        )

    def test_single_failure(self):
        message = password_error_message(PasswordErrors(upper=True))
        assert message == "La contraseña debe tener: una mayúscula"
