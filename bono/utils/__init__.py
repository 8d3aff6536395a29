"""Utility functions and classes."""

from bono.utils.validators import (
    PasswordValidation,
    validate_cedula,
    validate_email,
    validate_name,
    validate_password,
    validate_phone,
)

__all__ = [
    "PasswordValidation",
    "validate_cedula",
    "validate_email",
    "validate_name",
    "validate_password",
    "validate_phone",
]
