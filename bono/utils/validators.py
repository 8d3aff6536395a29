"""Field validators for the registration form.

Each validator checks one format rule for Dominican identity documents,
phone numbers, email addresses and passwords. They are pure and never raise.
"""

import re
from dataclasses import dataclass

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
CEDULA_PATTERN = re.compile(r"^\d{3}-\d{7}-\d{1}$", re.ASCII)
PHONE_PATTERN = re.compile(r"^(809|829|849)-\d{3}-\d{4}$", re.ASCII)

MIN_NAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 8


@dataclass
class PasswordErrors:
    """Independent flags, one per failed password rule."""

    length: bool = False
    lower: bool = False
    upper: bool = False
    number: bool = False


@dataclass
class PasswordValidation:
    """Outcome of a password strength check."""

    is_valid: bool
    errors: PasswordErrors


def validate_email(email: str) -> bool:
    """Check the local@domain.tld shape; deliverability is not checked."""
    return bool(EMAIL_PATTERN.fullmatch(email))


def validate_cedula(cedula: str) -> bool:
    """Validate a cedula in XXX-XXXXXXX-X format.

    Only format and segment ranges are checked: the first segment must be in
    1..999 and the second in 0..9999999. The last digit is not verified
    against any checksum, so a passing cedula is not necessarily official.
    """
    if not CEDULA_PATTERN.fullmatch(cedula):
        return False

    parts = cedula.split("-")
    if len(parts) != 3:
        return False

    first_part, second_part, check_digit = parts
    if len(first_part) != 3 or len(second_part) != 7 or len(check_digit) != 1:
        return False

    first_num = int(first_part)
    second_num = int(second_part)
    if not 1 <= first_num <= 999:
        return False
    if not 0 <= second_num <= 9999999:
        return False

    return True


def validate_phone(phone: str) -> bool:
    """Validate a Dominican phone number (809/829/849-XXX-XXXX)."""
    return bool(PHONE_PATTERN.fullmatch(phone))


def validate_password(password: str) -> PasswordValidation:
    """Check password strength, reporting every failed rule at once."""
    errors = PasswordErrors(
        length=len(password) < MIN_PASSWORD_LENGTH,
        lower=re.search(r"[a-z]", password) is None,
        upper=re.search(r"[A-Z]", password) is None,
        number=re.search(r"[0-9]", password) is None,
    )
    is_valid = not (errors.length or errors.lower or errors.upper or errors.number)
    return PasswordValidation(is_valid=is_valid, errors=errors)


def validate_name(value: str) -> bool:
    """Names need at least two characters once surrounding space is removed."""
    return len(value.strip()) >= MIN_NAME_LENGTH


def password_error_message(errors: PasswordErrors) -> str:
    """Build the combined message listing every unmet password rule."""
    missing = []
    if errors.length:
        missing.append("al menos 8 caracteres")
    if errors.lower:
        missing.append("una minúscula")
    if errors.upper:
        missing.append("una mayúscula")
    if errors.number:
        missing.append("un número")
    return "La contraseña debe tener: " + ", ".join(missing)
