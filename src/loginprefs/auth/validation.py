"""Input validation for login and registration forms.

Pure functions, no state. ``*_error`` helpers return a user-facing message or
None; ``validate_*`` aggregate them into a ValidationResult.
"""

from __future__ import annotations

import re

from loginprefs.core.models import ValidationResult

MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_LENGTH = 20

MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 50

# local@domain, domain needs at least one dot
EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9+._%\-]{1,256}"
    r"@"
    r"[a-zA-Z0-9][a-zA-Z0-9\-]{0,64}"
    r"(\.[a-zA-Z0-9][a-zA-Z0-9\-]{0,25})+"
)
NAME_PATTERN = re.compile(r"[a-zA-Z\s]+", re.ASCII)

# Control characters and space; other Unicode whitespace (e.g. U+00A0) is kept
_TRIM_CHARS = "".join(chr(c) for c in range(0x21))

EMAIL_REQUIRED = "Email is required"
EMAIL_INVALID = "Please enter a valid email address"
PASSWORD_REQUIRED = "Password is required"
PASSWORD_TOO_SHORT = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
PASSWORD_TOO_LONG = f"Password must be less than {MAX_PASSWORD_LENGTH} characters"
NAME_REQUIRED = "Full name is required"
NAME_TOO_SHORT = f"Name must be at least {MIN_NAME_LENGTH} characters"
NAME_TOO_LONG = f"Name must be less than {MAX_NAME_LENGTH} characters"
NAME_INVALID_CHARS = "Name can only contain letters and spaces"
CONFIRM_REQUIRED = "Please confirm your password"
PASSWORD_MISMATCH = "Passwords do not match"


# -- Boolean checks -----------------------------------------------------------


def trim(text: str | None) -> str:
    """Strip leading/trailing characters up to U+0020, treating None as empty."""
    return (text or "").strip(_TRIM_CHARS)


def is_not_empty(text: str | None) -> bool:
    return bool(trim(text))


def is_valid_email(email: str | None) -> bool:
    text = trim(email)
    if not text:
        return False
    return EMAIL_PATTERN.fullmatch(text) is not None


def is_valid_password(password: str | None) -> bool:
    if password is None:
        return False
    return MIN_PASSWORD_LENGTH <= len(password) <= MAX_PASSWORD_LENGTH


def is_valid_name(name: str | None) -> bool:
    return name_error(name) is None


def do_passwords_match(password: str | None, confirm_password: str | None) -> bool:
    if password is None or confirm_password is None:
        return False
    return password == confirm_password


# -- Field errors -------------------------------------------------------------


def email_error(email: str | None) -> str | None:
    if not is_not_empty(email):
        return EMAIL_REQUIRED
    if not is_valid_email(email):
        return EMAIL_INVALID
    return None


def password_error(password: str | None) -> str | None:
    if not password:
        return PASSWORD_REQUIRED
    if len(password) < MIN_PASSWORD_LENGTH:
        return PASSWORD_TOO_SHORT
    if len(password) > MAX_PASSWORD_LENGTH:
        return PASSWORD_TOO_LONG
    return None


def name_error(name: str | None) -> str | None:
    """Check a full name. Length limits apply to the trimmed value."""
    trimmed = trim(name)
    if not trimmed:
        return NAME_REQUIRED
    if len(trimmed) < MIN_NAME_LENGTH:
        return NAME_TOO_SHORT
    if len(trimmed) > MAX_NAME_LENGTH:
        return NAME_TOO_LONG
    if NAME_PATTERN.fullmatch(trimmed) is None:
        return NAME_INVALID_CHARS
    return None


def confirm_password_error(password: str | None, confirm_password: str | None) -> str | None:
    if not confirm_password:
        return CONFIRM_REQUIRED
    if not do_passwords_match(password, confirm_password):
        return PASSWORD_MISMATCH
    return None


# -- Aggregate ----------------------------------------------------------------


def validate_login(email: str | None, password: str | None) -> ValidationResult:
    """Validate the login form. Password length is not checked at login."""
    result = ValidationResult()

    error = email_error(email)
    if error is not None:
        result.email_error = error
        result.is_valid = False

    if not password:
        result.password_error = PASSWORD_REQUIRED
        result.is_valid = False

    return result


def validate_registration(
    name: str | None,
    email: str | None,
    password: str | None,
    confirm_password: str | None,
) -> ValidationResult:
    """Validate every registration field; all errors are reported at once."""
    result = ValidationResult(
        name_error=name_error(name),
        email_error=email_error(email),
        password_error=password_error(password),
        confirm_password_error=confirm_password_error(password, confirm_password),
    )
    result.is_valid = not result.errors()
    return result
