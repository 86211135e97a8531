"""loginprefs exception hierarchy.

All exceptions inherit from LoginPrefsError.
Domain rejections (duplicate user, bad credentials) are not exceptions;
they come back as booleans or AuthOutcome statuses.
"""


class LoginPrefsError(Exception):
    """Base exception for all loginprefs errors."""


class ConfigError(LoginPrefsError):
    """Configuration file load/validation error."""


class StorageError(LoginPrefsError):
    """Preference backend read/write error."""

    def __init__(self, message: str, key: str | None = None) -> None:
        self.key = key
        if key is not None:
            message = f"{message} (key: {key})"
        super().__init__(message)
