"""AuthService — form-level login/registration flow over a CredentialStore."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from loginprefs.auth import validation
from loginprefs.auth.store import CredentialStore  # noqa: TC001
from loginprefs.core.models import (
    AuthOutcome,
    AuthStatus,
    Destination,
    LatencyConfig,
    UserProfile,
    ValidationResult,
)

logger = logging.getLogger(__name__)


class AuthService:
    """Validates input, then drives the store.

    Args:
        store: Credential store to operate on.
        latency: Artificial delays applied before login and registration.
        sleep: Sleep function, replaceable in tests.
    """

    def __init__(
        self,
        store: CredentialStore,
        latency: LatencyConfig | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._store = store
        self._latency = latency or LatencyConfig()
        self._sleep = sleep

    @property
    def store(self) -> CredentialStore:
        return self._store

    def _delay(self, ms: int) -> None:
        if ms > 0:
            self._sleep(ms / 1000)

    # -- Login / registration -------------------------------------------------

    def login(self, email: str, password: str, remember_me: bool = False) -> AuthOutcome:
        email = validation.trim(email)
        result = validation.validate_login(email, password)
        if not result.is_valid:
            return AuthOutcome(status=AuthStatus.INVALID_INPUT, validation=result)

        self._delay(self._latency.login_ms)

        if not self._store.authenticate(email, password):
            logger.info("Login failed for %s", email)
            return AuthOutcome(status=AuthStatus.INVALID_CREDENTIALS)

        name = self._store.get_user_name(email)
        self._store.create_session(email, name, password, remember_me)
        return AuthOutcome(status=AuthStatus.OK, profile=UserProfile(name=name, email=email))

    def register(
        self,
        name: str,
        email: str,
        password: str,
        confirm_password: str,
    ) -> AuthOutcome:
        """Register and log the new user in, without remember-me."""
        name = validation.trim(name)
        email = validation.trim(email)
        result = validation.validate_registration(name, email, password, confirm_password)
        if not result.is_valid:
            return AuthOutcome(status=AuthStatus.INVALID_INPUT, validation=result)

        if self._store.is_user_exists(email):
            return AuthOutcome(status=AuthStatus.USER_EXISTS)

        self._delay(self._latency.register_ms)

        if not self._store.register(email, name, password):
            return AuthOutcome(status=AuthStatus.USER_EXISTS)

        self._store.create_session(email, name, password, remember_me=False)
        return AuthOutcome(status=AuthStatus.OK, profile=UserProfile(name=name, email=email))

    def logout(self) -> None:
        self._store.logout()

    # -- Current user ---------------------------------------------------------

    def current_user(self) -> UserProfile | None:
        if not self._store.is_logged_in():
            return None
        return UserProfile(name=self._store.current_name(), email=self._store.current_email())

    def update_profile(self, name: str) -> AuthOutcome:
        if not self._store.is_logged_in():
            return AuthOutcome(status=AuthStatus.NOT_LOGGED_IN)

        name = validation.trim(name)
        error = validation.name_error(name)
        if error is not None:
            return AuthOutcome(
                status=AuthStatus.INVALID_INPUT,
                validation=ValidationResult(is_valid=False, name_error=error),
            )

        self._store.update_profile(name)
        return AuthOutcome(status=AuthStatus.OK, profile=self.current_user())

    def change_password(
        self,
        current_password: str,
        new_password: str,
        confirm_password: str,
    ) -> AuthOutcome:
        if not self._store.is_logged_in():
            return AuthOutcome(status=AuthStatus.NOT_LOGGED_IN)

        result = ValidationResult(
            password_error=validation.password_error(new_password),
            confirm_password_error=validation.confirm_password_error(
                new_password, confirm_password
            ),
        )
        if result.errors():
            result.is_valid = False
            return AuthOutcome(status=AuthStatus.INVALID_INPUT, validation=result)

        if not self._store.change_password(current_password, new_password):
            return AuthOutcome(status=AuthStatus.INVALID_CREDENTIALS)
        return AuthOutcome(status=AuthStatus.OK, profile=self.current_user())

    # -- Launch ---------------------------------------------------------------

    def start_destination(self) -> Destination:
        """Where a launching client should go: home if the session survives."""
        if self._store.is_first_time():
            self._store.set_first_time_launch(False)
        if self._store.should_maintain_session():
            return Destination.HOME
        return Destination.LOGIN

    def saved_credentials(self) -> tuple[str, str]:
        """(email, password) to prefill the login form, empty unless remember-me."""
        if not self._store.is_remember_me_enabled():
            return "", ""
        return self._store.current_email(), self._store.saved_password()
