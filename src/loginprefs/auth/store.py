"""CredentialStore — user records and the current session on top of Preferences.

Key schema:
    record:<email>:name
    record:<email>:password
    session.loggedIn / session.email / session.name
    session.rememberMe / session.rememberedPassword
    app.firstTime

Passwords are stored and compared in plain text.
"""

from __future__ import annotations

import logging

from loginprefs.core.models import SessionState, UserRecord
from loginprefs.storage.base import Preferences  # noqa: TC001

logger = logging.getLogger(__name__)

KEY_LOGGED_IN = "session.loggedIn"
KEY_EMAIL = "session.email"
KEY_NAME = "session.name"
KEY_REMEMBER_ME = "session.rememberMe"
KEY_REMEMBERED_PASSWORD = "session.rememberedPassword"
KEY_FIRST_TIME = "app.firstTime"


def record_name_key(email: str) -> str:
    return f"record:{email}:name"


def record_password_key(email: str) -> str:
    return f"record:{email}:password"


class CredentialStore:
    """Registration, authentication and session state.

    Owns every key it writes; callers go through these methods rather than
    touching the Preferences directly.
    """

    def __init__(self, prefs: Preferences) -> None:
        self._prefs = prefs

    @property
    def preferences(self) -> Preferences:
        return self._prefs

    # -- Records -------------------------------------------------------------

    def register(self, email: str, name: str, password: str) -> bool:
        """Create a record. Returns False, writing nothing, if *email* is taken."""
        if self.is_user_exists(email):
            logger.debug("Registration rejected, user exists: %s", email)
            return False

        with self._prefs.edit() as editor:
            editor.put_string(record_name_key(email), name)
            editor.put_string(record_password_key(email), password)
        logger.info("Registered user %s", email)
        return True

    def is_user_exists(self, email: str) -> bool:
        return self._prefs.contains(record_password_key(email))

    def authenticate(self, email: str, password: str) -> bool:
        """Exact, case-sensitive match against the stored password."""
        saved = self._prefs.get_string(record_password_key(email))
        return bool(saved) and saved == password

    def get_user_name(self, email: str) -> str:
        return self._prefs.get_string(record_name_key(email))

    def get_user(self, email: str) -> UserRecord | None:
        if not self.is_user_exists(email):
            return None
        return UserRecord(
            email=email,
            name=self.get_user_name(email),
            password=self._prefs.get_string(record_password_key(email)),
        )

    # -- Session -------------------------------------------------------------

    def create_session(self, email: str, name: str, password: str, remember_me: bool) -> None:
        with self._prefs.edit() as editor:
            editor.put_bool(KEY_LOGGED_IN, True)
            editor.put_string(KEY_EMAIL, email)
            editor.put_string(KEY_NAME, name)

            if remember_me:
                editor.put_string(KEY_REMEMBERED_PASSWORD, password)
                editor.put_bool(KEY_REMEMBER_ME, True)
            else:
                editor.remove(KEY_REMEMBERED_PASSWORD)
                editor.put_bool(KEY_REMEMBER_ME, False)
        logger.debug("Session started for %s (remember_me=%s)", email, remember_me)

    def logout(self) -> None:
        """End the session.

        With remember-me on, email and name stay for prefill; the remembered
        password is always dropped.
        """
        remember_me = self.is_remember_me_enabled()
        with self._prefs.edit() as editor:
            editor.put_bool(KEY_LOGGED_IN, False)
            editor.remove(KEY_REMEMBERED_PASSWORD)
            if not remember_me:
                editor.remove(KEY_EMAIL)
                editor.remove(KEY_NAME)
                editor.put_bool(KEY_REMEMBER_ME, False)
        logger.debug("Logged out (remember_me=%s)", remember_me)

    def should_maintain_session(self) -> bool:
        """Whether a relaunch should resume the session.

        A logged-in session without remember-me is not carried over: it is
        logged out here and False is returned.
        """
        if self.is_logged_in() and not self.is_remember_me_enabled():
            logger.warning("Ending session without remember-me for %s", self.current_email())
            self.logout()
            return False
        return self.is_logged_in()

    def is_logged_in(self) -> bool:
        return self._prefs.get_bool(KEY_LOGGED_IN)

    def current_email(self) -> str:
        return self._prefs.get_string(KEY_EMAIL)

    def current_name(self) -> str:
        return self._prefs.get_string(KEY_NAME)

    def saved_password(self) -> str:
        """Remembered password, or "" when remember-me is off."""
        return self._prefs.get_string(KEY_REMEMBERED_PASSWORD)

    def is_remember_me_enabled(self) -> bool:
        return self._prefs.get_bool(KEY_REMEMBER_ME)

    def session(self) -> SessionState:
        remembered = self._prefs.get_string(KEY_REMEMBERED_PASSWORD)
        return SessionState(
            logged_in=self.is_logged_in(),
            current_email=self.current_email(),
            current_name=self.current_name(),
            remember_me=self.is_remember_me_enabled(),
            remembered_password=remembered or None,
        )

    # -- Profile -------------------------------------------------------------

    def update_profile(self, name: str) -> None:
        """Rename the current user, in the session and in their record."""
        email = self.current_email()
        if not email:
            logger.warning("update_profile called with no current user, ignoring")
            return
        with self._prefs.edit() as editor:
            editor.put_string(KEY_NAME, name)
            editor.put_string(record_name_key(email), name)

    def change_password(self, current_password: str, new_password: str) -> bool:
        email = self.current_email()
        if not self.authenticate(email, current_password):
            return False

        with self._prefs.edit() as editor:
            editor.put_string(record_password_key(email), new_password)
            if self.is_remember_me_enabled():
                editor.put_string(KEY_REMEMBERED_PASSWORD, new_password)
        logger.info("Password changed for %s", email)
        return True

    # -- App state -----------------------------------------------------------

    def is_first_time(self) -> bool:
        return self._prefs.get_bool(KEY_FIRST_TIME, default=True)

    def set_first_time_launch(self, is_first_time: bool) -> None:
        self._prefs.put_bool(KEY_FIRST_TIME, is_first_time)

    def clear_all(self) -> None:
        """Wipe every record and the session."""
        self._prefs.clear()
        logger.info("Cleared all stored data")
