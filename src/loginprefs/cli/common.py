"""Shared helpers for CLI commands: service wiring and outcome reporting."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import typer

from loginprefs.auth.service import AuthService
from loginprefs.auth.store import CredentialStore
from loginprefs.core.config import load_config
from loginprefs.core.exceptions import LoginPrefsError
from loginprefs.core.models import AuthOutcome, AuthStatus
from loginprefs.storage import open_preferences

logger = logging.getLogger(__name__)

_STATUS_MESSAGES: dict[AuthStatus, str] = {
    AuthStatus.USER_EXISTS: "An account with this email already exists",
    AuthStatus.INVALID_CREDENTIALS: "Invalid email or password",
    AuthStatus.NOT_LOGGED_IN: "Not logged in",
}

ConfigOption = typer.Option(None, "--config", "-c", help="Config file path.")


def fail(message: str) -> typer.Exit:
    """Print *message* to stderr in red and return an Exit to raise."""
    typer.echo(typer.style(message, fg=typer.colors.RED), err=True)
    return typer.Exit(code=1)


@contextmanager
def open_service(config_path: str | None) -> Iterator[AuthService]:
    """Load config, open the preference backend and yield an AuthService."""
    try:
        config = load_config(config_path=Path(config_path) if config_path else None)
        prefs = open_preferences(config)
    except LoginPrefsError as e:
        raise fail(f"Error: {e}") from None

    try:
        yield AuthService(CredentialStore(prefs), latency=config.latency)
    except LoginPrefsError as e:
        logger.debug("Command failed", exc_info=True)
        raise fail(f"Error: {e}") from None
    finally:
        prefs.close()


def check_outcome(outcome: AuthOutcome) -> None:
    """Exit with code 1 and a message unless *outcome* is ok."""
    if outcome.ok:
        return
    if outcome.status == AuthStatus.INVALID_INPUT and outcome.validation is not None:
        for field, message in outcome.validation.errors().items():
            typer.echo(typer.style(f"  {field}: {message}", fg=typer.colors.RED), err=True)
        raise typer.Exit(code=1)
    raise fail(_STATUS_MESSAGES.get(outcome.status, str(outcome.status)))
