"""loginprefs register / login / logout / whoami / status / reset."""

from __future__ import annotations

import typer

from loginprefs.cli.common import ConfigOption, check_outcome, fail, open_service
from loginprefs.core.models import Destination


def register_command(
    name: str = typer.Option(..., "--name", "-n", prompt="Full name", help="Full name."),
    email: str = typer.Option(..., "--email", "-e", prompt=True, help="Email address."),
    password: str = typer.Option(
        ..., "--password", "-p", prompt=True, hide_input=True, help="Password."
    ),
    confirm: str = typer.Option(
        ..., "--confirm", prompt="Confirm password", hide_input=True, help="Repeat password."
    ),
    config_path: str | None = ConfigOption,
) -> None:
    """Create an account and log in."""
    with open_service(config_path) as service:
        outcome = service.register(name, email, password, confirm)
    check_outcome(outcome)
    typer.echo(f"Registered and logged in as {outcome.profile}")


def login_command(
    email: str = typer.Option(..., "--email", "-e", prompt=True, help="Email address."),
    password: str = typer.Option(
        ..., "--password", "-p", prompt=True, hide_input=True, help="Password."
    ),
    remember: bool = typer.Option(False, "--remember", "-r", help="Remember me."),
    config_path: str | None = ConfigOption,
) -> None:
    """Log in with email and password."""
    with open_service(config_path) as service:
        outcome = service.login(email, password, remember_me=remember)
    check_outcome(outcome)
    if outcome.profile is not None:
        typer.echo(f"Welcome, {outcome.profile.first_name or outcome.profile.email}")


def logout_command(config_path: str | None = ConfigOption) -> None:
    """End the current session."""
    with open_service(config_path) as service:
        if service.current_user() is None:
            raise fail("Not logged in")
        service.logout()
    typer.echo("Logged out")


def whoami_command(config_path: str | None = ConfigOption) -> None:
    """Show the logged-in user."""
    with open_service(config_path) as service:
        user = service.current_user()
    if user is None:
        raise fail("Not logged in")
    typer.echo(f"[{user.initials}] {user}")


def status_command(config_path: str | None = ConfigOption) -> None:
    """Show where a fresh launch would land (home or login)."""
    with open_service(config_path) as service:
        destination = service.start_destination()
        email, _ = service.saved_credentials()
    typer.echo(destination.value)
    if destination == Destination.LOGIN and email:
        typer.echo(f"Remembered email: {email}")


def reset_command(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation."),
    config_path: str | None = ConfigOption,
) -> None:
    """Delete every account and the session."""
    if not yes:
        typer.confirm("Delete all accounts and session data?", abort=True)
    with open_service(config_path) as service:
        service.store.clear_all()
    typer.echo("All data cleared")
