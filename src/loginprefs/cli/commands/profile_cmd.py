"""loginprefs profile — current user management."""

from __future__ import annotations

import typer

from loginprefs.cli.common import ConfigOption, check_outcome, open_service

profile_app = typer.Typer(
    name="profile",
    help="Current user profile commands.",
    no_args_is_help=True,
)


@profile_app.command(name="set-name")
def profile_set_name(
    name: str = typer.Argument(help="New full name."),
    config_path: str | None = ConfigOption,
) -> None:
    """Rename the logged-in user."""
    with open_service(config_path) as service:
        outcome = service.update_profile(name)
    check_outcome(outcome)
    typer.echo(f"Name updated: {outcome.profile}")


@profile_app.command(name="password")
def profile_password(
    current: str = typer.Option(
        ..., "--current", prompt="Current password", hide_input=True, help="Current password."
    ),
    new: str = typer.Option(
        ..., "--new", prompt="New password", hide_input=True, help="New password."
    ),
    confirm: str = typer.Option(
        ..., "--confirm", prompt="Confirm new password", hide_input=True, help="Repeat new password."
    ),
    config_path: str | None = ConfigOption,
) -> None:
    """Change the logged-in user's password."""
    with open_service(config_path) as service:
        outcome = service.change_password(current, new, confirm)
    check_outcome(outcome)
    typer.echo("Password changed")
