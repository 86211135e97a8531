"""loginprefs CLI entry point."""

import logging

import typer

app = typer.Typer(
    name="loginprefs",
    help="loginprefs — local accounts, sessions and remember-me",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    if value:
        from loginprefs import __version__

        typer.echo(f"loginprefs {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """loginprefs — local accounts, sessions and remember-me."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# -- Register commands --------------------------------------------------------

from loginprefs.cli.commands.account_cmd import (  # noqa: E402
    login_command,
    logout_command,
    register_command,
    reset_command,
    status_command,
    whoami_command,
)
from loginprefs.cli.commands.config_cmd import config_app  # noqa: E402
from loginprefs.cli.commands.profile_cmd import profile_app  # noqa: E402

app.command(name="register")(register_command)
app.command(name="login")(login_command)
app.command(name="logout")(logout_command)
app.command(name="whoami")(whoami_command)
app.command(name="status")(status_command)
app.command(name="reset")(reset_command)
app.add_typer(profile_app, name="profile")
app.add_typer(config_app, name="config")
