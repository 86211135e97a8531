"""loginprefs config — configuration management."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import typer
import yaml

from loginprefs.cli.common import ConfigOption, fail
from loginprefs.core.config import DEFAULT_CONFIG_FILENAME, find_config_file, load_config, save_config
from loginprefs.core.exceptions import ConfigError

config_app = typer.Typer(
    name="config",
    help="Configuration management commands.",
    no_args_is_help=True,
)


@config_app.command(name="show")
def config_show(config_path: str | None = ConfigOption) -> None:
    """Show current configuration."""
    try:
        path = Path(config_path) if config_path else None
        config = load_config(config_path=path)
    except ConfigError as e:
        raise fail(f"Error: {e}") from None
    data = config.model_dump(mode="json")
    typer.echo(yaml.dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False))


@config_app.command(name="set")
def config_set(
    key: str = typer.Argument(help="Dotted config key (e.g. storage.backend)."),
    value: str = typer.Argument(help="Value to set."),
    config_path: str | None = ConfigOption,
) -> None:
    """Set a configuration value by dotted key."""
    try:
        path = Path(config_path) if config_path else _default_config_path()
        config = load_config(config_path=path, overrides=_dotted_key_to_dict(key, value))
        save_config(config, path)
    except ConfigError as e:
        raise fail(f"Error: {e}") from None
    typer.echo(f"Set {key} = {value}")


def _default_config_path() -> Path:
    """Existing config file, else loginprefs.config.yaml in cwd."""
    return find_config_file() or Path.cwd() / DEFAULT_CONFIG_FILENAME


def _dotted_key_to_dict(key: str, value: str) -> dict[str, Any]:
    """Nest *value* under a dotted key: "storage.backend" -> {"storage": {"backend": value}}."""
    nested: Any = value
    for part in reversed(key.split(".")):
        nested = {part: nested}
    return nested
