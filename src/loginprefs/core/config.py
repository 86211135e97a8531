"""loginprefs configuration files.

Layering itself lives on Config (pydantic-settings sources); this module
finds the file, wraps validation failures and writes YAML back out.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import SettingsError

from loginprefs.core.exceptions import ConfigError
from loginprefs.core.models import Config

DEFAULT_CONFIG_FILENAME = "loginprefs.config.yaml"
HIDDEN_DIR = ".loginprefs"


def load_config(
    config_path: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Config:
    """Load Config from a YAML file, LOGINPREFS_ env vars and *overrides*.

    Args:
        config_path: Explicit YAML path. If None, searches cwd and parents.
            A path that does not exist contributes nothing.
        overrides: Values that win over every other source.

    Raises:
        ConfigError: If the file is unreadable or the merged values are invalid.
    """
    if config_path is None:
        config_path = find_config_file()

    try:
        return Config.from_file(config_path, **(overrides or {}))
    except (ValidationError, SettingsError) as e:
        msg = f"Config validation failed: {e}"
        raise ConfigError(msg) from e


def save_config(config: Config, path: Path) -> None:
    """Write *config* to *path* as YAML, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    text = yaml.safe_dump(config.model_dump(mode="json"), sort_keys=False, allow_unicode=True)
    path.write_text(text, encoding="utf-8")


def find_config_file(start: Path | None = None) -> Path | None:
    """Nearest loginprefs.config.yaml in *start* (default cwd) or a parent.

    Each directory is checked directly and under `.loginprefs/`.
    """
    start = start or Path.cwd()
    for directory in (start, *start.parents):
        for candidate in (
            directory / DEFAULT_CONFIG_FILENAME,
            directory / HIDDEN_DIR / DEFAULT_CONFIG_FILENAME,
        ):
            if candidate.is_file():
                return candidate
    return None


def storage_path(config: Config) -> Path:
    """Resolve the database file from data_dir + storage.path."""
    path = Path(config.storage.path)
    if path.is_absolute():
        return path
    return Path(config.data_dir) / path
