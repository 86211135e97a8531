"""loginprefs data models — Pydantic v2.

The only internal import is core.exceptions (for config file errors).
All Enum and Model definitions live here.
"""

from __future__ import annotations

from contextvars import ContextVar
from enum import StrEnum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from loginprefs.core.exceptions import ConfigError

# ============================================================
# Enums
# ============================================================


class StorageBackend(StrEnum):
    """Preference backend type."""

    MEMORY = "memory"
    SQLITE = "sqlite"


class AuthStatus(StrEnum):
    """Result of an AuthService operation."""

    OK = "ok"
    INVALID_INPUT = "invalid_input"
    USER_EXISTS = "user_exists"
    INVALID_CREDENTIALS = "invalid_credentials"
    NOT_LOGGED_IN = "not_logged_in"


class Destination(StrEnum):
    """Screen a launching client should open."""

    HOME = "home"
    LOGIN = "login"


# ============================================================
# Config Models
# ============================================================


class StorageConfig(BaseModel):
    """Preference backend configuration."""

    backend: StorageBackend = Field(default=StorageBackend.SQLITE)
    path: str = Field(
        default="prefs.db",
        description="Database file name, relative to data_dir",
    )


class LatencyConfig(BaseModel):
    """Artificial delay applied by AuthService before store calls."""

    login_ms: int = Field(default=0, ge=0, le=60000)
    register_ms: int = Field(default=0, ge=0, le=60000)


class YamlFileSource(YamlConfigSettingsSource):
    """YAML settings source that reports bad files as ConfigError."""

    def _read_file(self, file_path: Path) -> dict[str, Any]:
        try:
            data = super()._read_file(file_path)
        except yaml.YAMLError as e:
            msg = f"Failed to parse YAML: {file_path}: {e}"
            raise ConfigError(msg) from e
        except OSError as e:
            msg = f"Failed to read config: {file_path}: {e}"
            raise ConfigError(msg) from e

        if not isinstance(data, dict):
            msg = f"Config file must be a YAML mapping, got {type(data).__name__}: {file_path}"
            raise ConfigError(msg)
        return data


# YAML file read by the next Config() built in this context
_config_file: ContextVar[Path | None] = ContextVar("loginprefs_config_file", default=None)


class Config(BaseSettings):
    """Project configuration.

    Source priority (highest first): init kwargs, LOGINPREFS_ environment
    variables, the YAML file passed to from_file(), field defaults. Nested
    sections merge key by key across sources.
    """

    model_config = SettingsConfigDict(
        env_prefix="LOGINPREFS_",
        env_nested_delimiter="__",
    )

    data_dir: str = Field(default=".loginprefs")
    storage: StorageConfig = Field(default_factory=StorageConfig)
    latency: LatencyConfig = Field(default_factory=LatencyConfig)

    @classmethod
    def from_file(cls, path: Path | None, **overrides: Any) -> Config:
        """Build a Config layered over the YAML file at *path* (None: no file)."""
        token = _config_file.set(path)
        try:
            return cls(**overrides)
        finally:
            _config_file.reset(token)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            YamlFileSource(settings_cls, yaml_file=_config_file.get()),
        )


# ============================================================
# Account Models
# ============================================================


class UserRecord(BaseModel):
    """Persisted account, keyed by email. Password is stored as-is."""

    email: str
    name: str
    password: str


class SessionState(BaseModel):
    """Snapshot of the current session fields."""

    logged_in: bool = False
    current_email: str = ""
    current_name: str = ""
    remember_me: bool = False
    remembered_password: str | None = None


class UserProfile(BaseModel):
    """Display view of a user (no password)."""

    name: str = ""
    email: str = ""

    def _parts(self) -> list[str]:
        return self.name.split()

    @property
    def first_name(self) -> str:
        parts = self._parts()
        return parts[0] if parts else ""

    @property
    def last_name(self) -> str:
        parts = self._parts()
        return parts[-1] if len(parts) > 1 else ""

    @property
    def initials(self) -> str:
        """Uppercased first letter of each name part, '?' for a blank name."""
        parts = self._parts()
        if not parts:
            return "?"
        return "".join(p[0] for p in parts).upper()

    @property
    def is_valid(self) -> bool:
        return bool(self.name.strip()) and bool(self.email.strip())

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


# ============================================================
# Result Models
# ============================================================


class ValidationResult(BaseModel):
    """Field-level errors for a login or registration form."""

    is_valid: bool = True
    name_error: str | None = None
    email_error: str | None = None
    password_error: str | None = None
    confirm_password_error: str | None = None

    def errors(self) -> dict[str, str]:
        """Return only the fields that carry an error."""
        data = self.model_dump(exclude={"is_valid"}, exclude_none=True)
        return {k.removesuffix("_error"): v for k, v in data.items()}


class AuthOutcome(BaseModel):
    """Result of an AuthService call."""

    status: AuthStatus
    validation: ValidationResult | None = None
    profile: UserProfile | None = None

    @property
    def ok(self) -> bool:
        return self.status == AuthStatus.OK
