"""Preference backend registry."""

from __future__ import annotations

from loginprefs.core.config import storage_path
from loginprefs.core.models import Config, StorageBackend
from loginprefs.storage.base import Preferences, PreferencesEditor
from loginprefs.storage.memory import MemoryPreferences
from loginprefs.storage.sqlite import SqlitePreferences


def open_preferences(config: Config) -> Preferences:
    """Open the backend selected by config.storage.backend."""
    if config.storage.backend == StorageBackend.MEMORY:
        return MemoryPreferences()
    return SqlitePreferences(storage_path(config))


__all__ = [
    "MemoryPreferences",
    "Preferences",
    "PreferencesEditor",
    "SqlitePreferences",
    "open_preferences",
]
