"""Preferences ABC — key-value persistence interface.

MemoryPreferences and SqlitePreferences implement this. Writes go through a
PreferencesEditor, which batches changes and applies them in one step.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType  # noqa: TC003

from loginprefs.core.exceptions import StorageError

# None marks a removal.
Value = str | bool | None


class PreferencesEditor:
    """Batch of pending writes. Applied atomically on apply() or clean `with` exit."""

    def __init__(self, prefs: Preferences) -> None:
        self._prefs = prefs
        self._changes: dict[str, Value] = {}
        self._clear = False

    def put_string(self, key: str, value: str) -> PreferencesEditor:
        self._changes[key] = value
        return self

    def put_bool(self, key: str, value: bool) -> PreferencesEditor:
        self._changes[key] = bool(value)
        return self

    def remove(self, key: str) -> PreferencesEditor:
        self._changes[key] = None
        return self

    def clear(self) -> PreferencesEditor:
        """Drop every stored key. Runs before the other pending changes."""
        self._clear = True
        return self

    def apply(self) -> None:
        if not self._clear and not self._changes:
            return
        self._prefs._apply(clear=self._clear, changes=dict(self._changes))
        self._changes.clear()
        self._clear = False

    def __enter__(self) -> PreferencesEditor:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc_type is None:
            self.apply()


class Preferences(ABC):
    """Key-value store of string and boolean values."""

    @abstractmethod
    def _read(self, key: str) -> str | bool | None:
        """Return the stored value, or None when the key is absent."""
        ...

    @abstractmethod
    def _apply(self, *, clear: bool, changes: dict[str, Value]) -> None:
        """Apply a batch of changes in one step."""
        ...

    @abstractmethod
    def keys(self) -> list[str]:
        """All stored keys, sorted."""
        ...

    def close(self) -> None:  # noqa: B027
        """Release backend resources."""

    # -- Reads ---------------------------------------------------------------

    def get_string(self, key: str, default: str = "") -> str:
        value = self._read(key)
        if value is None:
            return default
        if not isinstance(value, str):
            msg = f"Stored value is {type(value).__name__}, not str"
            raise StorageError(msg, key=key)
        return value

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._read(key)
        if value is None:
            return default
        if not isinstance(value, bool):
            msg = f"Stored value is {type(value).__name__}, not bool"
            raise StorageError(msg, key=key)
        return value

    def contains(self, key: str) -> bool:
        return self._read(key) is not None

    # -- Writes --------------------------------------------------------------

    def edit(self) -> PreferencesEditor:
        return PreferencesEditor(self)

    def put_string(self, key: str, value: str) -> None:
        self.edit().put_string(key, value).apply()

    def put_bool(self, key: str, value: bool) -> None:
        self.edit().put_bool(key, value).apply()

    def remove(self, key: str) -> None:
        self.edit().remove(key).apply()

    def clear(self) -> None:
        self.edit().clear().apply()

    def __enter__(self) -> Preferences:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
