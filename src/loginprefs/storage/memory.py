"""MemoryPreferences — dict-backed preferences, lost on exit."""

from __future__ import annotations

from loginprefs.storage.base import Preferences, Value


class MemoryPreferences(Preferences):
    def __init__(self, initial: dict[str, str | bool] | None = None) -> None:
        self._data: dict[str, str | bool] = dict(initial or {})

    def _read(self, key: str) -> str | bool | None:
        return self._data.get(key)

    def _apply(self, *, clear: bool, changes: dict[str, Value]) -> None:
        if clear:
            self._data.clear()
        for key, value in changes.items():
            if value is None:
                self._data.pop(key, None)
            else:
                self._data[key] = value

    def keys(self) -> list[str]:
        return sorted(self._data)
