"""Shared fixtures."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path  # noqa: TC003

import pytest

from loginprefs.auth.service import AuthService
from loginprefs.auth.store import CredentialStore
from loginprefs.storage import MemoryPreferences, SqlitePreferences


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep LOGINPREFS_ variables from the outer environment out of tests."""
    for key in list(os.environ):
        if key.startswith("LOGINPREFS_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def prefs() -> MemoryPreferences:
    return MemoryPreferences()


@pytest.fixture()
def sqlite_prefs(tmp_path: Path) -> Iterator[SqlitePreferences]:
    p = SqlitePreferences(tmp_path / "prefs.db")
    yield p
    p.close()


@pytest.fixture()
def store(prefs: MemoryPreferences) -> CredentialStore:
    return CredentialStore(prefs)


@pytest.fixture()
def service(store: CredentialStore) -> AuthService:
    return AuthService(store)
