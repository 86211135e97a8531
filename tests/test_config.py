"""Tests for Config sources, file discovery and saving."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from loginprefs.core.config import (
    DEFAULT_CONFIG_FILENAME,
    find_config_file,
    load_config,
    save_config,
    storage_path,
)
from loginprefs.core.exceptions import ConfigError
from loginprefs.core.models import Config, StorageBackend


def _write(path: Path, data: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


@pytest.fixture()
def config_file(tmp_path: Path) -> Path:
    return _write(
        tmp_path / DEFAULT_CONFIG_FILENAME,
        {"data_dir": "from-yaml", "latency": {"login_ms": 100, "register_ms": 200}},
    )


# ── Source priority ──


class TestSources:
    def test_no_file_gives_defaults(self, tmp_path: Path) -> None:
        config = Config.from_file(tmp_path / "missing.yaml")
        assert config.data_dir == ".loginprefs"
        assert config.storage.backend == StorageBackend.SQLITE

    def test_plain_construction_reads_no_file(
        self, config_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(config_file.parent)
        assert Config().data_dir == ".loginprefs"

    def test_yaml_over_defaults(self, config_file: Path) -> None:
        config = Config.from_file(config_file)
        assert config.data_dir == "from-yaml"
        assert config.latency.register_ms == 200
        assert config.storage.path == "prefs.db"

    def test_env_over_yaml(self, config_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOGINPREFS_DATA_DIR", "from-env")
        monkeypatch.setenv("LOGINPREFS_LATENCY__LOGIN_MS", "7")
        config = Config.from_file(config_file)
        assert config.data_dir == "from-env"
        assert config.latency.login_ms == 7
        assert config.latency.register_ms == 200

    def test_overrides_over_env(self, config_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOGINPREFS_LATENCY__LOGIN_MS", "7")
        config = Config.from_file(config_file, latency={"login_ms": 5})
        assert config.latency.login_ms == 5
        assert config.latency.register_ms == 200

    def test_file_selection_does_not_leak(self, config_file: Path) -> None:
        Config.from_file(config_file)
        assert Config().data_dir == ".loginprefs"


# ── load_config ──


class TestLoadConfig:
    def test_explicit_path(self, config_file: Path) -> None:
        config = load_config(config_path=config_file, overrides={"storage": {"backend": "memory"}})
        assert config.data_dir == "from-yaml"
        assert config.storage.backend == StorageBackend.MEMORY

    def test_discovers_file_from_cwd(
        self, config_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(config_file.parent)
        assert load_config().data_dir == "from-yaml"

    def test_empty_file(self, tmp_path: Path) -> None:
        empty = tmp_path / DEFAULT_CONFIG_FILENAME
        empty.write_text("", encoding="utf-8")
        assert load_config(config_path=empty).latency.login_ms == 0

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        bad = tmp_path / DEFAULT_CONFIG_FILENAME
        bad.write_text("storage: [invalid: yaml: {{", encoding="utf-8")
        with pytest.raises(ConfigError, match="Failed to parse YAML"):
            load_config(config_path=bad)

    def test_non_mapping_yaml(self, tmp_path: Path) -> None:
        listing = _write(tmp_path / DEFAULT_CONFIG_FILENAME, ["a", "b"])
        with pytest.raises(ConfigError, match="must be a YAML mapping"):
            load_config(config_path=listing)

    def test_invalid_value(self, config_file: Path) -> None:
        with pytest.raises(ConfigError, match="Config validation failed"):
            load_config(config_path=config_file, overrides={"storage": {"backend": "redis"}})

    def test_invalid_env_value(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOGINPREFS_LATENCY__LOGIN_MS", "-5")
        with pytest.raises(ConfigError, match="Config validation failed"):
            load_config(config_path=tmp_path / "missing.yaml")

    def test_unknown_key_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            load_config(config_path=tmp_path / "missing.yaml", overrides={"colour": "blue"})


# ── Discovery ──


class TestFindConfigFile:
    def test_walks_up_to_hidden_dir(self, tmp_path: Path) -> None:
        hidden = _write(tmp_path / ".loginprefs" / DEFAULT_CONFIG_FILENAME, {})
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_file(nested) == hidden

    def test_plain_file_wins_over_hidden_in_same_dir(self, tmp_path: Path) -> None:
        _write(tmp_path / ".loginprefs" / DEFAULT_CONFIG_FILENAME, {})
        plain = _write(tmp_path / DEFAULT_CONFIG_FILENAME, {})
        assert find_config_file(tmp_path) == plain

    def test_directory_named_like_config_is_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "x" / DEFAULT_CONFIG_FILENAME).mkdir(parents=True)
        found = find_config_file(tmp_path / "x")
        assert found is None or found.is_file()


# ── Save / paths ──


class TestSaveConfig:
    def test_round_trip(self, tmp_path: Path) -> None:
        out = tmp_path / "nested" / DEFAULT_CONFIG_FILENAME
        save_config(Config(data_dir="/var/lib/lp", latency={"login_ms": 1000}), out)

        data = yaml.safe_load(out.read_text(encoding="utf-8"))
        assert data["storage"]["backend"] == "sqlite"
        assert load_config(config_path=out).latency.login_ms == 1000

    def test_storage_path_relative(self) -> None:
        config = Config(data_dir="data", storage={"path": "users.db"})
        assert storage_path(config) == Path("data") / "users.db"

    def test_storage_path_absolute(self, tmp_path: Path) -> None:
        db = tmp_path / "x.db"
        assert storage_path(Config(storage={"path": str(db)})) == db
