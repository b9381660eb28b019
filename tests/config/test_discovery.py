"""Tests for config file discovery and loading."""

from pathlib import Path

import pytest

from padctl.config.discovery import CONFIG_FILENAME, find_config, load_config
from padctl.config.models import PadConfig


class TestFindConfig:
    def test_walks_up(self, tmp_path: Path) -> None:
        config = tmp_path / CONFIG_FILENAME
        config.write_text("", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == config.resolve()

    def test_none_when_absent(self, tmp_path: Path) -> None:
        assert find_config(tmp_path) is None

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config = tmp_path / "elsewhere.toml"
        config.write_text("", encoding="utf-8")
        monkeypatch.setenv("PADCTL_CONFIG", str(config))
        assert find_config(tmp_path / "unrelated") == config

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("", encoding="utf-8")
        monkeypatch.setenv("PADCTL_CONFIG", str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None


class TestLoadConfig:
    def test_sparse_overrides(self, tmp_path: Path) -> None:
        config = tmp_path / CONFIG_FILENAME
        config.write_text('[display]\nplaceholder = "-"\n', encoding="utf-8")
        loaded = load_config(config)
        assert loaded.display.placeholder == "-"
        assert loaded.display.layer_label == "Layer {number}"
        assert loaded.store.backup_max_count == 10

    def test_no_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_config(cwd=tmp_path) == PadConfig()
