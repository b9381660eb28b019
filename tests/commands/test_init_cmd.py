"""Tests for the init command."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from padctl.cli import cli


class TestInitCommand:
    def test_init_path(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        root = tmp_path / "pad"
        result = cli_runner.invoke(cli, ["--json", "init", str(root)])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["config_created"] is True
        assert data["seeded"] > 0
        assert (root / "padctl.toml").is_file()

    def test_no_seed(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "init", "--no-seed", str(tmp_path)])
        assert json.loads(result.stdout)["data"]["seeded"] == 0

    def test_init_then_use(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        cli_runner.invoke(cli, ["init", str(tmp_path)])
        monkeypatch.chdir(tmp_path)
        result = cli_runner.invoke(cli, ["-q", "translate", "resolve", "KC_B"])
        assert result.stdout.strip() == "Brush Tool"
