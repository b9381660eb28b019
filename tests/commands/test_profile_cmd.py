"""Tests for the profile command group."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from padctl.cli import cli
from tests.conftest import SAMPLE_LAYOUT


@pytest.mark.usefixtures("_isolated_root")
class TestApplicationCommands:
    def test_add_app_and_list(self, cli_runner: CliRunner) -> None:
        assert cli_runner.invoke(cli, ["profile", "add-app", "Rebelle"]).exit_code == 0
        result = cli_runner.invoke(cli, ["profile", "apps"])
        assert "Rebelle" in result.output
        assert "1 applications" in result.output

    def test_duplicate_app(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["profile", "add-app", "Rebelle"])
        result = cli_runner.invoke(cli, ["profile", "add-app", "Rebelle"])
        assert result.exit_code == 1
        assert "CONFLICT" in result.output


@pytest.mark.usefixtures("_isolated_root")
class TestProfileCommands:
    def test_add_with_layout_and_show_layer(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        layout = tmp_path / "kb16.json"
        layout.write_text(json.dumps(SAMPLE_LAYOUT), encoding="utf-8")
        cli_runner.invoke(cli, ["profile", "add-app", "Rebelle"])
        added = cli_runner.invoke(
            cli, ["--json", "profile", "add", "Rebelle", "Inking", "--layout", str(layout)]
        )
        pid = json.loads(added.stdout)["data"]["id"]

        result = cli_runner.invoke(cli, ["profile", "show-layer", str(pid)])

        assert result.exit_code == 0
        assert "Rebelle / Inking" in result.output
        assert "Alt+Shift+H" in result.output
        assert "Vol Up" in result.output

    def test_list_by_app(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["profile", "add-app", "Rebelle"])
        cli_runner.invoke(cli, ["profile", "add-app", "Krita"])
        cli_runner.invoke(cli, ["profile", "add", "Rebelle", "Painting"])
        cli_runner.invoke(cli, ["profile", "add", "Krita", "Sketch"])
        result = cli_runner.invoke(cli, ["--json", "profile", "list", "--app", "Krita"])
        names = [p["name"] for p in json.loads(result.stdout)["data"]["items"]]
        assert names == ["Sketch"]

    def test_import_layout_from_stdin(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["profile", "add-app", "Rebelle"])
        cli_runner.invoke(cli, ["profile", "add", "Rebelle", "Painting"])
        result = cli_runner.invoke(
            cli,
            ["--json", "profile", "import-layout", "1", "-"],
            input=json.dumps(SAMPLE_LAYOUT),
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["layers"] == 2

    def test_show_layer_without_layout(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["profile", "add-app", "Rebelle"])
        cli_runner.invoke(cli, ["profile", "add", "Rebelle", "Painting"])
        result = cli_runner.invoke(cli, ["profile", "show-layer", "1"])
        assert result.exit_code == 1
        assert "import-layout" in result.output

    def test_remove(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["profile", "add-app", "Rebelle"])
        cli_runner.invoke(cli, ["profile", "add", "Rebelle", "Painting"])
        cli_runner.invoke(cli, ["translate", "set", "KC_B", "Brush", "-p", "1"])
        result = cli_runner.invoke(cli, ["--json", "profile", "remove", "1"])
        assert json.loads(result.stdout)["data"]["translations_removed"] == 1
        assert cli_runner.invoke(cli, ["profile", "remove", "1"]).exit_code == 1
