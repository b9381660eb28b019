"""Tests for the root CLI group and global flags."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from padctl import __version__
from padctl.cli import cli


class TestRootGroup:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert f"padctl, version {__version__}" in result.output

    def test_help_without_subcommand(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        for name in ("translate", "layer", "profile", "humanize", "seed", "init", "upgrade"):
            assert name in result.output

    def test_missing_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["-c", str(tmp_path / "nope.toml"), "humanize", "KC_B"])
        assert result.exit_code == 1
        assert "Config file not found" in result.output


@pytest.mark.usefixtures("_isolated_root")
class TestConfigEffects:
    def test_placeholder_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "padctl.toml").write_text('[display]\nplaceholder = "n/a"\n', encoding="utf-8")
        result = cli_runner.invoke(cli, ["-q", "translate", "resolve", "KC_NO"])
        assert result.stdout.strip() == "n/a"

    def test_verbose_attaches_telemetry(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "-v", "translate", "resolve", "KC_B"])
        data = json.loads(result.stdout)
        assert data["meta"]["telemetry"]["name"] == "TranslationService.resolve"

    def test_local_plugin_receives_events(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        plugins = tmp_path / ".padctl" / "plugins"
        plugins.mkdir(parents=True)
        (plugins / "audit.py").write_text(
            "import pluggy\n"
            "hookimpl = pluggy.HookimplMarker('padctl')\n"
            "class Audit:\n"
            "    @hookimpl\n"
            "    def post_reconcile(self, profile_id, saved, deleted):\n"
            "        open('audit.log', 'a').write(f'{saved}/{deleted}\\n')\n",
            encoding="utf-8",
        )
        payload = json.dumps({"translations": {"KC_B": "Brush"}})
        result = cli_runner.invoke(cli, ["translate", "bulk", "-"], input=payload)
        assert result.exit_code == 0
        assert (tmp_path / "audit.log").read_text(encoding="utf-8") == "1/0\n"


class TestExamples:
    @pytest.mark.parametrize(
        "args",
        [
            ["humanize", "--examples"],
            ["translate", "--examples"],
            ["translate", "bulk", "--examples"],
            ["layer", "--examples"],
            ["profile", "show-layer", "--examples"],
            ["seed", "--examples"],
            ["init", "--examples"],
        ],
    )
    def test_examples_flag(self, cli_runner: CliRunner, args: list[str]) -> None:
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0
        assert "Examples for" in result.output
        assert "padctl" in result.output
