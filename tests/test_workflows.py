"""End-to-end CLI workflows across init, profiles, bulk edits and layouts."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from padctl.cli import cli
from tests.conftest import SAMPLE_LAYOUT


def _json(cli_runner: CliRunner, args: list[str], stdin: str | None = None) -> dict:
    result = cli_runner.invoke(cli, ["--json", *args], input=stdin)
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)["data"]


@pytest.mark.integration
@pytest.mark.usefixtures("_isolated_root")
class TestLabellingWorkflow:
    def test_label_a_pad(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        _json(cli_runner, ["init", str(tmp_path)])
        _json(cli_runner, ["profile", "add-app", "Rebelle"])
        pid = _json(cli_runner, ["profile", "add", "Rebelle", "Painting"])["id"]
        _json(cli_runner, ["profile", "import-layout", str(pid), "-"], json.dumps(SAMPLE_LAYOUT))

        bulk = _json(
            cli_runner,
            ["translate", "bulk", "-"],
            json.dumps(
                {
                    "profile_id": pid,
                    "translations": {"KC_B": {"label": "Round Brush", "icon": "brush"}},
                }
            ),
        )
        assert (bulk["saved"], bulk["deleted"]) == (1, 0)
        _json(
            cli_runner,
            ["layer", "bulk", "-"],
            json.dumps({"profile_id": pid, "layers": {"0": "Paint"}}),
        )

        layer = _json(cli_runner, ["profile", "show-layer", str(pid)])

        assert layer["layer_label"] == "Paint"
        labels = {key["macro"]: (key["label"], key["source"]) for key in layer["keys"]}
        assert labels["KC_B"] == ("Round Brush", "profile")
        assert labels["C(KC_Z)"] == ("Undo", "generic")
        assert labels["LSA(KC_H)"] == ("Decrease Hue/Red", "generic")
        assert labels["MO(1)"] == ("Hold Layer 2", "humanized")

    def test_removing_profile_restores_generic(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        _json(cli_runner, ["init", str(tmp_path)])
        _json(cli_runner, ["profile", "add-app", "Rebelle"])
        pid = _json(cli_runner, ["profile", "add", "Rebelle", "Painting"])["id"]
        _json(cli_runner, ["translate", "set", "C(KC_Z)", "Step Back", "-p", str(pid)])
        assert _json(cli_runner, ["translate", "resolve", "C(KC_Z)", "-p", str(pid)])[
            "label"
        ] == "Step Back"

        _json(cli_runner, ["profile", "remove", str(pid)])

        assert _json(cli_runner, ["translate", "resolve", "C(KC_Z)"])["label"] == "Undo"
