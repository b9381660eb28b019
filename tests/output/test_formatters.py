"""Tests for output mode selection."""

import json

from padctl.output.formatters import OutputSettings, format_result
from padctl.services.result import ServiceResult, fail


class TestFormatResult:
    def test_json_mode(self) -> None:
        result = ServiceResult(ok=True, op="reconcile", data={"saved": 1, "deleted": 1})
        out = format_result(result, settings=OutputSettings(json_output=True))
        parsed = json.loads(out)
        assert parsed["ok"] is True
        assert parsed["data"] == {"saved": 1, "deleted": 1}

    def test_quiet_mode(self) -> None:
        result = ServiceResult(ok=True, op="humanize", data={"macro": "KC_B", "label": "B"})
        assert format_result(result, settings=OutputSettings(quiet=True)) == "B"

    def test_quiet_placeholder(self) -> None:
        result = ServiceResult(ok=True, op="humanize", data={"macro": "KC_NO", "label": None})
        out = format_result(result, settings=OutputSettings(quiet=True, placeholder="-"))
        assert out == "-"

    def test_default_is_rich(self) -> None:
        result = ServiceResult(ok=True, op="humanize", data={"macro": "KC_B", "label": "B"})
        assert "KC_B" in format_result(result)

    def test_json_error(self) -> None:
        result = fail("resolve", "NOT_FOUND", "No profile")
        out = format_result(result, settings=OutputSettings(json_output=True))
        assert json.loads(out)["error"]["code"] == "NOT_FOUND"
