"""Tests for pad layout validation."""

import json

import pytest

from padctl.domain.layout import PadLayout, parse_layout
from tests.conftest import SAMPLE_LAYOUT


class TestParseLayout:
    def test_from_json_text(self) -> None:
        layout = parse_layout(json.dumps(SAMPLE_LAYOUT))
        assert layout.name == "KB16"
        assert layout.layer_count == 2

    def test_from_dict(self) -> None:
        assert parse_layout(SAMPLE_LAYOUT).layer_count == 2

    def test_extra_fields_ignored(self) -> None:
        layout = parse_layout({"layers": [["KC_A"]], "vendorProductId": 1234})
        assert layout.keys(0) == ["KC_A"]

    def test_invalid_json(self) -> None:
        with pytest.raises(ValueError, match="not valid JSON"):
            parse_layout("{nope")

    def test_not_an_object(self) -> None:
        with pytest.raises(ValueError, match="JSON object"):
            parse_layout("[1, 2]")

    def test_missing_layers(self) -> None:
        with pytest.raises(ValueError, match="Invalid layout"):
            parse_layout({"name": "KB16"})

    def test_layers_must_be_strings(self) -> None:
        with pytest.raises(ValueError, match="Invalid layout"):
            parse_layout({"layers": [[{"key": 1}]]})


class TestPadLayout:
    @pytest.fixture
    def layout(self) -> PadLayout:
        return parse_layout(SAMPLE_LAYOUT)

    def test_blank_slots_read_as_no_op(self, layout: PadLayout) -> None:
        assert layout.keys(0) == ["C(KC_Z)", "KC_B", "LSA(KC_H)", "KC_NO", "MO(1)", "KC_NO"]

    def test_out_of_range_layer(self, layout: PadLayout) -> None:
        assert layout.keys(5) == []

    def test_encoder_turns(self, layout: PadLayout) -> None:
        assert layout.encoder_turns(0) == [("KC_VOLD", "KC_VOLU")]
        assert layout.encoder_turns(1) == [("C(KC_MINS)", "C(KC_EQL)")]

    def test_encoder_without_layer_entry(self, layout: PadLayout) -> None:
        assert layout.encoder_turns(2) == [("KC_NO", "KC_NO")]

    def test_to_json_round_trips(self, layout: PadLayout) -> None:
        assert PadLayout.model_validate_json(layout.to_json()) == layout

    def test_to_json_omits_missing_name(self) -> None:
        assert "name" not in json.loads(parse_layout({"layers": [[]]}).to_json())
