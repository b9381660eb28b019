"""Tests for bulk edit value shapes."""

import pytest

from padctl.domain.entries import (
    TranslationEntry,
    coerce_entry,
    layer_entries,
    layer_index,
    macro_entries,
)


class TestCoerceEntry:
    def test_bare_string(self) -> None:
        assert coerce_entry("  Undo ") == TranslationEntry(label="Undo")

    def test_mapping_with_icon(self) -> None:
        entry = coerce_entry({"label": "Brush", "icon": " brush "})
        assert entry == TranslationEntry(label="Brush", icon="brush")

    def test_blank_icon_dropped(self) -> None:
        assert coerce_entry({"label": "Brush", "icon": "  "}).icon is None

    @pytest.mark.parametrize("value", ["", "   ", {"label": ""}, {"label": None}, {}])
    def test_removal(self, value: object) -> None:
        assert coerce_entry(value).is_removal

    @pytest.mark.parametrize("value", [42, None, ["Undo"], {"label": 3}, {"label": "X", "icon": 5}])
    def test_unsupported_shapes(self, value: object) -> None:
        with pytest.raises(ValueError):
            coerce_entry(value)

    def test_entry_is_frozen(self) -> None:
        entry = TranslationEntry(label="Undo")
        with pytest.raises(Exception):  # noqa: B017
            entry.label = "Redo"  # type: ignore[misc]


class TestMacroEntries:
    def test_mixed_shapes(self) -> None:
        entries = macro_entries({"C(KC_Z)": {"label": ""}, "KC_B": "Brush Tool"})
        assert entries == [
            ("C(KC_Z)", TranslationEntry(label="")),
            ("KC_B", TranslationEntry(label="Brush Tool")),
        ]

    def test_keys_trimmed_and_blank_dropped(self) -> None:
        entries = macro_entries({" C(KC_Z) ": "Undo", "  ": "ignored"})
        assert [macro for macro, _ in entries] == ["C(KC_Z)"]

    def test_error_names_the_macro(self) -> None:
        with pytest.raises(ValueError, match="KC_B"):
            macro_entries({"C(KC_Z)": "Undo", "KC_B": 12})


class TestLayerIndex:
    @pytest.mark.parametrize(("raw", "expected"), [(0, 0), (3, 3), ("2", 2), (" 4 ", 4)])
    def test_valid(self, raw: object, expected: int) -> None:
        assert layer_index(raw) == expected

    @pytest.mark.parametrize("raw", [-1, "x", "-1", True, 1.5, None])
    def test_invalid(self, raw: object) -> None:
        with pytest.raises(ValueError):
            layer_index(raw)


class TestLayerEntries:
    def test_string_keys(self) -> None:
        entries = layer_entries({"0": "Paint", 1: {"label": "", "icon": None}})
        assert entries == [(0, TranslationEntry(label="Paint")), (1, TranslationEntry(label=""))]

    def test_invalid_value_names_layer(self) -> None:
        with pytest.raises(ValueError, match="layer 2"):
            layer_entries({"2": 99})
