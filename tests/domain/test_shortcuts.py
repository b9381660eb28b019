"""Tests for encoding human shortcut notation as macro text."""

import pytest

from padctl.domain.humanize import humanize
from padctl.domain.shortcuts import encode_key, encode_shortcut


class TestEncodeKey:
    @pytest.mark.parametrize(
        ("word", "expected"),
        [("Enter", "ENT"), ("ESC", "ESC"), ("page up", "PGUP"), ("f5", "F5"), ("z", "Z")],
    )
    def test_known(self, word: str, expected: str) -> None:
        assert encode_key(word) == expected

    @pytest.mark.parametrize("word", ["é", "Wheel", ""])
    def test_unknown(self, word: str) -> None:
        assert encode_key(word) is None


class TestEncodeShortcut:
    @pytest.mark.parametrize(
        ("shortcut", "expected"),
        [
            ("Ctrl+Shift+M", "C(S(KC_M))"),
            ("Alt+Shift+H", "LSA(KC_H)"),
            ("Ctrl+Alt+Del", "LCA(KC_DEL)"),
            ("Ctrl + Z", "C(KC_Z)"),
            ("Cmd+S", "C(KC_S)"),
            ("Shift+Tab", "S(KC_TAB)"),
            ("Ctrl++", "C(KC_EQL)"),
            ("Ctrl+Page Up", "C(KC_PGUP)"),
            ("F5", "KC_F5"),
            ("B", "KC_B"),
        ],
    )
    def test_encodes(self, shortcut: str, expected: str) -> None:
        assert encode_shortcut(shortcut) == expected

    @pytest.mark.parametrize(
        "shortcut",
        [
            "",
            "Ctrl+click",
            "Hold Space Bar",
            "Ctrl+Z or Ctrl+Y",
            "Ctrl+Shift",
            "Ctrl+Wheel",
            "Ctrl+A+B",
            "G+H",
        ],
    )
    def test_unencodable(self, shortcut: str) -> None:
        assert encode_shortcut(shortcut) is None

    def test_encoded_macro_humanizes_back(self) -> None:
        macro = encode_shortcut("Ctrl+Shift+N")
        assert macro is not None
        assert humanize(macro) == "Ctrl+Shift+N"
