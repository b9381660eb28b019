"""Tests for the key symbol table."""

import pytest

from padctl.domain.keys import (
    KEY_TABLE,
    KeyCategory,
    display_name,
    key_category,
    list_symbols,
    lookup,
    strip_key_prefix,
)


class TestStripKeyPrefix:
    def test_strips_kc(self) -> None:
        assert strip_key_prefix("KC_ENT") == "ENT"

    def test_leaves_bare_ids(self) -> None:
        assert strip_key_prefix("ENT") == "ENT"

    def test_only_leading_prefix(self) -> None:
        assert strip_key_prefix("C(KC_Z)") == "C(KC_Z)"


class TestDisplayName:
    @pytest.mark.parametrize(
        ("key_id", "expected"),
        [
            ("KC_ENT", "Enter"),
            ("KC_ENTER", "Enter"),
            ("KC_MINS", "-"),
            ("KC_EQL", "="),
            ("KC_LEFT", "←"),
            ("KC_F12", "F12"),
            ("KC_VOLU", "Vol Up"),
            ("KC_2", "2"),
            ("KC_a", "A"),
            ("h", "H"),
        ],
    )
    def test_known_and_single_char(self, key_id: str, expected: str) -> None:
        assert display_name(key_id) == expected

    def test_lookup_is_case_insensitive(self) -> None:
        assert display_name("KC_ent") == "Enter"

    def test_unknown_long_id_verbatim(self) -> None:
        assert display_name("KC_FOO") == "FOO"

    def test_no_op_is_empty(self) -> None:
        assert display_name("KC_NO") == ""


class TestLookup:
    def test_curated_entry(self) -> None:
        symbol = lookup("KC_PGUP")
        assert symbol is not None
        assert symbol.display_name == "PageUp"
        assert symbol.category is KeyCategory.NAVIGATION

    def test_uncurated_is_none(self) -> None:
        assert lookup("KC_A") is None

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            KEY_TABLE["NEW"] = KEY_TABLE["ESC"]  # type: ignore[index]


class TestKeyCategory:
    def test_letter(self) -> None:
        assert key_category("KC_Q") is KeyCategory.LETTER

    def test_digit(self) -> None:
        assert key_category("KC_7") is KeyCategory.DIGIT

    def test_curated(self) -> None:
        assert key_category("KC_MPLY") is KeyCategory.MEDIA

    def test_unknown(self) -> None:
        assert key_category("KC_FOO") is None


class TestListSymbols:
    def test_letters_synthesized(self) -> None:
        letters = list_symbols(KeyCategory.LETTER)
        assert len(letters) == 26
        assert letters[0].key_id == "A"

    def test_digits_synthesized(self) -> None:
        assert [s.key_id for s in list_symbols(KeyCategory.DIGIT)] == list("0123456789")

    def test_category_filter(self) -> None:
        media = list_symbols(KeyCategory.MEDIA)
        assert media
        assert all(s.category is KeyCategory.MEDIA for s in media)

    def test_all_categories(self) -> None:
        every = list_symbols()
        categories = {s.category for s in every}
        assert categories == set(KeyCategory)
