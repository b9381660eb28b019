"""Tests for shared service helpers."""

import re
from datetime import datetime

import pytest

from padctl.services._helpers import now_compact, now_iso, parse_profile_ref


class TestTimestamps:
    def test_now_iso_parses(self) -> None:
        assert datetime.fromisoformat(now_iso()).tzinfo is not None

    def test_now_compact_format(self) -> None:
        assert re.fullmatch(r"\d{8}T\d{6}", now_compact())


class TestParseProfileRef:
    @pytest.mark.parametrize("raw", [None, ""])
    def test_absent_means_generic(self, raw: object) -> None:
        assert parse_profile_ref(raw) is None  # type: ignore[arg-type]

    @pytest.mark.parametrize(("raw", "expected"), [(5, 5), ("5", 5), (" 12 ", 12)])
    def test_valid(self, raw: object, expected: int) -> None:
        assert parse_profile_ref(raw) == expected  # type: ignore[arg-type]

    @pytest.mark.parametrize("raw", [0, -3, "abc", "1.5", True, 2.0])
    def test_invalid(self, raw: object) -> None:
        with pytest.raises(ValueError):
            parse_profile_ref(raw)  # type: ignore[arg-type]
