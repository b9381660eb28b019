"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import UTC, datetime


def now_iso() -> str:
    """Current UTC time as ISO 8601 (row timestamps)."""
    return datetime.now(UTC).isoformat()


def now_compact() -> str:
    """Current UTC time as compact ISO (YYYYMMDDTHHmmss, for backup filenames)."""
    return datetime.now(UTC).strftime("%Y%m%dT%H%M%S")


def parse_profile_ref(raw: str | int | None) -> int | None:
    """Parse an optional profile id given on the command line or in JSON.

    Raises:
        ValueError: If *raw* is present but not a positive integer.
    """
    if raw is None or raw == "":
        return None
    if isinstance(raw, bool):
        msg = f"Invalid profile id: {raw!r}"
        raise ValueError(msg)
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and raw.strip().isdigit():
        value = int(raw.strip())
    else:
        msg = f"Invalid profile id: {raw!r}"
        raise ValueError(msg)
    if value <= 0:
        msg = f"Invalid profile id: {raw!r}"
        raise ValueError(msg)
    return value
