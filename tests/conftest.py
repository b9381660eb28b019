"""Shared pytest fixtures and test helpers for padctl tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from padctl.config.settings import PadSettings
from padctl.infrastructure.database.engine import init_database
from padctl.infrastructure.store import Store
from padctl.services.telemetry import disable_telemetry

SAMPLE_LAYOUT: dict[str, Any] = {
    "name": "KB16",
    "layers": [
        ["C(KC_Z)", "KC_B", "LSA(KC_H)", "KC_NO", "MO(1)", ""],
        ["KC_F1", "KC_F2"],
    ],
    "encoders": [
        [["KC_VOLD", "KC_VOLU"], ["C(KC_MINS)", "C(KC_EQL)"]],
    ],
}


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's PADCTL_* environment out of the tests."""
    monkeypatch.delenv("PADCTL_CONFIG", raising=False)
    yield
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Engine:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def settings(tmp_path: Path) -> PadSettings:
    return PadSettings(root=tmp_path)


@pytest.fixture
def store(settings: PadSettings) -> Store:
    """Fully initialized store on a temp directory, without plugins."""
    s = Store(settings)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp project root so the CLI creates an isolated store.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes. Tests that need the path can also request ``tmp_path``.
    """
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def create_profile(
    store: Store,
    application: str = "Rebelle",
    name: str = "Painting",
    layout: dict[str, Any] | None = None,
) -> int:
    """Create an application (if needed) and a profile, returning the profile id."""
    from padctl.services.profiles import ProfileService

    svc = ProfileService(store)
    svc.add_application(application)
    result = svc.add_profile(
        application, name, json.dumps(layout) if layout is not None else None
    )
    assert result.ok, result.error
    return int(result.data["id"])


@pytest.fixture
def profile_id(store: Store) -> int:
    """Id of a fresh profile without a layout."""
    return create_profile(store)


@pytest.fixture
def layout_profile_id(store: Store) -> int:
    """Id of a fresh profile carrying SAMPLE_LAYOUT."""
    return create_profile(store, name="Inking", layout=SAMPLE_LAYOUT)
