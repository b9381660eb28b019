"""Tests for the programmatic Alembic configuration."""

from pathlib import Path

from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine

from padctl.infrastructure.database.engine import database_url
from padctl.infrastructure.database.migrations import build_config, stamp_head


class TestBuildConfig:
    def test_script_location(self) -> None:
        cfg = build_config("sqlite:///x.db")
        script = ScriptDirectory.from_config(cfg)
        assert script.get_current_head() == "001_baseline"

    def test_url_set(self) -> None:
        assert build_config("sqlite:///x.db").get_main_option("sqlalchemy.url") == "sqlite:///x.db"


class TestStampHead:
    def test_stamps_current_revision(self, db_engine: Engine, tmp_path: Path) -> None:
        db_path = tmp_path / ".padctl" / "padctl.db"
        stamp_head(db_path)
        with db_engine.connect() as conn:
            assert MigrationContext.configure(conn).get_current_revision() == "001_baseline"


class TestBaselineUpgrade:
    def test_upgrade_creates_schema_on_empty_db(self, tmp_path: Path) -> None:
        from alembic import command

        db_path = tmp_path / "empty.db"
        command.upgrade(build_config(database_url(db_path)), "head")

        engine = create_engine(database_url(db_path))
        try:
            tables = set(inspect(engine).get_table_names())
        finally:
            engine.dispose()
        assert {"applications", "profiles", "translations", "layer_translations"} <= tables
