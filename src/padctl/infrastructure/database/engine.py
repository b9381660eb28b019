"""Database engine setup for SQLite with WAL mode.

The DB is stored at ``{root}/.padctl/padctl.db`` unless the ``[store]``
config section says otherwise. SQLAlchemy Core (not ORM) is used: padctl
is a short-lived CLI process with small, explicit queries.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from padctl.infrastructure.database.schema import metadata

DEFAULT_DIRNAME = ".padctl"
DEFAULT_FILENAME = "padctl.db"


def database_path(
    root: Path,
    *,
    dirname: str = DEFAULT_DIRNAME,
    filename: str = DEFAULT_FILENAME,
) -> Path:
    """Location of the database file for a project *root*."""
    return root / dirname / filename


def database_url(db_path: Path) -> str:
    return f"sqlite:///{db_path}"


def set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
    """Per-connection pragmas: WAL journal and enforced foreign keys."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(db_path: Path) -> Engine:
    """Create a SQLite engine with WAL mode and foreign keys enabled."""
    engine = create_engine(database_url(db_path), echo=False)
    event.listen(engine, "connect", set_sqlite_pragma)
    return engine


def init_database(
    root: Path,
    *,
    dirname: str = DEFAULT_DIRNAME,
    filename: str = DEFAULT_FILENAME,
) -> Engine:
    """Initialize the padctl database under *root*.

    Creates the data directory (with ``backups/`` and ``plugins/``) and
    all tables and indexes from :data:`schema.metadata`.

    Idempotent — safe to call on an existing store.

    Returns the engine ready for use.
    """
    data_dir = root / dirname
    data_dir.mkdir(parents=True, exist_ok=True)
    (data_dir / "backups").mkdir(exist_ok=True)
    (data_dir / "plugins").mkdir(exist_ok=True)

    engine = create_db_engine(data_dir / filename)
    metadata.create_all(engine)
    return engine
