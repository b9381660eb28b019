"""SQLite database engine and schema via SQLAlchemy Core."""

from padctl.infrastructure.database.engine import create_db_engine, database_path, init_database
from padctl.infrastructure.database.schema import (
    applications,
    layer_translations,
    metadata,
    profiles,
    translations,
)

__all__ = [
    "applications",
    "create_db_engine",
    "database_path",
    "init_database",
    "layer_translations",
    "metadata",
    "profiles",
    "translations",
]
