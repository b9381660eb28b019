"""SQLAlchemy Core table definitions for the padctl database.

Scope is stored as a nullable ``profile_id``: NULL is the Generic scope.
Uniqueness per scope uses expression indexes over
``coalesce(profile_id, 0)`` because SQLite treats NULLs as distinct in
ordinary unique constraints. Profile ids start at 1, so 0 never collides.
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    UniqueConstraint,
    func,
)

metadata = MetaData()

applications = Table(
    "applications",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False, unique=True),
    Column("created", Text, nullable=False),
)

profiles = Table(
    "profiles",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "application_id",
        Integer,
        ForeignKey("applications.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("name", Text, nullable=False),
    Column("layout", Text),  # VIA layout JSON
    Column("created", Text, nullable=False),
    Column("modified", Text, nullable=False),
    UniqueConstraint("application_id", "name"),
)

translations = Table(
    "translations",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("macro", Text, nullable=False),  # literal macro text, not canonicalized
    Column("profile_id", Integer, ForeignKey("profiles.id", ondelete="CASCADE")),
    Column("label", Text, nullable=False),
    Column("icon", Text),
    Column("created", Text, nullable=False),
    Column("modified", Text, nullable=False),
)

layer_translations = Table(
    "layer_translations",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("layer_index", Integer, nullable=False),
    Column("profile_id", Integer, ForeignKey("profiles.id", ondelete="CASCADE")),
    Column("label", Text, nullable=False),
    Column("icon", Text),
    Column("created", Text, nullable=False),
    Column("modified", Text, nullable=False),
)

# ---------------------------------------------------------------------------
# Indexes
# ---------------------------------------------------------------------------

Index(
    "ux_translations_scope",
    translations.c.macro,
    func.coalesce(translations.c.profile_id, 0),
    unique=True,
)
Index(
    "ux_layer_translations_scope",
    layer_translations.c.layer_index,
    func.coalesce(layer_translations.c.profile_id, 0),
    unique=True,
)
Index("ix_translations_profile", translations.c.profile_id)
Index("ix_profiles_application", profiles.c.application_id)
