"""Baseline schema — applications, profiles, and scoped translations.

Revision ID: 001_baseline
Revises: None
Create Date: 2026-10-19

Fresh databases are created from ``schema.metadata`` and stamped at head;
this revision applies only to databases that predate version tracking.
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision: str = "001_baseline"
down_revision: str | None = None
branch_labels: tuple[str, ...] | None = None
depends_on: tuple[str, ...] | None = None


def upgrade() -> None:
    op.create_table(
        "applications",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False, unique=True),
        sa.Column("created", sa.Text, nullable=False),
    )

    op.create_table(
        "profiles",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "application_id",
            sa.Integer,
            sa.ForeignKey("applications.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("layout", sa.Text),
        sa.Column("created", sa.Text, nullable=False),
        sa.Column("modified", sa.Text, nullable=False),
        sa.UniqueConstraint("application_id", "name"),
    )
    op.create_index("ix_profiles_application", "profiles", ["application_id"])

    op.create_table(
        "translations",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("macro", sa.Text, nullable=False),
        sa.Column("profile_id", sa.Integer, sa.ForeignKey("profiles.id", ondelete="CASCADE")),
        sa.Column("label", sa.Text, nullable=False),
        sa.Column("icon", sa.Text),
        sa.Column("created", sa.Text, nullable=False),
        sa.Column("modified", sa.Text, nullable=False),
    )
    op.create_index(
        "ux_translations_scope",
        "translations",
        ["macro", sa.text("coalesce(profile_id, 0)")],
        unique=True,
    )
    op.create_index("ix_translations_profile", "translations", ["profile_id"])

    op.create_table(
        "layer_translations",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("layer_index", sa.Integer, nullable=False),
        sa.Column("profile_id", sa.Integer, sa.ForeignKey("profiles.id", ondelete="CASCADE")),
        sa.Column("label", sa.Text, nullable=False),
        sa.Column("icon", sa.Text),
        sa.Column("created", sa.Text, nullable=False),
        sa.Column("modified", sa.Text, nullable=False),
    )
    op.create_index(
        "ux_layer_translations_scope",
        "layer_translations",
        ["layer_index", sa.text("coalesce(profile_id, 0)")],
        unique=True,
    )


def downgrade() -> None:
    op.drop_table("layer_translations")
    op.drop_table("translations")
    op.drop_table("profiles")
    op.drop_table("applications")
