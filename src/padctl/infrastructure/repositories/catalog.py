"""Applications and profiles — the concrete scopes translations bind to."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, func, insert, select, update

from padctl.infrastructure.database.schema import applications, profiles, translations

if TYPE_CHECKING:
    from sqlalchemy import Connection


class CatalogRepository:
    """SQL for applications and their profiles on a caller-owned connection."""

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    # ------------------------------------------------------------------
    # Applications
    # ------------------------------------------------------------------

    def add_application(self, name: str, *, now: str) -> int:
        result = self._conn.execute(insert(applications).values(name=name, created=now))
        return int(result.inserted_primary_key[0])

    def find_application(self, ref: str | int) -> dict[str, Any] | None:
        """Look up an application by id, or by exact name."""
        stmt = select(applications)
        if isinstance(ref, int) or str(ref).isdigit():
            stmt = stmt.where(applications.c.id == int(ref))
        else:
            stmt = stmt.where(applications.c.name == ref)
        row = self._conn.execute(stmt).mappings().first()
        return dict(row) if row is not None else None

    def list_applications(self) -> list[dict[str, Any]]:
        count = (
            select(func.count(profiles.c.id))
            .where(profiles.c.application_id == applications.c.id)
            .scalar_subquery()
        )
        rows = self._conn.execute(
            select(applications, count.label("profile_count")).order_by(applications.c.name)
        ).mappings()
        return [dict(row) for row in rows]

    # ------------------------------------------------------------------
    # Profiles
    # ------------------------------------------------------------------

    def add_profile(
        self,
        application_id: int,
        name: str,
        *,
        layout: str | None,
        now: str,
    ) -> int:
        result = self._conn.execute(
            insert(profiles).values(
                application_id=application_id,
                name=name,
                layout=layout,
                created=now,
                modified=now,
            )
        )
        return int(result.inserted_primary_key[0])

    def get_profile(self, profile_id: int) -> dict[str, Any] | None:
        row = (
            self._conn.execute(
                select(profiles, applications.c.name.label("application"))
                .join(applications, applications.c.id == profiles.c.application_id)
                .where(profiles.c.id == profile_id)
            )
            .mappings()
            .first()
        )
        return dict(row) if row is not None else None

    def profile_exists(self, profile_id: int) -> bool:
        row = self._conn.execute(select(profiles.c.id).where(profiles.c.id == profile_id)).first()
        return row is not None

    def list_profiles(self, application_id: int | None = None) -> list[dict[str, Any]]:
        stmt = (
            select(
                profiles.c.id,
                profiles.c.name,
                profiles.c.application_id,
                applications.c.name.label("application"),
                profiles.c.layout.is_not(None).label("has_layout"),
                profiles.c.modified,
            )
            .join(applications, applications.c.id == profiles.c.application_id)
            .order_by(applications.c.name, profiles.c.name)
        )
        if application_id is not None:
            stmt = stmt.where(profiles.c.application_id == application_id)
        return [dict(row) for row in self._conn.execute(stmt).mappings()]

    def set_layout(self, profile_id: int, layout: str, *, now: str) -> None:
        self._conn.execute(
            update(profiles).where(profiles.c.id == profile_id).values(layout=layout, modified=now)
        )

    def delete_profile(self, profile_id: int) -> int:
        """Delete a profile. Returns the number of its translations removed."""
        removed = self._conn.execute(
            select(func.count(translations.c.id)).where(translations.c.profile_id == profile_id)
        ).scalar_one()
        self._conn.execute(delete(profiles).where(profiles.c.id == profile_id))
        return int(removed)
