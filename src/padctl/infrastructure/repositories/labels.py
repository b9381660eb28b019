"""Scoped label repositories — macro and layer translations.

Both tables share one shape: a key (macro text or layer index), a
nullable ``profile_id`` scope, a label and an optional icon. Every scope
predicate goes through :func:`scope_clause` so Generic is always matched
with ``IS NULL``.

Repositories are bound to a caller-owned ``Connection``; commit and
rollback belong to the surrounding transaction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from sqlalchemy import delete, insert, or_, select, update

from padctl.domain.scope import GenericScope, Scope
from padctl.infrastructure.database.schema import layer_translations, translations

if TYPE_CHECKING:
    from sqlalchemy import Column, ColumnElement, Connection, Table


@dataclass(frozen=True)
class LabelRow:
    """One persisted label in one scope."""

    id: int
    key: Any  # str macro or int layer index
    profile_id: int | None
    label: str
    icon: str | None
    modified: str

    @property
    def is_generic(self) -> bool:
        return self.profile_id is None


def scope_clause(column: Column[Any], scope: Scope) -> ColumnElement[bool]:
    """``IS NULL`` for Generic, ``= :id`` for a profile scope."""
    if isinstance(scope, GenericScope):
        return column.is_(None)
    return column == scope.profile_id


class ScopedLabelRepository:
    """Find/upsert/delete for a scoped label table."""

    table: ClassVar[Table]
    key_name: ClassVar[str]

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    @property
    def _key(self) -> Column[Any]:
        return self.table.c[self.key_name]

    def _row(self, row: Any) -> LabelRow:
        return LabelRow(
            id=int(row.id),
            key=getattr(row, self.key_name),
            profile_id=row.profile_id,
            label=str(row.label),
            icon=row.icon,
            modified=str(row.modified),
        )

    def find(self, key: Any, scope: Scope) -> LabelRow | None:
        """The row for *key* in exactly *scope*, if any."""
        row = self._conn.execute(
            select(self.table).where(
                self._key == key,
                scope_clause(self.table.c.profile_id, scope),
            )
        ).first()
        return self._row(row) if row is not None else None

    def upsert(self, key: Any, scope: Scope, label: str, icon: str | None, *, now: str) -> bool:
        """Update the row in place or insert it. Returns True on insert."""
        existing = self.find(key, scope)
        if existing is not None:
            self._conn.execute(
                update(self.table)
                .where(self.table.c.id == existing.id)
                .values(label=label, icon=icon, modified=now)
            )
            return False

        self._conn.execute(
            insert(self.table).values(
                {
                    self.key_name: key,
                    "profile_id": scope.profile_id,
                    "label": label,
                    "icon": icon,
                    "created": now,
                    "modified": now,
                }
            )
        )
        return True

    def delete(self, key: Any, scope: Scope) -> bool:
        """Remove the row for *key* in *scope*. Returns True if one existed."""
        result = self._conn.execute(
            delete(self.table).where(
                self._key == key,
                scope_clause(self.table.c.profile_id, scope),
            )
        )
        return bool(result.rowcount)

    def list(self, scope: Scope, *, include_generic: bool = False) -> list[LabelRow]:
        """Rows in *scope*; optionally Generic rows as well (profile first)."""
        clause = scope_clause(self.table.c.profile_id, scope)
        if include_generic and not isinstance(scope, GenericScope):
            clause = or_(clause, self.table.c.profile_id.is_(None))
        rows = self._conn.execute(
            select(self.table)
            .where(clause)
            .order_by(self._key, self.table.c.profile_id.is_(None), self.table.c.id)
        ).fetchall()
        return [self._row(row) for row in rows]


class TranslationRepository(ScopedLabelRepository):
    """Labels for macro expressions, keyed by literal macro text."""

    table = translations
    key_name = "macro"


class LayerTranslationRepository(ScopedLabelRepository):
    """Labels for whole layers, keyed by zero-based layer index."""

    table = layer_translations
    key_name = "layer_index"
