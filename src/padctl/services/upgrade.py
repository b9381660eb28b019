"""UpgradeService — database migration with Alembic.

Pipeline: BACKUP → MIGRATE → REPORT
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Any

from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import inspect

from padctl.infrastructure.database.engine import database_url
from padctl.infrastructure.database.migrations import build_config
from padctl.services._helpers import now_compact
from padctl.services.base import BaseService
from padctl.services.result import ServiceResult, fail

logger = logging.getLogger(__name__)

BACKUP_PREFIX = "padctl-"


class UpgradeService(BaseService):
    """Handles database schema migrations via Alembic."""

    def _db_url(self) -> str:
        return database_url(self._store.db_path)

    def _tables_exist(self) -> bool:
        """Whether core tables exist (a store created before version tracking)."""
        return "translations" in inspect(self._store.engine).get_table_names()

    def backup(self) -> Path:
        """Copy the database into ``backups/`` and prune old copies."""
        backup_dir = self._store.data_dir / "backups"
        backup_dir.mkdir(parents=True, exist_ok=True)
        backup_path = backup_dir / f"{BACKUP_PREFIX}{now_compact()}.db"
        shutil.copy2(self._store.db_path, backup_path)

        keep = self._store.settings.store.backup_max_count
        backups = sorted(backup_dir.glob(f"{BACKUP_PREFIX}*.db"))
        for old in backups[: max(len(backups) - keep, 0)]:
            old.unlink(missing_ok=True)
        return backup_path

    def check_pending(self) -> ServiceResult:
        """List pending migrations without applying."""
        op = "upgrade"
        try:
            cfg = build_config(self._db_url())
            script = ScriptDirectory.from_config(cfg)
            head = script.get_current_head()

            with self._store.engine.connect() as conn:
                current = MigrationContext.configure(conn).get_current_revision()

            # Walk from head down to the current revision.
            pending: list[dict[str, Any]] = []
            if current != head and head is not None:
                rev_obj = script.get_revision(head)
                while rev_obj is not None and rev_obj.revision != current:
                    pending.append({"revision": rev_obj.revision, "description": rev_obj.doc or ""})
                    down = rev_obj.down_revision
                    if down is None:
                        break
                    rev_obj = script.get_revision(str(down))
        except Exception as exc:
            return fail(op, "CHECK_FAILED", f"Failed to check migrations: {exc}")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "pending_count": len(pending),
                "pending": pending,
                "current": current,
                "head": head,
            },
        )

    def apply(self) -> ServiceResult:
        """BACKUP → MIGRATE → REPORT."""
        op = "upgrade"
        check_result = self.check_pending()
        if not check_result.ok:
            return check_result

        pending_count = check_result.data["pending_count"]
        if pending_count == 0:
            return ServiceResult(
                ok=True,
                op=op,
                data={
                    "applied_count": 0,
                    "current": check_result.data["head"],
                    "message": "Database is already up to date",
                },
            )

        try:
            backup_path = self.backup()
        except OSError as exc:
            return fail(op, "BACKUP_FAILED", f"Backup failed: {exc}")

        try:
            cfg = build_config(self._db_url())
            if check_result.data["current"] is None and self._tables_exist():
                # Tables created by init_database without version tracking.
                command.stamp(cfg, "head")
            else:
                command.upgrade(cfg, "head")
        except Exception as exc:
            return fail(
                op,
                "MIGRATION_FAILED",
                f"Migration failed: {exc}. Backup at: {backup_path}",
                detail={"backup_path": str(backup_path)},
            )

        logger.debug("Upgraded %s to %s", self._store.db_path, check_result.data["head"])
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "applied_count": pending_count,
                "current": check_result.data["head"],
                "backup_path": str(backup_path),
            },
        )

    def stamp_current(self) -> ServiceResult:
        """Stamp the DB as at the current head (for freshly created DBs)."""
        op = "upgrade"
        try:
            cfg = build_config(self._db_url())
            command.stamp(cfg, "head")
            head = ScriptDirectory.from_config(cfg).get_current_head()
        except Exception as exc:
            return fail(op, "STAMP_FAILED", f"Failed to stamp database: {exc}")
        return ServiceResult(ok=True, op=op, data={"stamped": True, "current": head})
