"""InitService — create a padctl project directory.

Writes a sparse ``padctl.toml``, creates and stamps the database, and
optionally seeds the bundled Generic labels. Running it again on an
existing project keeps the config and existing rows.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError

from padctl.config.discovery import CONFIG_FILENAME
from padctl.infrastructure.database.migrations import stamp_head
from padctl.infrastructure.store import Store
from padctl.services.result import ServiceResult, fail
from padctl.services.seed import SeedService

if TYPE_CHECKING:
    from padctl.config.settings import PadSettings

_CONFIG_TEMPLATE = """\
# padctl configuration. Only overrides belong here.

[display]
placeholder = "{placeholder}"
layer_label = "{layer_label}"
"""


class InitService:
    """Project initialization. Needs no existing store."""

    @staticmethod
    def init_project(
        root: Path,
        *,
        settings: PadSettings,
        seed: bool = True,
    ) -> ServiceResult:
        op = "init"
        root = root.resolve()
        settings = settings.model_copy(update={"root": root})
        warnings: list[str] = []

        config_path = root / CONFIG_FILENAME
        try:
            root.mkdir(parents=True, exist_ok=True)
            config_created = not config_path.exists()
            if config_created:
                config_path.write_text(
                    _CONFIG_TEMPLATE.format(
                        placeholder=settings.display.placeholder,
                        layer_label=settings.display.layer_label,
                    ),
                    encoding="utf-8",
                )
        except OSError as exc:
            return fail(op, "STORE_ERROR", f"Cannot write {config_path}: {exc}")

        try:
            store = Store(settings)
        except (OSError, SQLAlchemyError) as exc:
            return fail(op, "STORE_ERROR", f"Cannot create database: {exc}")

        try:
            try:
                stamp_head(store.db_path)
            except Exception as exc:
                return fail(op, "STAMP_FAILED", f"Failed to stamp database: {exc}")

            seeded = 0
            if seed:
                seed_result = SeedService(store).seed()
                if seed_result.ok:
                    seeded = seed_result.data["applied"]
                    warnings.extend(seed_result.warnings)
                else:
                    message = seed_result.error.message if seed_result.error else "unknown"
                    warnings.append(f"Seeding skipped: {message}")
        finally:
            store.close()

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "root": str(root),
                "config": str(config_path),
                "config_created": config_created,
                "database": str(store.db_path),
                "seeded": seeded,
            },
            warnings=warnings,
        )
