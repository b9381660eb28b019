"""Store — repository pattern with transaction coordination.

The Store is the single dependency injected into every service. It owns
the database engine and, once initialized, the plugin manager. Writes go
through :meth:`Store.transaction`, which wraps ``engine.begin()``: commit
on normal exit, rollback on any exception, so a bulk edit is never left
half-applied.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path
from typing import TYPE_CHECKING, Any

from padctl.domain.scope import Scope
from padctl.infrastructure.database.engine import database_path, init_database
from padctl.infrastructure.repositories.catalog import CatalogRepository
from padctl.infrastructure.repositories.labels import (
    LabelRow,
    LayerTranslationRepository,
    TranslationRepository,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

    from padctl.config.settings import PadSettings
    from padctl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


@dataclass
class StoreTransaction:
    """Active unit of work bound to one connection.

    Repositories are created lazily and share the connection, so every
    read and write in the block sees the same uncommitted state.
    """

    conn: Connection

    @cached_property
    def translations(self) -> TranslationRepository:
        return TranslationRepository(self.conn)

    @cached_property
    def layers(self) -> LayerTranslationRepository:
        return LayerTranslationRepository(self.conn)

    @cached_property
    def catalog(self) -> CatalogRepository:
        return CatalogRepository(self.conn)

    # ------------------------------------------------------------------
    # Macro translations
    # ------------------------------------------------------------------

    def find_translation(self, macro: str, scope: Scope) -> LabelRow | None:
        return self.translations.find(macro, scope)

    def upsert_translation(
        self,
        macro: str,
        scope: Scope,
        label: str,
        icon: str | None = None,
        *,
        now: str,
    ) -> bool:
        return self.translations.upsert(macro, scope, label, icon, now=now)

    def delete_translation(self, macro: str, scope: Scope) -> bool:
        return self.translations.delete(macro, scope)

    # ------------------------------------------------------------------
    # Layer translations
    # ------------------------------------------------------------------

    def find_layer_translation(self, layer_index: int, scope: Scope) -> LabelRow | None:
        return self.layers.find(layer_index, scope)

    def upsert_layer_translation(
        self,
        layer_index: int,
        scope: Scope,
        label: str,
        icon: str | None = None,
        *,
        now: str,
    ) -> bool:
        return self.layers.upsert(layer_index, scope, label, icon, now=now)

    def delete_layer_translation(self, layer_index: int, scope: Scope) -> bool:
        return self.layers.delete(layer_index, scope)

    def profile_exists(self, profile_id: int) -> bool:
        return self.catalog.profile_exists(profile_id)


class Store:
    """Repository encapsulating database access and plugin dispatch.

    Constructed once at CLI startup from :class:`PadSettings` and held by
    the CLI context. Services receive the Store via their
    :class:`BaseService` constructor.
    """

    def __init__(self, settings: PadSettings) -> None:
        self._settings = settings
        self._engine: Engine = init_database(
            self.root,
            dirname=settings.store.dirname,
            filename=settings.store.filename,
        )
        self._plugin_manager: PluginManager | None = None

    @property
    def root(self) -> Path:
        """The project root directory."""
        return self._settings.root

    @property
    def db_path(self) -> Path:
        return database_path(
            self.root,
            dirname=self._settings.store.dirname,
            filename=self._settings.store.filename,
        )

    @property
    def data_dir(self) -> Path:
        return self.db_path.parent

    @property
    def engine(self) -> Engine:
        """The underlying SQLAlchemy engine (for direct access when needed)."""
        return self._engine

    @property
    def settings(self) -> PadSettings:
        return self._settings

    @property
    def plugin_manager(self) -> PluginManager | None:
        """The plugin manager (None until :meth:`init_plugins`)."""
        return self._plugin_manager

    def init_plugins(self) -> None:
        """Discover entry-point and local plugins.

        Called by the CLI context when the store is first accessed and
        ``[plugins] enabled`` is true.
        """
        from padctl.plugins.manager import PluginManager

        pm = PluginManager()
        pm.discover_and_load(local_dir=self.data_dir / "plugins")
        self._plugin_manager = pm

    @contextmanager
    def transaction(self) -> Iterator[StoreTransaction]:
        """Atomic unit of work.

        Commits when the block exits normally and rolls back when it
        raises; the exception propagates to the caller.

        Usage::

            with store.transaction() as txn:
                txn.upsert_translation("C(KC_Z)", scope, "Undo", now=now)
        """
        with self._engine.begin() as conn:
            yield StoreTransaction(conn=conn)

    @contextmanager
    def read(self) -> Iterator[StoreTransaction]:
        """Read-only access on a plain connection (never commits)."""
        with self._engine.connect() as conn:
            yield StoreTransaction(conn=conn)

    def close(self) -> None:
        """Dispose of pooled connections."""
        self._engine.dispose()

    def dispatch(self, hook_name: str, **kwargs: Any) -> list[Any]:
        """Call plugin hook *hook_name*. No-op without a plugin manager."""
        if self._plugin_manager is None:
            return []
        return self._plugin_manager.call_hook(hook_name, **kwargs)
