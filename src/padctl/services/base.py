"""BaseService — foundation for all padctl services.

Every service receives a :class:`Store` at construction time and owns
its transaction boundaries via ``self._store.transaction()``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from padctl.domain.scope import Scope, scope_for
from padctl.services.result import ServiceResult, fail

if TYPE_CHECKING:
    from padctl.infrastructure.store import Store, StoreTransaction

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class ReconcileService(BaseService):
            def reconcile(self, profile_id, entries) -> ServiceResult:
                with self._store.transaction() as txn:
                    ...
    """

    def __init__(self, store: Store) -> None:
        self._store = store

    def _check_scope(
        self,
        txn: StoreTransaction,
        op: str,
        profile_id: int | None,
    ) -> Scope | ServiceResult:
        """Resolve *profile_id* to a Scope, or a NOT_FOUND result.

        An unknown profile is never coerced to Generic.
        """
        if profile_id is not None and not txn.profile_exists(profile_id):
            return fail(
                op,
                "NOT_FOUND",
                f"No profile with id {profile_id}",
                detail={"profile_id": profile_id},
            )
        return scope_for(profile_id)

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Fire a plugin hook after commit.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        try:
            self._store.dispatch(hook_name, **payload)
        except Exception:
            logger.debug("Plugin hook %s failed", hook_name, exc_info=True)
            warnings.append(f"Plugin hook {hook_name} failed")
