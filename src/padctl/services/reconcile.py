"""ReconcileService — apply a bulk label edit as one atomic diff.

For each entry: an empty label deletes the scope's row (counted in
``deleted`` only when a row existed); a non-empty label updates the row
in place or inserts it (counted in ``saved`` either way). The batch runs
inside one transaction, so a store failure rolls back every prior write.

Request shape::

    {"profile_id": 5, "translations": {"C(KC_Z)": {"label": ""},
                                       "KC_B": "Brush Tool"}}

``scope`` is accepted as an alias for ``profile_id``; a missing or null
id targets the Generic scope.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from sqlalchemy.exc import SQLAlchemyError

from padctl.domain.entries import TranslationEntry, macro_entries
from padctl.domain.scope import Scope, scope_name
from padctl.services._helpers import now_iso, parse_profile_ref
from padctl.services.base import BaseService
from padctl.services.result import ServiceResult, fail
from padctl.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from padctl.infrastructure.repositories.labels import ScopedLabelRepository

logger = logging.getLogger(__name__)


def apply_entries(
    repo: ScopedLabelRepository,
    scope: Scope,
    entries: Sequence[tuple[Any, TranslationEntry]],
    *,
    now: str,
) -> tuple[int, int]:
    """Apply *entries* to *repo* in *scope*. Returns ``(saved, deleted)``."""
    saved = 0
    deleted = 0
    for key, entry in entries:
        if entry.is_removal:
            if repo.delete(key, scope):
                deleted += 1
        else:
            repo.upsert(key, scope, entry.label, entry.icon, now=now)
            saved += 1
    return saved, deleted


def request_profile_id(payload: Mapping[str, Any]) -> int | None:
    """The target profile of a bulk request (``profile_id`` or ``scope``).

    Raises:
        ValueError: If the id is present but not a positive integer.
    """
    raw = payload.get("profile_id", payload.get("scope"))
    return parse_profile_ref(raw)


class ReconcileService(BaseService):
    """Bulk insert/update/delete of macro translations."""

    @traced
    def reconcile(self, profile_id: int | None, entries: Mapping[str, Any]) -> ServiceResult:
        """Reconcile ``{macro: label | {label, icon}}`` against a scope.

        *profile_id* None means Generic. Every value is validated before
        the first write; an unknown profile fails with NOT_FOUND.
        """
        op = "reconcile"
        try:
            parsed = macro_entries(entries)
        except ValueError as exc:
            return fail(op, "INVALID_INPUT", str(exc))

        try:
            with self._store.transaction() as txn:
                scope = self._check_scope(txn, op, profile_id)
                if isinstance(scope, ServiceResult):
                    return scope
                with trace_span("apply_entries") as span:
                    saved, deleted = apply_entries(
                        txn.translations, scope, parsed, now=now_iso()
                    )
                    if span:
                        span.annotate("entries", len(parsed))
        except SQLAlchemyError as exc:
            logger.warning("Reconcile rolled back for %s: %s", profile_id, exc)
            return fail(
                op,
                "RECONCILE_FAILED",
                f"Bulk save failed and was rolled back: {exc}",
                detail={"profile_id": profile_id, "entries": len(parsed)},
            )

        logger.debug("Reconciled %s: saved=%d deleted=%d", scope, saved, deleted)
        warnings: list[str] = []
        self._dispatch_event(
            "post_reconcile",
            {"profile_id": profile_id, "saved": saved, "deleted": deleted},
            warnings,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "success": True,
                "scope": scope_name(scope),
                "profile_id": profile_id,
                "saved": saved,
                "deleted": deleted,
            },
            warnings=warnings,
        )

    def reconcile_request(self, payload: Any) -> ServiceResult:
        """Reconcile a decoded bulk request body (see module docstring)."""
        op = "reconcile"
        if not isinstance(payload, Mapping):
            return fail(op, "INVALID_INPUT", "Request body must be a JSON object")
        try:
            profile_id = request_profile_id(payload)
        except ValueError as exc:
            return fail(op, "INVALID_INPUT", str(exc))

        translations = payload.get("translations")
        if not isinstance(translations, Mapping):
            return fail(op, "INVALID_INPUT", "'translations' must be an object of macro: label")
        return self.reconcile(profile_id, translations)
