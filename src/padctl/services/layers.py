"""LayerService — labels for whole layers.

Same discipline as macro labels: the profile's row, then the Generic
row, then the configured default (``"Layer {number}"``).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from sqlalchemy.exc import SQLAlchemyError

from padctl.domain.entries import layer_entries, layer_index
from padctl.domain.scope import GENERIC, GenericScope, Scope, scope_name
from padctl.services._helpers import now_iso
from padctl.services.base import BaseService
from padctl.services.reconcile import apply_entries, request_profile_id
from padctl.services.result import ServiceResult, fail
from padctl.services.telemetry import traced
from padctl.services.translation import SOURCE_GENERIC, SOURCE_PROFILE, Resolution

if TYPE_CHECKING:
    from padctl.config.models import DisplayConfig
    from padctl.infrastructure.store import StoreTransaction

SOURCE_DEFAULT = "default"


def resolve_layer_label(
    txn: StoreTransaction,
    index: int,
    scope: Scope,
    display: DisplayConfig,
) -> Resolution:
    if not isinstance(scope, GenericScope):
        row = txn.find_layer_translation(index, scope)
        if row is not None and row.label:
            return Resolution(label=row.label, source=SOURCE_PROFILE, icon=row.icon)

    row = txn.find_layer_translation(index, GENERIC)
    if row is not None and row.label:
        return Resolution(label=row.label, source=SOURCE_GENERIC, icon=row.icon)

    return Resolution(label=display.default_layer_label(index), source=SOURCE_DEFAULT)


class LayerService(BaseService):
    """Resolve and bulk-edit layer labels."""

    @traced
    def resolve_layer(self, index: Any, profile_id: int | None = None) -> ServiceResult:
        op = "resolve_layer"
        try:
            resolved_index = layer_index(index)
        except ValueError as exc:
            return fail(op, "INVALID_INPUT", str(exc))

        with self._store.read() as txn:
            scope = self._check_scope(txn, op, profile_id)
            if isinstance(scope, ServiceResult):
                return scope
            resolution = resolve_layer_label(
                txn, resolved_index, scope, self._store.settings.display
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "layer_index": resolved_index,
                "profile_id": profile_id,
                "label": resolution.label,
                "source": resolution.source,
                "icon": resolution.icon,
            },
        )

    @traced
    def reconcile_layers(self, profile_id: int | None, entries: Mapping[Any, Any]) -> ServiceResult:
        """Reconcile ``{layer_index: label | {label, icon}}`` against a scope."""
        op = "reconcile_layers"
        try:
            parsed = layer_entries(entries)
        except ValueError as exc:
            return fail(op, "INVALID_INPUT", str(exc))

        try:
            with self._store.transaction() as txn:
                scope = self._check_scope(txn, op, profile_id)
                if isinstance(scope, ServiceResult):
                    return scope
                saved, deleted = apply_entries(txn.layers, scope, parsed, now=now_iso())
        except SQLAlchemyError as exc:
            return fail(
                op,
                "RECONCILE_FAILED",
                f"Layer save failed and was rolled back: {exc}",
                detail={"profile_id": profile_id, "entries": len(parsed)},
            )

        warnings: list[str] = []
        self._dispatch_event(
            "post_layer_reconcile",
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
        """Reconcile ``{"profile_id": id, "layers": {index: label}}``."""
        op = "reconcile_layers"
        if not isinstance(payload, Mapping):
            return fail(op, "INVALID_INPUT", "Request body must be a JSON object")
        try:
            profile_id = request_profile_id(payload)
        except ValueError as exc:
            return fail(op, "INVALID_INPUT", str(exc))

        layers = payload.get("layers")
        if not isinstance(layers, Mapping):
            return fail(op, "INVALID_INPUT", "'layers' must be an object of index: label")
        return self.reconcile_layers(profile_id, layers)
