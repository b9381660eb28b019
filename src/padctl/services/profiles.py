"""ProfileService — applications, profiles, and their pad layouts.

A profile is the concrete ``Profile(id)`` translation scope. It belongs
to an application and may carry the layout exported from the pad's
configurator, which :meth:`ProfileService.describe_layer` labels slot by
slot.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from padctl.domain import humanize as humanizer
from padctl.domain.entries import layer_index
from padctl.domain.layout import PadLayout, parse_layout
from padctl.domain.scope import ProfileScope
from padctl.services._helpers import now_iso
from padctl.services.base import BaseService
from padctl.services.layers import resolve_layer_label
from padctl.services.result import ServiceResult, fail
from padctl.services.telemetry import trace_span, traced
from padctl.services.translation import resolve_label

if TYPE_CHECKING:
    from padctl.infrastructure.store import StoreTransaction

logger = logging.getLogger(__name__)


class ProfileService(BaseService):
    """Manage applications and profiles."""

    @traced
    def add_application(self, name: str) -> ServiceResult:
        op = "add_application"
        cleaned = name.strip()
        if not cleaned:
            return fail(op, "INVALID_INPUT", "Application name must not be empty")

        try:
            with self._store.transaction() as txn:
                if txn.catalog.find_application(cleaned) is not None:
                    return fail(
                        op,
                        "CONFLICT",
                        f"Application '{cleaned}' already exists",
                        detail={"name": cleaned},
                    )
                app_id = txn.catalog.add_application(cleaned, now=now_iso())
        except SQLAlchemyError as exc:
            return fail(op, "STORE_ERROR", f"Failed to add application: {exc}")

        return ServiceResult(ok=True, op=op, data={"id": app_id, "name": cleaned})

    @traced
    def list_applications(self) -> ServiceResult:
        with self._store.read() as txn:
            items = txn.catalog.list_applications()
        return ServiceResult(
            ok=True,
            op="list_applications",
            data={"count": len(items), "items": items},
        )

    @traced
    def add_profile(
        self,
        application: str | int,
        name: str,
        layout: str | None = None,
    ) -> ServiceResult:
        """Create a profile under *application* (id or name)."""
        op = "add_profile"
        cleaned = name.strip()
        if not cleaned:
            return fail(op, "INVALID_INPUT", "Profile name must not be empty")

        layout_json: str | None = None
        if layout is not None:
            try:
                layout_json = parse_layout(layout).to_json()
            except ValueError as exc:
                return fail(op, "INVALID_INPUT", str(exc))

        try:
            with self._store.transaction() as txn:
                app = txn.catalog.find_application(application)
                if app is None:
                    return fail(
                        op,
                        "NOT_FOUND",
                        f"No application '{application}'",
                        detail={"application": str(application)},
                    )
                profile_id = txn.catalog.add_profile(
                    app["id"], cleaned, layout=layout_json, now=now_iso()
                )
        except IntegrityError:
            return fail(
                op,
                "CONFLICT",
                f"Profile '{cleaned}' already exists for '{application}'",
                detail={"application": str(application), "name": cleaned},
            )
        except SQLAlchemyError as exc:
            return fail(op, "STORE_ERROR", f"Failed to add profile: {exc}")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": profile_id,
                "name": cleaned,
                "application": app["name"],
                "application_id": app["id"],
                "has_layout": layout_json is not None,
            },
        )

    @traced
    def list_profiles(self, application: str | int | None = None) -> ServiceResult:
        op = "list_profiles"
        with self._store.read() as txn:
            application_id: int | None = None
            if application is not None:
                app = txn.catalog.find_application(application)
                if app is None:
                    return fail(op, "NOT_FOUND", f"No application '{application}'")
                application_id = app["id"]
            items = txn.catalog.list_profiles(application_id)
        for item in items:
            item["has_layout"] = bool(item["has_layout"])
        return ServiceResult(ok=True, op=op, data={"count": len(items), "items": items})

    @traced
    def remove_profile(self, profile_id: int) -> ServiceResult:
        """Delete a profile together with its translations."""
        op = "remove_profile"
        try:
            with self._store.transaction() as txn:
                profile = txn.catalog.get_profile(profile_id)
                if profile is None:
                    return fail(op, "NOT_FOUND", f"No profile with id {profile_id}")
                removed = txn.catalog.delete_profile(profile_id)
        except SQLAlchemyError as exc:
            return fail(op, "STORE_ERROR", f"Failed to remove profile: {exc}")

        logger.debug("Removed profile %d with %d translations", profile_id, removed)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": profile_id,
                "name": profile["name"],
                "translations_removed": removed,
            },
        )

    @traced
    def import_layout(self, profile_id: int, layout: str) -> ServiceResult:
        """Validate and store a layout export on a profile."""
        op = "import_layout"
        try:
            parsed = parse_layout(layout)
        except ValueError as exc:
            return fail(op, "INVALID_INPUT", str(exc))

        try:
            with self._store.transaction() as txn:
                if not txn.profile_exists(profile_id):
                    return fail(op, "NOT_FOUND", f"No profile with id {profile_id}")
                txn.catalog.set_layout(profile_id, parsed.to_json(), now=now_iso())
        except SQLAlchemyError as exc:
            return fail(op, "STORE_ERROR", f"Failed to store layout: {exc}")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": profile_id,
                "name": parsed.name,
                "layers": parsed.layer_count,
                "encoders": len(parsed.encoders),
            },
        )

    @traced
    def describe_layer(self, profile_id: int, layer: Any = 0) -> ServiceResult:
        """Label every key slot and encoder turn of one layout layer."""
        op = "describe_layer"
        try:
            index = layer_index(layer)
        except ValueError as exc:
            return fail(op, "INVALID_INPUT", str(exc))

        display = self._store.settings.display
        with self._store.read() as txn:
            profile = txn.catalog.get_profile(profile_id)
            if profile is None:
                return fail(op, "NOT_FOUND", f"No profile with id {profile_id}")
            if profile["layout"] is None:
                return fail(
                    op,
                    "NOT_FOUND",
                    f"Profile {profile_id} has no layout; run 'profile import-layout' first",
                )
            pad = PadLayout.model_validate_json(profile["layout"])
            if index >= pad.layer_count:
                return fail(
                    op,
                    "INVALID_INPUT",
                    f"Layer {index} out of range (layout has {pad.layer_count})",
                )

            scope = ProfileScope(profile_id=profile_id)
            with trace_span("resolve_keys"):
                keys = [
                    self._describe_slot(txn, scope, slot, macro)
                    for slot, macro in enumerate(pad.keys(index))
                ]
                encoders = [
                    {
                        "index": slot,
                        "ccw": self._describe_slot(txn, scope, slot, ccw),
                        "cw": self._describe_slot(txn, scope, slot, cw),
                    }
                    for slot, (ccw, cw) in enumerate(pad.encoder_turns(index))
                ]
            layer_label = resolve_layer_label(txn, index, scope, display)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "profile_id": profile_id,
                "profile": profile["name"],
                "application": profile["application"],
                "layer_index": index,
                "layer_label": layer_label.label,
                "layer_source": layer_label.source,
                "keys": keys,
                "encoders": encoders,
            },
        )

    @staticmethod
    def _describe_slot(
        txn: StoreTransaction,
        scope: ProfileScope,
        slot: int,
        macro: str,
    ) -> dict[str, Any]:
        resolution = resolve_label(txn, macro, scope)
        return {
            "index": slot,
            "macro": macro,
            "humanized": humanizer.humanize(macro),
            "label": resolution.label,
            "source": resolution.source,
            "icon": resolution.icon,
        }
