"""TranslationService — label resolution and single-row edits.

Resolution is a strict priority chain: the profile's own row, then the
Generic row, then the humanized macro. Labels are never blended.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from sqlalchemy.exc import SQLAlchemyError

from padctl.domain import humanize as humanizer
from padctl.domain import macros
from padctl.domain.keys import KEY_PREFIX, KeyCategory, list_symbols
from padctl.domain.modifiers import display_words, in_display_order
from padctl.domain.scope import GENERIC, GenericScope, Scope, scope_name
from padctl.domain.shortcuts import encode_shortcut
from padctl.services._helpers import now_iso
from padctl.services.base import BaseService
from padctl.services.result import ServiceResult, fail
from padctl.services.telemetry import traced

if TYPE_CHECKING:
    from padctl.infrastructure.repositories.labels import LabelRow
    from padctl.infrastructure.store import StoreTransaction

SOURCE_PROFILE = "profile"
SOURCE_GENERIC = "generic"
SOURCE_HUMANIZED = "humanized"


@dataclass(frozen=True)
class Resolution:
    """A resolved label and the tier that produced it."""

    label: str | None
    source: str | None
    icon: str | None = None


def resolve_label(txn: StoreTransaction, macro: str, scope: Scope) -> Resolution:
    """Resolve *macro* in *scope*: profile row, Generic row, humanizer."""
    key = macro.strip()
    if not isinstance(scope, GenericScope):
        row = txn.find_translation(key, scope)
        if row is not None and row.label:
            return Resolution(label=row.label, source=SOURCE_PROFILE, icon=row.icon)

    row = txn.find_translation(key, GENERIC)
    if row is not None and row.label:
        return Resolution(label=row.label, source=SOURCE_GENERIC, icon=row.icon)

    label = humanizer.humanize(key)
    return Resolution(label=label, source=SOURCE_HUMANIZED if label is not None else None)


def _row_dict(row: LabelRow) -> dict[str, Any]:
    return {
        "macro": row.key,
        "scope": "generic" if row.is_generic else "profile",
        "profile_id": row.profile_id,
        "label": row.label,
        "icon": row.icon,
        "humanized": humanizer.humanize(row.key),
        "modified": row.modified,
    }


class TranslationService(BaseService):
    """Macro label operations.

    ``humanize``, ``parse`` and ``list_keys`` are pure and callable on the
    class without a store.
    """

    @staticmethod
    def humanize(macro: str) -> ServiceResult:
        """Humanize *macro*; ``label`` is None for empty or no-op text."""
        return ServiceResult(
            ok=True,
            op="humanize",
            data={"macro": macro, "label": humanizer.humanize(macro)},
        )

    @staticmethod
    def parse(macro: str) -> ServiceResult:
        """Break *macro* into modifiers and base key, plus its canonical form."""
        op = "parse"
        layer = humanizer.parse_layer_action(macro)
        if layer is not None:
            return ServiceResult(
                ok=True,
                op=op,
                data={
                    "macro": macro,
                    "recognized": True,
                    "kind": "layer",
                    "action": layer.action,
                    "layer_index": layer.layer_index,
                    "label": layer.label,
                },
            )

        expr = macros.parse(macro)
        if expr is None:
            return ServiceResult(
                ok=True,
                op=op,
                data={"macro": macro, "recognized": False, "kind": "none"},
            )

        ordered = in_display_order(expr.mods)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "macro": macro,
                "recognized": True,
                "kind": "key",
                "modifiers": [m.value for m in ordered],
                "modifier_names": display_words(expr.mods),
                "key": expr.key,
                "canonical": expr.serialize(),
                "label": humanizer.humanize(macro),
            },
        )

    @staticmethod
    def encode(shortcut: str) -> ServiceResult:
        """Encode ``"Ctrl+Shift+M"``-style text as canonical macro text."""
        op = "encode"
        macro = encode_shortcut(shortcut)
        if macro is None:
            return fail(
                op,
                "INVALID_INPUT",
                f"Cannot encode '{shortcut}' as a macro",
                detail={"shortcut": shortcut},
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"shortcut": shortcut, "macro": macro, "label": humanizer.humanize(macro)},
        )

    @staticmethod
    def list_keys(category: str | None = None) -> ServiceResult:
        op = "list_keys"
        selected: KeyCategory | None = None
        if category is not None:
            try:
                selected = KeyCategory(category.lower())
            except ValueError:
                valid = ", ".join(c.value for c in KeyCategory)
                return fail(
                    op,
                    "INVALID_INPUT",
                    f"Unknown key category '{category}' (expected one of: {valid})",
                )
        items = [
            {
                "key": symbol.key_id,
                "macro": f"{KEY_PREFIX}{symbol.key_id}",
                "display": symbol.display_name,
                "category": symbol.category.value,
            }
            for symbol in list_symbols(selected)
        ]
        return ServiceResult(ok=True, op=op, data={"count": len(items), "items": items})

    @traced
    def resolve(self, macro: str, profile_id: int | None = None) -> ServiceResult:
        """Resolve the display label for *macro* in a scope.

        ``source`` is ``"profile"``, ``"generic"``, ``"humanized"``, or
        None when nothing applies (empty or no-op macro).
        """
        op = "resolve"
        with self._store.read() as txn:
            scope = self._check_scope(txn, op, profile_id)
            if isinstance(scope, ServiceResult):
                return scope
            resolution = resolve_label(txn, macro, scope)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "macro": macro.strip(),
                "profile_id": profile_id,
                "label": resolution.label,
                "source": resolution.source,
                "icon": resolution.icon,
            },
        )

    @traced
    def list_translations(self, profile_id: int | None = None) -> ServiceResult:
        """Rows visible to a scope: every Generic row plus the profile's own."""
        op = "list_translations"
        with self._store.read() as txn:
            scope = self._check_scope(txn, op, profile_id)
            if isinstance(scope, ServiceResult):
                return scope
            rows = txn.translations.list(scope, include_generic=True)

        items = [_row_dict(row) for row in rows]
        return ServiceResult(
            ok=True,
            op=op,
            data={"profile_id": profile_id, "count": len(items), "items": items},
        )

    @traced
    def set_translation(
        self,
        macro: str,
        label: str,
        icon: str | None = None,
        profile_id: int | None = None,
    ) -> ServiceResult:
        """Upsert one translation. An empty label deletes the row instead."""
        op = "set_translation"
        key = macro.strip()
        if not key:
            return fail(op, "INVALID_INPUT", "Macro must not be empty")

        text = label.strip()
        cleaned_icon = icon.strip() if icon else None
        try:
            with self._store.transaction() as txn:
                scope = self._check_scope(txn, op, profile_id)
                if isinstance(scope, ServiceResult):
                    return scope
                if not text:
                    removed = txn.delete_translation(key, scope)
                    action = "deleted" if removed else "unchanged"
                else:
                    inserted = txn.upsert_translation(
                        key, scope, text, cleaned_icon or None, now=now_iso()
                    )
                    action = "created" if inserted else "updated"
        except SQLAlchemyError as exc:
            return fail(op, "STORE_ERROR", f"Failed to save translation: {exc}")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "macro": key,
                "scope": scope_name(scope),
                "profile_id": profile_id,
                "label": text or None,
                "icon": cleaned_icon or None,
                "action": action,
            },
        )

    @traced
    def delete_translation(self, macro: str, profile_id: int | None = None) -> ServiceResult:
        op = "delete_translation"
        key = macro.strip()
        try:
            with self._store.transaction() as txn:
                scope = self._check_scope(txn, op, profile_id)
                if isinstance(scope, ServiceResult):
                    return scope
                removed = txn.delete_translation(key, scope)
        except SQLAlchemyError as exc:
            return fail(op, "STORE_ERROR", f"Failed to delete translation: {exc}")

        if not removed:
            return fail(
                op,
                "NOT_FOUND",
                f"No {scope_name(scope)} translation for '{key}'",
                detail={"macro": key, "profile_id": profile_id},
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"macro": key, "scope": scope_name(scope), "profile_id": profile_id},
        )
