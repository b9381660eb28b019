"""SeedService — load a YAML label catalog into one scope.

Catalog format::

    translations:
      - {macro: "C(KC_Z)", label: "Undo"}
      - {shortcut: "Ctrl+Shift+N", label: "New Layer", icon: "layers"}

``shortcut`` entries are encoded to macro text first. Entries that
cannot be encoded, or that lack a label, are skipped with a warning.
Seeding upserts, so running it twice leaves the same rows.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from importlib import resources
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from sqlalchemy.exc import SQLAlchemyError

from padctl.domain.entries import TranslationEntry
from padctl.domain.scope import scope_name
from padctl.domain.shortcuts import encode_shortcut
from padctl.services._helpers import now_iso
from padctl.services.base import BaseService
from padctl.services.reconcile import apply_entries
from padctl.services.result import ServiceResult, fail
from padctl.services.telemetry import traced

logger = logging.getLogger(__name__)

DEFAULT_CATALOG = "data/default_translations.yaml"


def read_catalog_text(path: Path | None) -> tuple[str, str]:
    """Return ``(source_name, text)`` for *path* or the bundled catalog."""
    if path is None:
        resource = resources.files("padctl").joinpath(DEFAULT_CATALOG)
        return "default", resource.read_text(encoding="utf-8")
    return str(path), path.read_text(encoding="utf-8")


def catalog_entries(data: Any) -> tuple[list[tuple[str, TranslationEntry]], list[str]]:
    """Extract ``(macro, entry)`` pairs from a decoded catalog.

    Returns the pairs plus one warning per skipped entry.

    Raises:
        ValueError: If the document is not a list of entries or a mapping
            with a ``translations`` list.
    """
    items = data.get("translations") if isinstance(data, Mapping) else data
    if not isinstance(items, list):
        msg = "Catalog must be a list of entries or contain a 'translations' list"
        raise ValueError(msg)

    entries: list[tuple[str, TranslationEntry]] = []
    warnings: list[str] = []
    for position, item in enumerate(items, start=1):
        if not isinstance(item, Mapping):
            warnings.append(f"Entry {position}: expected a mapping, skipped")
            continue

        label = str(item.get("label") or "").strip()
        icon = item.get("icon")
        if not label:
            warnings.append(f"Entry {position}: missing label, skipped")
            continue

        macro = str(item.get("macro") or "").strip()
        shortcut = item.get("shortcut")
        if not macro and shortcut:
            macro = encode_shortcut(str(shortcut)) or ""
            if not macro:
                warnings.append(f"Entry {position}: cannot encode shortcut '{shortcut}', skipped")
                continue
        if not macro:
            warnings.append(f"Entry {position}: needs 'macro' or 'shortcut', skipped")
            continue

        cleaned_icon = str(icon).strip() if icon else None
        entries.append((macro, TranslationEntry(label=label, icon=cleaned_icon or None)))
    return entries, warnings


class SeedService(BaseService):
    """Apply label catalogs."""

    @traced
    def seed(self, path: Path | None = None, profile_id: int | None = None) -> ServiceResult:
        """Upsert a catalog into the Generic scope or one profile.

        *path* defaults to ``[seed] catalog`` from config, then to the
        bundled catalog.
        """
        op = "seed"
        if path is None:
            path = self._store.settings.seed.catalog

        try:
            source, text = read_catalog_text(path)
        except OSError as exc:
            return fail(op, "NOT_FOUND", f"Cannot read catalog {path}: {exc}")

        try:
            data = YAML(typ="safe").load(text)
            entries, warnings = catalog_entries(data)
        except (YAMLError, ValueError) as exc:
            return fail(op, "INVALID_INPUT", f"Invalid catalog {source}: {exc}")

        try:
            with self._store.transaction() as txn:
                scope = self._check_scope(txn, op, profile_id)
                if isinstance(scope, ServiceResult):
                    return scope
                applied, _ = apply_entries(txn.translations, scope, entries, now=now_iso())
        except SQLAlchemyError as exc:
            return fail(op, "STORE_ERROR", f"Seeding failed and was rolled back: {exc}")

        skipped = len(warnings)
        logger.debug("Seeded %d labels from %s (%d skipped)", applied, source, skipped)
        self._dispatch_event("post_seed", {"profile_id": profile_id, "applied": applied}, warnings)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "catalog": source,
                "scope": scope_name(scope),
                "profile_id": profile_id,
                "applied": applied,
                "skipped": skipped,
            },
            warnings=warnings,
        )
