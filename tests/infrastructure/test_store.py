"""Tests for Store transaction coordination."""

from pathlib import Path

import pytest

from padctl.config.models import StoreConfig
from padctl.config.settings import PadSettings
from padctl.domain.scope import GENERIC
from padctl.infrastructure.store import Store


class TestStoreLocation:
    def test_paths(self, store: Store, tmp_path: Path) -> None:
        assert store.root == tmp_path
        assert store.db_path == tmp_path / ".padctl" / "padctl.db"
        assert store.data_dir == tmp_path / ".padctl"
        assert store.db_path.is_file()

    def test_store_section_relocates_database(self, tmp_path: Path) -> None:
        settings = PadSettings(root=tmp_path, store=StoreConfig(dirname="db", filename="x.db"))
        s = Store(settings)
        try:
            assert s.db_path == tmp_path / "db" / "x.db"
            assert s.db_path.is_file()
        finally:
            s.close()


class TestTransactions:
    def test_commit_on_success(self, store: Store) -> None:
        with store.transaction() as txn:
            txn.upsert_translation("C(KC_Z)", GENERIC, "Undo", now="t")
        with store.read() as txn:
            row = txn.find_translation("C(KC_Z)", GENERIC)
        assert row is not None and row.label == "Undo"

    def test_rollback_on_exception(self, store: Store) -> None:
        with pytest.raises(RuntimeError):
            with store.transaction() as txn:
                txn.upsert_translation("C(KC_Z)", GENERIC, "Undo", now="t")
                txn.upsert_layer_translation(0, GENERIC, "Paint", now="t")
                raise RuntimeError("boom")
        with store.read() as txn:
            assert txn.find_translation("C(KC_Z)", GENERIC) is None
            assert txn.find_layer_translation(0, GENERIC) is None

    def test_repositories_share_connection(self, store: Store) -> None:
        with store.transaction() as txn:
            assert txn.translations is txn.translations
            txn.upsert_translation("KC_B", GENERIC, "Brush", now="t")
            assert txn.find_translation("KC_B", GENERIC) is not None
            assert txn.delete_translation("KC_B", GENERIC) is True


class TestPluginDispatch:
    def test_dispatch_without_plugins(self, store: Store) -> None:
        assert store.plugin_manager is None
        assert store.dispatch("post_seed", profile_id=None, applied=1) == []

    def test_init_plugins(self, store: Store) -> None:
        store.init_plugins()
        assert store.plugin_manager is not None
        assert store.plugin_manager.is_loaded
