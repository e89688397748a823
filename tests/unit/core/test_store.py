"""Unit tests for DocumentStore."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import mongomock
import pytest
from django.apps import apps
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError
from structlog.testing import capture_logs

from modules.core.store import DocumentStore, get_store

pytestmark = pytest.mark.unit


@pytest.fixture()
def doc_store():
    return DocumentStore(mongomock.MongoClient(), "store_test")


class TestDocumentStore:
    def test_collections(self, doc_store):
        assert doc_store.sellers.name == "sellers"
        assert doc_store.products.name == "products"

    def test_ensure_indexes_enforces_unique_username(self, doc_store):
        doc_store.ensure_indexes()
        doc_store.sellers.insert_one({"username": "alice", "password": "h"})
        with pytest.raises(DuplicateKeyError):
            doc_store.sellers.insert_one({"username": "alice", "password": "h"})

    def test_ensure_indexes_is_idempotent(self, doc_store):
        doc_store.ensure_indexes()
        doc_store.ensure_indexes()
        assert "sellers_username_unique" in doc_store.sellers.index_information()

    def test_ping(self, doc_store):
        doc_store.ping()

    def test_close_closes_client_without_logging(self):
        # Runs from an atexit hook, after log streams may be closed.
        client = MagicMock()
        with capture_logs() as logs:
            DocumentStore(client, "db").close()
        client.close.assert_called_once_with()
        assert logs == []

    def test_from_settings_uses_configured_client(self):
        store = DocumentStore.from_settings()
        assert isinstance(store.client, mongomock.MongoClient)


class TestGetStore:
    def test_returns_core_app_store(self):
        assert get_store() is apps.get_app_config("core").store


class TestCoreConfigReady:
    @pytest.fixture()
    def core_config(self):
        config = apps.get_app_config("core")
        original = config.store
        yield config
        config.store = original

    def test_unreachable_server_does_not_abort_startup(self, core_config):
        client = MagicMock()
        client.__getitem__.return_value.__getitem__.return_value.create_index.side_effect = (
            ServerSelectionTimeoutError("127.0.0.1:1: Connection refused")
        )
        unreachable = DocumentStore(client, "db")

        with patch.object(DocumentStore, "from_settings", return_value=unreachable), \
                patch("modules.core.apps.atexit.register") as register:
            core_config.ready()

        assert core_config.store is unreachable
        register.assert_called_once_with(unreachable.close)

    def test_indexes_created_on_startup(self, core_config):
        fresh = DocumentStore(mongomock.MongoClient(), "ready_test")

        with patch.object(DocumentStore, "from_settings", return_value=fresh), \
                patch("modules.core.apps.atexit.register"):
            core_config.ready()

        assert "sellers_username_unique" in fresh.sellers.index_information()
