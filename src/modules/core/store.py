"""MongoDB document store.

A single ``DocumentStore`` owns the process-wide ``MongoClient`` (and
therefore its connection pool).  It is built once by
``CoreConfig.ready()`` and handed to repositories; nothing else opens
connections.
"""

from __future__ import annotations

from typing import Any

import structlog
from django.apps import apps
from django.conf import settings
from django.utils.module_loading import import_string
from pymongo import ASCENDING
from pymongo.collection import Collection

logger = structlog.get_logger(__name__)

SELLERS_COLLECTION = "sellers"
PRODUCTS_COLLECTION = "products"


class DocumentStore:
    """Thin owner of a MongoDB client and the collections this service uses."""

    def __init__(self, client: Any, database_name: str) -> None:
        self._client = client
        self._db = client[database_name]

    @classmethod
    def from_settings(cls) -> DocumentStore:
        """Build the store from ``MONGO_CLIENT_CLASS`` / ``MONGO_URI`` / ``MONGO_DB_NAME``."""
        client_class = import_string(settings.MONGO_CLIENT_CLASS)
        client = client_class(settings.MONGO_URI)
        logger.info(
            "store.client_created",
            client_class=settings.MONGO_CLIENT_CLASS,
            database=settings.MONGO_DB_NAME,
        )
        return cls(client, settings.MONGO_DB_NAME)

    @property
    def client(self) -> Any:
        return self._client

    @property
    def sellers(self) -> Collection:
        return self._db[SELLERS_COLLECTION]

    @property
    def products(self) -> Collection:
        return self._db[PRODUCTS_COLLECTION]

    def ensure_indexes(self) -> None:
        """Create the unique ``username`` index on sellers (idempotent)."""
        self.sellers.create_index(
            [("username", ASCENDING)], unique=True, name="sellers_username_unique"
        )

    def ping(self) -> None:
        """Round-trip to the server; raises ``PyMongoError`` when unreachable."""
        self._client.admin.command("ping")

    def close(self) -> None:
        self._client.close()


def get_store() -> DocumentStore:
    """Return the store owned by the ``core`` app."""
    return apps.get_app_config("core").store
