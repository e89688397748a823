"""MongoDB implementation of the Seller repository.

Error handling follows the Null Object pattern for look-ups (``None``
for unknown or malformed IDs).  A unique-index violation on insert is
translated into ``SellerAlreadyExists``; every other ``PyMongoError``
propagates to the caller.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from modules.core.repositories.mongo import to_object_id
from modules.sellers.exceptions import SellerAlreadyExists
from modules.sellers.models import Seller
from modules.sellers.repositories.interfaces import ISellerRepository

logger = structlog.get_logger(__name__)


class SellerMongoRepository(ISellerRepository):
    """Concrete Seller repository backed by a pymongo collection."""

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    def get_by_id(self, id: str) -> Optional[Seller]:
        oid = to_object_id(id)
        if oid is None:
            return None
        document = self._collection.find_one({"_id": oid})
        return Seller.from_document(document) if document else None

    def get_by_username(self, username: str) -> Optional[Seller]:
        document = self._collection.find_one({"username": username})
        return Seller.from_document(document) if document else None

    def list(self) -> List[Seller]:
        return [Seller.from_document(doc) for doc in self._collection.find()]

    def save(self, entity: Seller) -> Seller:
        """Insert a new seller.  Sellers are never updated once created.

        Raises:
            SellerAlreadyExists: the username is already taken.
        """
        try:
            result = self._collection.insert_one(entity.to_document())
        except DuplicateKeyError as exc:
            raise SellerAlreadyExists(
                f"Username '{entity.username}' already registered."
            ) from exc
        entity.id = str(result.inserted_id)
        logger.info("seller.saved", seller_id=entity.id)
        return entity

    def delete(self, id: str) -> bool:
        oid = to_object_id(id)
        if oid is None:
            return False
        return self._collection.delete_one({"_id": oid}).deleted_count == 1
