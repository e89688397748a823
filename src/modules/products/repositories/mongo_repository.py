"""MongoDB implementation of the Product repository.

Satisfies ``IProductRepository`` with single-document operations only;
each write is atomic at the store level.  Look-ups return ``None`` for
unknown or malformed IDs and the Service Layer decides how to translate
that into an API response.  ``PyMongoError`` propagates.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from pymongo import ReturnDocument
from pymongo.collection import Collection

from modules.core.repositories.mongo import to_object_id
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductMongoRepository(IProductRepository):
    """Concrete Product repository backed by a pymongo collection."""

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by id; ``None`` for non-existent or invalid IDs."""
        oid = to_object_id(id)
        if oid is None:
            return None
        document = self._collection.find_one({"_id": oid})
        return Product.from_document(document) if document else None

    def list(self) -> List[Product]:
        """All products in the store's natural order."""
        return [Product.from_document(doc) for doc in self._collection.find()]

    def save(self, entity: Product) -> Product:
        """Insert a new product, or replace an existing one by id."""
        oid = to_object_id(entity.id) if entity.id else None
        if oid is None:
            result = self._collection.insert_one(entity.to_document())
            entity.id = str(result.inserted_id)
        else:
            self._collection.replace_one({"_id": oid}, entity.to_document())
        logger.info("product.saved", product_id=entity.id)
        return entity

    def update_fields(self, id: str, fields: Dict[str, Any]) -> Optional[Product]:
        oid = to_object_id(id)
        if oid is None:
            return None
        document = self._collection.find_one_and_update(
            {"_id": oid},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )
        return Product.from_document(document) if document else None

    def delete(self, id: str) -> bool:
        """Hard-delete a product; ``False`` if no product has the given ID."""
        oid = to_object_id(id)
        if oid is None:
            return False
        deleted = self._collection.find_one_and_delete({"_id": oid})
        if deleted is None:
            return False
        logger.info("product.deleted", product_id=str(oid))
        return True
