"""Product repository interface.

Extends ``IRepository[Product]`` with an atomic field update, so a
product is changed with one store round-trip instead of read-then-write.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def update_fields(self, id: str, fields: Dict[str, Any]) -> Optional[Product]:
        """Set ``fields`` on a product and return the updated record.

        Returns ``None`` if the product does not exist.
        """
