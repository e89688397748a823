"""Product service layer (Use Cases).

Orchestrates the catalog use cases, delegating persistence to the
injected ``IProductRepository``.  Every use case performs exactly one
store operation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.products.exceptions import ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import ProductInputDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: ProductInputDTO) -> Product:
        product = Product(name=dto.name, description=dto.description)
        product = self._repo.save(product)
        logger.info("product.created", product_id=product.id)
        return product

    def update_product(self, id: str, dto: ProductInputDTO) -> Product:
        """Overwrite name and description of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.update_fields(
            id, {"name": dto.name, "description": dto.description}
        )
        if product is None:
            raise ProductNotFound(f"Product {id} not found.")
        logger.info("product.updated", product_id=product.id)
        return product

    def delete_product(self, id: str) -> None:
        """Remove a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        if not self._repo.delete(id):
            raise ProductNotFound(f"Product {id} not found.")
        logger.info("product.removed", product_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        return self._repo.list()
