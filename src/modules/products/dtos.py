"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer and the Service layer.
DTOs are immutable (``frozen=True``).

- ``ProductInputDTO``: input for product creation and full update.
- ``ProductOutputDTO``: output with all product fields.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, field_validator

if TYPE_CHECKING:
    from modules.products.models import Product


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class ProductInputDTO(BaseModel):
    """Immutable DTO for create and update requests.

    Updates are full replacements, so both fields are required in
    either case and must be non-empty.  Numbers are accepted and
    stored as their string form; other non-string values are rejected.
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    name: str
    description: str

    @field_validator("name", "description")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Field must not be empty.")
        return v


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductOutputDTO(BaseModel):
    """Immutable DTO for product API responses."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str

    @classmethod
    def from_entity(cls, product: Product) -> ProductOutputDTO:
        """Build an output DTO from a Product entity."""
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
        )
