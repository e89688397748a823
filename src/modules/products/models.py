"""Product entity.

Products are stored as documents in the ``products`` collection::

    {"_id": ObjectId, "name": str, "description": str}

Products have no owner: any authenticated seller may change any product.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class Product:
    name: str
    description: str
    id: Optional[str] = None

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> Product:
        return cls(
            id=str(document["_id"]),
            name=document["name"],
            description=document["description"],
        )

    def to_document(self) -> Dict[str, Any]:
        return {"name": self.name, "description": self.description}

    def __str__(self) -> str:
        return self.name
