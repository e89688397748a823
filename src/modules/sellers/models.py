"""Seller entity.

Sellers are stored as documents in the ``sellers`` collection::

    {"_id": ObjectId, "username": str, "password": str}

``password`` holds the encoded hash produced by Django's password hasher
framework (or a bare bcrypt hash from an earlier deployment), never the
plaintext.  ``username`` is unique (enforced
by a unique index, see ``DocumentStore.ensure_indexes``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class Seller:
    username: str
    password: str
    id: Optional[str] = None

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> Seller:
        return cls(
            id=str(document["_id"]),
            username=document["username"],
            password=document["password"],
        )

    def to_document(self) -> Dict[str, Any]:
        """Fields written to the store (``_id`` is assigned by MongoDB)."""
        return {"username": self.username, "password": self.password}

    def __str__(self) -> str:
        return self.username
