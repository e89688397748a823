"""Helpers shared by the MongoDB repositories."""

from __future__ import annotations

from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId


def to_object_id(id: str) -> Optional[ObjectId]:
    """Parse a hex identifier; ``None`` for anything that is not an ObjectId."""
    if isinstance(id, ObjectId):
        return id
    try:
        return ObjectId(str(id))
    except (InvalidId, TypeError):
        return None
