"""Seller repository interface.

Extends ``IRepository[Seller]`` with the username look-up used at login.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.sellers.models import Seller


class ISellerRepository(IRepository["Seller"]):
    """Repository contract for the Seller aggregate."""

    @abstractmethod
    def get_by_username(self, username: str) -> Optional[Seller]:
        """Retrieve a seller by exact username."""
