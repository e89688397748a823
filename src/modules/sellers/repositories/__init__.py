"""Seller repositories package."""

from modules.sellers.repositories.interfaces import ISellerRepository
from modules.sellers.repositories.mongo_repository import SellerMongoRepository

__all__ = ["ISellerRepository", "SellerMongoRepository"]
