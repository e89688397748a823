"""Seller service layer (Use Cases).

Registration and login.  Persistence is delegated to the injected
``ISellerRepository``; hashing to Django's password hasher framework
(configured for bcrypt, see ``modules.sellers.hashers``); tokens to
``modules.sellers.tokens``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from django.contrib.auth.hashers import check_password, make_password

from modules.sellers.exceptions import InvalidCredentials
from modules.sellers.hashers import normalize_stored_hash
from modules.sellers.models import Seller
from modules.sellers.tokens import issue_token

if TYPE_CHECKING:
    from modules.sellers.dtos import SellerCredentialsDTO
    from modules.sellers.repositories.interfaces import ISellerRepository

logger = structlog.get_logger(__name__)


class SellerService:
    """Application service for Seller use-cases.

    Receives an ``ISellerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ISellerRepository) -> None:
        self._repo = repository

    def register(self, dto: SellerCredentialsDTO) -> Seller:
        """Create a seller with a hashed password.

        Raises:
            SellerAlreadyExists: if the username is taken.
        """
        seller = Seller(username=dto.username, password=make_password(dto.password))
        seller = self._repo.save(seller)
        logger.info("seller.registered", seller_id=seller.id)
        return seller

    def login(self, dto: SellerCredentialsDTO) -> str:
        """Verify credentials and return a signed access token.

        Raises:
            InvalidCredentials: unknown username or wrong password.
        """
        seller = self._repo.get_by_username(dto.username)
        if seller is None or not check_password(
            dto.password, normalize_stored_hash(seller.password)
        ):
            logger.warning("seller.login_failed")
            raise InvalidCredentials("Invalid credentials")

        token = issue_token(seller)
        logger.info("seller.logged_in", seller_id=seller.id)
        return token
