"""Bearer-token authentication backend for Django REST Framework.

Tokens are HS256 JWTs issued by the sellers module at login and
verified statelessly here against ``JWT_SECRET``.

Outcomes
--------
* No ``Authorization`` header, or a header without a token part:
  the request stays anonymous.  Protected views then answer 401.
* A token that fails signature / expiry / format checks: 403.
* A valid token: ``request.user`` is a ``SellerIdentity``.
"""

from __future__ import annotations

from typing import Optional

import structlog
from jwt.exceptions import PyJWTError
from rest_framework.authentication import BaseAuthentication

from modules.core.exceptions import InvalidToken
from modules.sellers.tokens import decode_token

logger = structlog.get_logger(__name__)


class SellerIdentity:
    """Identity attached to authenticated requests.

    Built from token claims only; no store lookup is performed.
    """

    def __init__(self, payload: dict):
        self.payload = payload
        self.id: str = str(payload.get("id", ""))
        self.username: str = payload.get("username", "")

    # DRF checks
    is_authenticated = True
    is_active = True

    def __str__(self) -> str:  # pragma: no cover
        return self.username


class SellerJWTAuthentication(BaseAuthentication):
    """DRF authentication class that validates seller bearer tokens."""

    keyword = "Bearer"

    def authenticate(self, request):
        """Return ``(SellerIdentity, token)`` or ``None`` (no credentials)."""
        token = self._extract_token(request.META.get("HTTP_AUTHORIZATION", ""))
        if not token:
            return None

        try:
            payload = decode_token(token)
        except PyJWTError as exc:
            logger.warning("jwt_validation_failed", error=str(exc))
            raise InvalidToken() from exc

        identity = SellerIdentity(payload)
        logger.info("jwt_authenticated", seller_id=identity.id)
        return (identity, token)

    def authenticate_header(self, request):
        """Value for the ``WWW-Authenticate`` response header on 401."""
        return f'{self.keyword} realm="api"'

    @staticmethod
    def _extract_token(header: str) -> Optional[str]:
        parts = header.split()
        if len(parts) < 2:
            return None
        return parts[1]
