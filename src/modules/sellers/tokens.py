"""Seller access tokens.

HS256 JSON Web Tokens signed with ``settings.JWT_SECRET``.  Claims::

    {"id": "<seller id>", "username": "<username>", "iat": <ts>, "exp": <ts>}

Tokens are never persisted; verification is purely signature + expiry.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any, Dict

import jwt
from django.conf import settings

if TYPE_CHECKING:
    from modules.sellers.models import Seller


def issue_token(seller: Seller) -> str:
    """Sign a token for ``seller`` valid for ``JWT_EXPIRATION_SECONDS``."""
    issued_at = datetime.now(timezone.utc)
    payload = {
        "id": seller.id,
        "username": seller.username,
        "iat": issued_at,
        "exp": issued_at + timedelta(seconds=settings.JWT_EXPIRATION_SECONDS),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    """Verify ``token`` and return its claims.

    Raises:
        jwt.PyJWTError: bad signature, expired, or malformed token.
    """
    return jwt.decode(
        token,
        settings.JWT_SECRET,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["exp", "iat"]},
    )
