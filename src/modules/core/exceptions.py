"""API-level exceptions.

Imported by the authentication backend, so this module must not depend
on ``rest_framework.views`` (DRF resolves authentication classes while
that module is still loading).
"""

from __future__ import annotations

from rest_framework import exceptions, status


class InvalidToken(exceptions.APIException):
    """A bearer token was supplied but could not be verified."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Invalid or expired token."
    default_code = "invalid_token"
