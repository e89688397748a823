"""DRF exception handler."""

from __future__ import annotations

from rest_framework import exceptions
from rest_framework.views import exception_handler

from modules.core.exceptions import InvalidToken


def api_exception_handler(exc, context):
    """DRF's handler, with authentication failures answered by an empty body.

    Missing credentials -> 401, rejected token -> 403; neither explains why.
    """
    response = exception_handler(exc, context)
    if response is not None and isinstance(
        exc, (exceptions.NotAuthenticated, InvalidToken)
    ):
        response.data = None
    return response
