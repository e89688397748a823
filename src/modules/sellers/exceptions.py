"""Seller domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class SellerAlreadyExists(Exception):
    """A seller with the same username already exists."""


class InvalidCredentials(Exception):
    """Unknown username or wrong password.

    The two cases are deliberately indistinguishable to callers.
    """
