"""Seller DTOs for the Service Layer.

Framework-agnostic input contracts using Pydantic v2.  DTOs are
immutable (``frozen=True``).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class SellerCredentialsDTO(BaseModel):
    """Username/password pair used by both signup and login.

    Both fields must be non-empty; numbers are coerced to strings.
    Values are otherwise kept verbatim:
    no trimming or case folding, so ``"Alice"`` and ``"alice"`` are
    different sellers.
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    username: str
    password: str

    @field_validator("username", "password")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Field must not be empty.")
        return v
