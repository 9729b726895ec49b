"""Repository interfaces for auth persistence."""

from myhome_auth.repositories.security_token_repository import (
    SecurityToken,
    SecurityTokenRepository,
    SecurityTokenType,
)

__all__ = [
    "SecurityToken",
    "SecurityTokenRepository",
    "SecurityTokenType",
]
