"""SQLAlchemy repository implementations for myhome_auth."""

from myhome_auth.persistence.sqlalchemy.repositories.security_token_repository import (
    SecurityTokenRepositorySQLAlchemy,
)

__all__ = ["SecurityTokenRepositorySQLAlchemy"]
