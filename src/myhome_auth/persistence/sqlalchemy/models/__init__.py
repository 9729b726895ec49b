"""SQLAlchemy models for myhome_auth."""

from myhome_auth.persistence.sqlalchemy.models.security_token_model import (
    SecurityTokenModel,
)

__all__ = ["SecurityTokenModel"]
