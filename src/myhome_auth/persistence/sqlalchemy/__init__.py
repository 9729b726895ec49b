"""SQLAlchemy persistence for myhome_auth.

Usage:
    from myhome_auth.persistence.sqlalchemy import (
        AuthBase,
        SecurityTokenModel,
        SecurityTokenRepositorySQLAlchemy,
    )
"""

from myhome_auth.persistence.sqlalchemy.base import AuthBase
from myhome_auth.persistence.sqlalchemy.models import SecurityTokenModel
from myhome_auth.persistence.sqlalchemy.repositories import (
    SecurityTokenRepositorySQLAlchemy,
)

__all__ = [
    "AuthBase",
    "SecurityTokenModel",
    "SecurityTokenRepositorySQLAlchemy",
]
