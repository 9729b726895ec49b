"""SQLAlchemy persistence for the MyHome application tables."""

from myhome.infrastructure.persistence.sqlalchemy.models import Base
from myhome.infrastructure.persistence.sqlalchemy.repositories import (
    CommunityRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "CommunityRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
