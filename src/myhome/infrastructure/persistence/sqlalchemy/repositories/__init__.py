from myhome.infrastructure.persistence.sqlalchemy.repositories.community_repository import (
    CommunityRepositorySQLAlchemy,
)
from myhome.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "CommunityRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
