from myhome.infrastructure.persistence.sqlalchemy.models.base import Base
from myhome.infrastructure.persistence.sqlalchemy.models.community_model import (
    AmenityModel,
    CommunityAdminModel,
    CommunityModel,
)
from myhome.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "AmenityModel",
    "Base",
    "CommunityAdminModel",
    "CommunityModel",
    "UserModel",
]
