"""Application services."""

from myhome.application.services.authentication_service import AuthenticationService
from myhome.application.services.community_service import CommunityService
from myhome.application.services.user_service import UserService

__all__ = [
    "AuthenticationService",
    "CommunityService",
    "UserService",
]
