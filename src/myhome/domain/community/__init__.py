"""Community domain: communities, their admins and amenities."""

from myhome.domain.community.community import Amenity, Community
from myhome.domain.community.exceptions import CommunityNotFoundError
from myhome.domain.community.repository import CommunityAdminLookup, CommunityRepository

__all__ = [
    "Amenity",
    "Community",
    "CommunityAdminLookup",
    "CommunityNotFoundError",
    "CommunityRepository",
]
