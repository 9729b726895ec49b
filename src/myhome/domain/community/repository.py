"""Community repository interfaces."""

from abc import ABC, abstractmethod
from typing import Protocol

from myhome.domain.community.community import Amenity, Community
from myhome.domain.user import User


class CommunityAdminLookup(Protocol):
    """Read-only view used by the authorization middleware."""

    async def find_admins_of_community(self, community_id: str) -> list[User] | None:
        """Return the community's admins, or None if the community is unknown."""
        ...


class CommunityRepository(ABC):
    """Repository interface for Community aggregates."""

    @abstractmethod
    async def find_by_community_id(self, community_id: str) -> Community | None:
        """Find a community by its public id."""

    @abstractmethod
    async def find_admins_of_community(self, community_id: str) -> list[User] | None:
        """Return the community's admins, or None if the community is unknown."""

    @abstractmethod
    async def save(self, community: Community) -> None:
        """Save a community together with its admin set."""

    @abstractmethod
    async def add_amenities(self, amenities: list[Amenity]) -> list[Amenity]:
        """Persist amenities for an existing community."""
