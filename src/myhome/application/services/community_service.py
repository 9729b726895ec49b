"""Community management used by the guarded community routes.

Admin checks are not repeated here: the routes that mutate a community
sit behind CommunityAdminAuthorizationMiddleware.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING

from myhome.domain.community import Amenity, Community, CommunityNotFoundError
from myhome.domain.user import UnknownUserError

if TYPE_CHECKING:
    from myhome.domain.community import CommunityRepository
    from myhome.domain.user import User, UserRepository

logger = logging.getLogger(__name__)


class CommunityService:
    def __init__(
        self,
        community_repository: CommunityRepository,
        user_repository: UserRepository,
    ):
        self._community_repo = community_repository
        self._user_repo = user_repository

    async def create_community(
        self,
        creator_user_id: str,
        name: str,
        district: str,
    ) -> Community:
        community = Community.create(name, district, creator_user_id)
        await self._community_repo.save(community)
        logger.info(
            "Community %s created by %s",
            community.community_id,
            creator_user_id,
        )
        return community

    async def list_admins(self, community_id: str) -> list[User]:
        admins = await self._community_repo.find_admins_of_community(community_id)
        if admins is None:
            raise CommunityNotFoundError(community_id)
        return admins

    async def add_admins(self, community_id: str, user_ids: set[str]) -> Community:
        """Grant admin rights to existing users.

        Raises
        ------
        CommunityNotFoundError
            If the community does not exist
        UnknownUserError
            If any of the user ids is not registered
        """
        community = await self._community_repo.find_by_community_id(community_id)
        if community is None:
            raise CommunityNotFoundError(community_id)

        users = await self._user_repo.find_by_user_ids(user_ids)
        missing = user_ids - {user.user_id for user in users}
        if missing:
            raise UnknownUserError(sorted(missing)[0])

        added = [user_id for user_id in sorted(user_ids) if community.add_admin(user_id)]
        await self._community_repo.save(community)
        logger.info("Added admins %s to community %s", added, community_id)
        return community

    async def add_amenities(
        self,
        community_id: str,
        amenities: list[tuple[str, str, Decimal]],
    ) -> list[Amenity]:
        """Add ``(name, description, price)`` amenities to a community."""
        community = await self._community_repo.find_by_community_id(community_id)
        if community is None:
            raise CommunityNotFoundError(community_id)

        saved = await self._community_repo.add_amenities(
            [
                Amenity(
                    name=name,
                    description=description,
                    price=price,
                    community_id=community_id,
                )
                for name, description, price in amenities
            ],
        )
        logger.info("Added %d amenities to community %s", len(saved), community_id)
        return saved
