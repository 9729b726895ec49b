"""SQLAlchemy implementation of CommunityRepository."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from myhome.domain.community import Amenity, Community, CommunityRepository
from myhome.domain.user import User
from myhome.infrastructure.persistence.sqlalchemy.models import (
    AmenityModel,
    CommunityAdminModel,
    CommunityModel,
    UserModel,
)

logger = logging.getLogger(__name__)


class CommunityRepositorySQLAlchemy(CommunityRepository):
    """SQLAlchemy implementation of the CommunityRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_community_id(self, community_id: str) -> Community | None:
        model = await self._find_model(community_id)
        if model is None:
            return None

        return Community(
            id=model.id,
            community_id=model.community_id,
            name=model.name,
            district=model.district,
            admin_ids=set(await self._admin_ids_of(community_id)),
        )

    async def find_admins_of_community(self, community_id: str) -> list[User] | None:
        if await self._find_model(community_id) is None:
            return None

        stmt = (
            select(UserModel)
            .join(CommunityAdminModel, CommunityAdminModel.user_id == UserModel.user_id)
            .where(CommunityAdminModel.community_id == community_id)
            .order_by(UserModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [
            User.reconstitute(
                id=model.id,
                user_id=model.user_id,
                name=model.name,
                email=model.email,
                encrypted_password=model.encrypted_password,
                email_confirmed=model.email_confirmed,
                created_at=model.created_at,
            )
            for model in result.scalars().all()
        ]

    async def save(self, community: Community) -> None:
        existing = await self._find_model(community.community_id)

        if existing:
            existing.name = community.name
            existing.district = community.district
            logger.debug("Updated community: %s", community.community_id)
        else:
            self._session.add(
                CommunityModel(
                    id=community.id,
                    community_id=community.community_id,
                    name=community.name,
                    district=community.district,
                ),
            )
            logger.info("Created community: %s", community.community_id)

        # The parent row must exist before the association rows reference it
        await self._session.flush()

        stored = await self._admin_ids_of(community.community_id)
        for user_id in sorted(community.admin_ids - stored):
            self._session.add(
                CommunityAdminModel(
                    community_id=community.community_id,
                    user_id=user_id,
                ),
            )
        await self._session.flush()

    async def add_amenities(self, amenities: list[Amenity]) -> list[Amenity]:
        for amenity in amenities:
            self._session.add(
                AmenityModel(
                    amenity_id=amenity.amenity_id,
                    community_id=amenity.community_id,
                    name=amenity.name,
                    description=amenity.description,
                    price=amenity.price,
                ),
            )
        await self._session.flush()
        return list(amenities)

    async def _find_model(self, community_id: str) -> CommunityModel | None:
        stmt = select(CommunityModel).where(CommunityModel.community_id == community_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _admin_ids_of(self, community_id: str) -> frozenset[str]:
        stmt = select(CommunityAdminModel.user_id).where(
            CommunityAdminModel.community_id == community_id,
        )
        result = await self._session.execute(stmt)
        return frozenset(result.scalars().all())
