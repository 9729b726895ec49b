"""SQLAlchemy implementation of UserRepository."""

import logging
from collections import defaultdict

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from myhome.domain.user import EmailAlreadyExistsError, User, UserRepository
from myhome.infrastructure.persistence.sqlalchemy.models import (
    CommunityAdminModel,
    UserModel,
)

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email == email.strip())
        return await self._find_one(stmt)

    async def find_by_user_id(self, user_id: str) -> User | None:
        stmt = select(UserModel).where(UserModel.user_id == user_id)
        return await self._find_one(stmt)

    async def find_by_user_ids(self, user_ids: set[str]) -> list[User]:
        if not user_ids:
            return []
        stmt = (
            select(UserModel)
            .where(UserModel.user_id.in_(user_ids))
            .order_by(UserModel.created_at)
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()
        community_ids = await self._community_ids_of([m.user_id for m in models])
        return [
            self._map_to_domain(model, community_ids.get(model.user_id, frozenset()))
            for model in models
        ]

    async def save(self, user: User) -> None:
        existing = await self._find_model_by_id(user)

        try:
            if existing:
                self._update_model(existing, user)
                logger.debug("Updated user: %s", user.user_id)
            else:
                self._session.add(self._map_to_model(user))
                logger.info("Created user: %s", user.user_id)

            await self._session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise EmailAlreadyExistsError(user.email) from e
            raise

    async def _find_one(self, stmt) -> User | None:
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        community_ids = await self._community_ids_of([model.user_id])
        return self._map_to_domain(model, community_ids.get(model.user_id, frozenset()))

    async def _find_model_by_id(self, user: User) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user.id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _community_ids_of(self, user_ids: list[str]) -> dict[str, frozenset[str]]:
        if not user_ids:
            return {}
        stmt = select(CommunityAdminModel.user_id, CommunityAdminModel.community_id).where(
            CommunityAdminModel.user_id.in_(user_ids),
        )
        result = await self._session.execute(stmt)
        grouped: dict[str, set[str]] = defaultdict(set)
        for user_id, community_id in result.all():
            grouped[user_id].add(community_id)
        return {user_id: frozenset(ids) for user_id, ids in grouped.items()}

    def _map_to_domain(self, model: UserModel, community_ids: frozenset[str]) -> User:
        return User.reconstitute(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            email=model.email,
            encrypted_password=model.encrypted_password,
            email_confirmed=model.email_confirmed,
            created_at=model.created_at,
            community_ids=community_ids,
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            user_id=user.user_id,
            name=user.name,
            email=user.email,
            encrypted_password=user.encrypted_password,
            email_confirmed=user.email_confirmed,
            created_at=user.created_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.name = user.name
        model.email = user.email
        model.encrypted_password = user.encrypted_password
        model.email_confirmed = user.email_confirmed
