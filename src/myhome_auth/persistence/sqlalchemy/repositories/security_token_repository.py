"""SQLAlchemy implementation of SecurityTokenRepository."""

import logging
from datetime import date
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from myhome_auth.persistence.sqlalchemy.models import SecurityTokenModel
from myhome_auth.repositories import (
    SecurityToken,
    SecurityTokenRepository,
    SecurityTokenType,
)

logger = logging.getLogger(__name__)


class SecurityTokenRepositorySQLAlchemy(SecurityTokenRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_data(self, model: SecurityTokenModel) -> SecurityToken:
        return SecurityToken(
            id=UUID(str(model.id)),
            token_type=SecurityTokenType(model.token_type),
            token=model.token,
            creation_date=model.creation_date,
            expiry_date=model.expiry_date,
            used=model.used,
            owner_id=model.owner_id,
        )

    async def save(self, token: SecurityToken) -> SecurityToken:
        model = SecurityTokenModel(
            id=str(token.id),
            token_type=token.token_type.value,
            token=token.token,
            creation_date=token.creation_date,
            expiry_date=token.expiry_date,
            used=token.used,
            owner_id=token.owner_id,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_data(model)

    async def find_by_owner(self, owner_id: str) -> list[SecurityToken]:
        stmt = (
            select(SecurityTokenModel)
            .where(SecurityTokenModel.owner_id == owner_id)
            .order_by(SecurityTokenModel.creation_date)
        )
        result = await self._session.execute(stmt)
        return [self._to_data(model) for model in result.scalars().all()]

    async def mark_used(self, token: str) -> bool:
        # The used = false predicate makes the row lock the arbiter:
        # a concurrent writer re-evaluates it after the first commit.
        stmt = (
            update(SecurityTokenModel)
            .where(
                SecurityTokenModel.token == token,
                SecurityTokenModel.used.is_(False),
            )
            .values(used=True)
            .execution_options(synchronize_session="fetch")
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount == 1  # type: ignore[attr-defined]

    async def delete_unused_for_owner(
        self,
        owner_id: str,
        token_type: SecurityTokenType,
    ) -> int:
        stmt = delete(SecurityTokenModel).where(
            SecurityTokenModel.owner_id == owner_id,
            SecurityTokenModel.token_type == token_type.value,
            SecurityTokenModel.used.is_(False),
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def cleanup_expired(self, today: date) -> int:
        stmt = delete(SecurityTokenModel).where(
            SecurityTokenModel.expiry_date <= today,
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        deleted = result.rowcount  # type: ignore[attr-defined]
        logger.debug("Deleted %d expired security tokens", deleted)
        return deleted
