"""Community admin lookup for code running outside a request session."""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from myhome.domain.user import User
from myhome.infrastructure.persistence.sqlalchemy.repositories import (
    CommunityRepositorySQLAlchemy,
)


class SessionScopedCommunityAdminLookup:
    """
    Answer ``find_admins_of_community`` from a short-lived session.

    Middleware runs before FastAPI resolves the per-request session
    dependency, so each lookup opens and closes its own read-only session.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self._session_maker = session_maker

    async def find_admins_of_community(self, community_id: str) -> list[User] | None:
        async with self._session_maker() as session:
            repository = CommunityRepositorySQLAlchemy(session)
            return await repository.find_admins_of_community(community_id)
