"""In-memory repository implementations for service and middleware tests."""

import asyncio
from datetime import date

from myhome.domain.community import Amenity, Community, CommunityRepository
from myhome.domain.user import User, UserRepository
from myhome_auth.repositories import (
    SecurityToken,
    SecurityTokenRepository,
    SecurityTokenType,
)

TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs512-signing-0123456789abcdef"


class InMemorySecurityTokenRepository(SecurityTokenRepository):
    """Token store whose ``mark_used`` is atomic under an asyncio.Lock.

    ``find_by_owner`` yields to the event loop before answering, so
    concurrent callers interleave the way they would against a database.
    """

    def __init__(self) -> None:
        self.tokens: dict[str, SecurityToken] = {}
        self._lock = asyncio.Lock()

    async def save(self, token: SecurityToken) -> SecurityToken:
        self.tokens[token.token] = token
        return token

    async def find_by_owner(self, owner_id: str) -> list[SecurityToken]:
        await asyncio.sleep(0)
        return sorted(
            (t for t in self.tokens.values() if t.owner_id == owner_id),
            key=lambda t: t.creation_date,
        )

    async def mark_used(self, token: str) -> bool:
        async with self._lock:
            stored = self.tokens.get(token)
            if stored is None or stored.used:
                return False
            await asyncio.sleep(0)
            self.tokens[token] = stored.as_used()
            return True

    async def delete_unused_for_owner(
        self,
        owner_id: str,
        token_type: SecurityTokenType,
    ) -> int:
        doomed = [
            key
            for key, t in self.tokens.items()
            if t.owner_id == owner_id and t.token_type == token_type and not t.used
        ]
        for key in doomed:
            del self.tokens[key]
        return len(doomed)

    async def cleanup_expired(self, today: date) -> int:
        doomed = [key for key, t in self.tokens.items() if t.is_expired(today)]
        for key in doomed:
            del self.tokens[key]
        return len(doomed)


class InMemoryUserRepository(UserRepository):
    def __init__(self, *users: User) -> None:
        self.users: dict[str, User] = {user.user_id: user for user in users}

    async def find_by_email(self, email: str) -> User | None:
        return next((u for u in self.users.values() if u.email == email), None)

    async def find_by_user_id(self, user_id: str) -> User | None:
        return self.users.get(user_id)

    async def find_by_user_ids(self, user_ids: set[str]) -> list[User]:
        return [u for u in self.users.values() if u.user_id in user_ids]

    async def save(self, user: User) -> None:
        self.users[user.user_id] = user


class InMemoryCommunityRepository(CommunityRepository):
    def __init__(self, users: InMemoryUserRepository, *communities: Community) -> None:
        self._users = users
        self.communities: dict[str, Community] = {
            c.community_id: c for c in communities
        }
        self.amenities: list[Amenity] = []

    async def find_by_community_id(self, community_id: str) -> Community | None:
        return self.communities.get(community_id)

    async def find_admins_of_community(self, community_id: str) -> list[User] | None:
        community = self.communities.get(community_id)
        if community is None:
            return None
        return await self._users.find_by_user_ids(set(community.admin_ids))

    async def save(self, community: Community) -> None:
        self.communities[community.community_id] = community

    async def add_amenities(self, amenities: list[Amenity]) -> list[Amenity]:
        self.amenities.extend(amenities)
        return list(amenities)
