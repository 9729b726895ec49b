"""User repository interface."""

from abc import ABC, abstractmethod

from myhome.domain.user.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_email(self, email: str) -> User | None:
        """Find a user by their email address."""

    @abstractmethod
    async def find_by_user_id(self, user_id: str) -> User | None:
        """Find a user by their public user id."""

    @abstractmethod
    async def find_by_user_ids(self, user_ids: set[str]) -> list[User]:
        """Find every user whose public id is in ``user_ids``."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Save or update a user."""
