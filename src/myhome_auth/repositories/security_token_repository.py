"""Abstract repository interface for single-use security tokens."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from uuid import UUID, uuid4


class SecurityTokenType(str, Enum):
    """Kinds of out-of-band actions a security token can authorize."""

    EMAIL_CONFIRM = "EMAIL_CONFIRM"
    PASSWORD_RESET = "PASSWORD_RESET"


@dataclass(frozen=True)
class SecurityToken:
    """Immutable security token data.

    ``owner_id`` is the public ``user_id`` of the user the token was
    issued for.
    """

    token_type: SecurityTokenType
    token: str
    creation_date: date
    expiry_date: date
    owner_id: str
    used: bool = False
    id: UUID = field(default_factory=uuid4)

    def is_expired(self, today: date) -> bool:
        """A token is usable up to, but not including, its expiry date."""
        return not self.expiry_date > today

    def is_valid_for(
        self,
        candidate: str,
        expected_type: SecurityTokenType,
        today: date,
    ) -> bool:
        return (
            not self.used
            and self.token_type == expected_type
            and self.token == candidate
            and not self.is_expired(today)
        )

    def as_used(self) -> SecurityToken:
        return replace(self, used=True)


class SecurityTokenRepository(ABC):
    """Abstract repository for security tokens."""

    @abstractmethod
    async def save(self, token: SecurityToken) -> SecurityToken:
        """Persist a newly created token.

        Returns
        -------
        The saved token
        """

    @abstractmethod
    async def find_by_owner(self, owner_id: str) -> list[SecurityToken]:
        """Return every token issued for a user, oldest first.

        Parameters
        ----------
        owner_id
            The owner's public user id
        """

    @abstractmethod
    async def mark_used(self, token: str) -> bool:
        """Atomically flag a token as used.

        Must behave like ``UPDATE ... SET used = true WHERE token = :token
        AND used = false``.

        Returns
        -------
        True if this call flipped the flag, False if the token was
        unknown or already used
        """

    @abstractmethod
    async def delete_unused_for_owner(
        self,
        owner_id: str,
        token_type: SecurityTokenType,
    ) -> int:
        """Delete a user's unused tokens of one type.

        Returns
        -------
        Number of tokens deleted
        """

    @abstractmethod
    async def cleanup_expired(self, today: date) -> int:
        """Remove tokens whose expiry date is today or earlier.

        Returns
        -------
        Number of tokens deleted
        """
