"""Auth schemas and data structures.

These are simple data classes used for transferring authentication
data between components.
"""

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class AppJwt:
    """Identity claim carried by a bearer token.

    Constructed fresh per login, serialized immediately and never updated.

    Attributes
    ----------
    user_id
        Public identifier of the user (the ``sub`` claim)
    expiration
        Expiration instant (the ``exp`` claim), UTC with second resolution
    """

    user_id: str
    expiration: datetime

    def __post_init__(self) -> None:
        expiration = self.expiration
        if expiration.tzinfo is None:
            expiration = expiration.replace(tzinfo=timezone.utc)
        expiration = expiration.astimezone(timezone.utc).replace(microsecond=0)
        object.__setattr__(self, "expiration", expiration)

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check if the claim has expired."""
        now = now or datetime.now(tz=timezone.utc)
        return now >= self.expiration


@dataclass(frozen=True)
class AuthenticationData:
    """Result of a successful login: the encoded bearer token and its owner."""

    jwt_token: str
    user_id: str
