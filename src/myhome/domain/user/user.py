"""User aggregate."""

from datetime import datetime
from uuid import UUID, uuid4

from myhome.domain.shared.time import utc_now


class User:
    """
    User aggregate root.

    ``id`` is the internal primary key; ``user_id`` is the public
    identifier carried in bearer tokens and URLs.
    """

    def __init__(  # noqa: PLR0913
        self,
        name: str,
        email: str,
        encrypted_password: str,
        user_id: str | None = None,
        email_confirmed: bool = False,
        community_ids: frozenset[str] = frozenset(),
        id: UUID | None = None,
        created_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._user_id = user_id or str(uuid4())
        self._name = name
        self._email = email.strip()
        self._encrypted_password = encrypted_password
        self._email_confirmed = email_confirmed
        self._community_ids = frozenset(community_ids)
        self._created_at = created_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def encrypted_password(self) -> str:
        return self._encrypted_password

    @property
    def email_confirmed(self) -> bool:
        return self._email_confirmed

    @property
    def community_ids(self) -> frozenset[str]:
        """Communities this user administers."""
        return self._community_ids

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def confirm_email(self) -> None:
        self._email_confirmed = True

    def change_password(self, encrypted_password: str) -> None:
        self._encrypted_password = encrypted_password

    @classmethod
    def create(cls, name: str, email: str, encrypted_password: str) -> "User":
        return cls(name=name, email=email, encrypted_password=encrypted_password)

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        user_id: str,
        name: str,
        email: str,
        encrypted_password: str,
        email_confirmed: bool,
        created_at: datetime,
        community_ids: frozenset[str] = frozenset(),
    ) -> "User":
        return cls(
            id=id,
            user_id=user_id,
            name=name,
            email=email,
            encrypted_password=encrypted_password,
            email_confirmed=email_confirmed,
            created_at=created_at,
            community_ids=community_ids,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(user_id={self._user_id}, email={self._email})"
