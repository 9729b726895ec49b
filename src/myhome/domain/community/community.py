"""Community aggregate and its amenities."""

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID, uuid4


@dataclass(frozen=True)
class Amenity:
    """A bookable facility belonging to one community."""

    name: str
    description: str
    community_id: str
    price: Decimal = Decimal("0")
    amenity_id: str = field(default_factory=lambda: str(uuid4()))


class Community:
    """
    Community aggregate root.

    Tracks the public ids of the users allowed to administer it.
    """

    def __init__(
        self,
        name: str,
        district: str,
        community_id: str | None = None,
        admin_ids: set[str] | None = None,
        id: UUID | None = None,
    ):
        self._id = id or uuid4()
        self._community_id = community_id or str(uuid4())
        self._name = name
        self._district = district
        self._admin_ids = set(admin_ids or ())

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def community_id(self) -> str:
        return self._community_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def district(self) -> str:
        return self._district

    @property
    def admin_ids(self) -> frozenset[str]:
        return frozenset(self._admin_ids)

    def is_admin(self, user_id: str) -> bool:
        return user_id in self._admin_ids

    def add_admin(self, user_id: str) -> bool:
        """Add an admin; returns False if already present."""
        if user_id in self._admin_ids:
            return False
        self._admin_ids.add(user_id)
        return True

    @classmethod
    def create(cls, name: str, district: str, creator_user_id: str) -> "Community":
        """Create a community administered by its creator."""
        return cls(name=name, district=district, admin_ids={creator_user_id})

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Community):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Community(community_id={self._community_id}, name={self._name!r})"
