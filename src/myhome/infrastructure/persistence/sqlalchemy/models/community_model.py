"""SQLAlchemy models for communities, their admins and amenities."""

from decimal import Decimal
from uuid import UUID

from sqlalchemy import ForeignKey, Numeric, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from myhome.infrastructure.persistence.sqlalchemy.models.base import Base


class CommunityModel(Base):
    """Table: communities"""

    __tablename__ = "communities"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    community_id: Mapped[str] = mapped_column(
        String(64),
        unique=True,
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    district: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    def __repr__(self) -> str:
        return f"<CommunityModel(community_id={self.community_id}, name={self.name})>"


class CommunityAdminModel(Base):
    """
    Association between a community and the users administering it.

    Both columns reference public ids, so the authorization lookup is a
    single join on ``users.user_id``.

    Table: community_admins
    """

    __tablename__ = "community_admins"
    __table_args__ = (
        UniqueConstraint("community_id", "user_id", name="uq_community_admin"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    community_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("communities.community_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )


class AmenityModel(Base):
    """Table: amenities"""

    __tablename__ = "amenities"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    amenity_id: Mapped[str] = mapped_column(
        String(64),
        unique=True,
        nullable=False,
        index=True,
    )
    community_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("communities.community_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    price: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2),
        nullable=False,
        default=Decimal("0"),
    )
