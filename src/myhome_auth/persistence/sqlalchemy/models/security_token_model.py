from datetime import date
from uuid import uuid4

from sqlalchemy import Boolean, Date, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from myhome_auth.persistence.sqlalchemy.base import AuthBase


class SecurityTokenModel(AuthBase):
    __tablename__ = "security_tokens"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    token_type: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
    )
    token: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
    )
    creation_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
    )
    expiry_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
    )
    used: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )
    owner_id: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return (
            f"<SecurityTokenModel(id={self.id}, type={self.token_type}, "
            f"owner_id={self.owner_id}, used={self.used})>"
        )
