"""User account schemas."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from myhome.domain.user import User


class CreateUserRequest(BaseModel):
    """Request schema for user registration."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(
        ...,
        min_length=8,
        max_length=72,
        description="Password (8-72 characters)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "email": "user@example.com",
                "password": "securepassword123",
            },
        },
    )


class UserResponse(BaseModel):
    user_id: str
    name: str
    email: str
    email_confirmed: bool
    community_ids: list[str] = Field(default_factory=list)
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            user_id=user.user_id,
            name=user.name,
            email=user.email,
            email_confirmed=user.email_confirmed,
            community_ids=sorted(user.community_ids),
            created_at=user.created_at,
        )


class PasswordAction(str, Enum):
    FORGOT = "FORGOT"
    RESET = "RESET"


class PasswordRequest(BaseModel):
    """Request schema for both steps of the password reset flow.

    ``FORGOT`` needs only the email; ``RESET`` also needs the code sent
    by mail and the new password.
    """

    email: EmailStr
    token: str | None = Field(default=None, description="Reset code (RESET only)")
    new_password: str | None = Field(
        default=None,
        min_length=8,
        max_length=72,
        description="New password (RESET only)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "token": "reset-code-from-email",
                "new_password": "newsecurepassword456",
            },
        },
    )


class MessageResponse(BaseModel):
    message: str
