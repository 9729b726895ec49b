"""User domain: identity, credentials hash and email confirmation state."""

from myhome.domain.user.exceptions import EmailAlreadyExistsError, UnknownUserError
from myhome.domain.user.repository import UserRepository
from myhome.domain.user.user import User

__all__ = [
    "EmailAlreadyExistsError",
    "UnknownUserError",
    "User",
    "UserRepository",
]
