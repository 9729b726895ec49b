"""MyHome Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the property-management domain. It handles:
- Password hashing (bcrypt)
- Bearer token encoding and verification (HS512 JWT)
- Single-use security tokens (email confirmation, password reset)

Architecture:
    myhome_auth/
    ├── services/           # Pure logic (password hashing, JWT, token lifecycle)
    ├── repositories/       # Abstract interfaces
    ├── persistence/        # Implementations by technology
    │   └── sqlalchemy/     # SQLAlchemy implementation
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from myhome_auth import JWTCodec, PasswordHashingService

    from myhome_auth.persistence.sqlalchemy import (
        SecurityTokenRepositorySQLAlchemy,
        AuthBase,
    )
"""

from myhome_auth.exceptions import (
    AuthError,
    CredentialsIncorrectError,
    InvalidCredentialsError,
    InvalidTokenError,
    SecurityTokenAlreadyUsedError,
    SecurityTokenError,
    SecurityTokenNotFoundError,
    TokenExpiredError,
    UserNotFoundError,
    WeakPasswordError,
    WeakSecretError,
)
from myhome_auth.repositories import (
    SecurityToken,
    SecurityTokenRepository,
    SecurityTokenType,
)
from myhome_auth.schemas import AppJwt, AuthenticationData
from myhome_auth.services import (
    JWTCodec,
    PasswordHashingService,
    SecurityTokenService,
)

__all__ = [
    # Services
    "JWTCodec",
    "PasswordHashingService",
    "SecurityTokenService",
    # Repositories (interfaces)
    "SecurityTokenRepository",
    # Schemas
    "AppJwt",
    "AuthenticationData",
    "SecurityToken",
    "SecurityTokenType",
    # Exceptions
    "AuthError",
    "CredentialsIncorrectError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "SecurityTokenAlreadyUsedError",
    "SecurityTokenError",
    "SecurityTokenNotFoundError",
    "TokenExpiredError",
    "UserNotFoundError",
    "WeakPasswordError",
    "WeakSecretError",
]
