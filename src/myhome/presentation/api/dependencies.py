"""FastAPI dependency injection for the MyHome API.

Provides dependencies for:
- Settings and database sessions (owned by ``app.state``)
- The caller's Principal (set by RequestAuthenticationMiddleware)
- Service instances
"""

import logging
from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from myhome.application.context import Principal
from myhome.application.ports import MailService
from myhome.application.services import (
    AuthenticationService,
    CommunityService,
    UserService,
)
from myhome.domain.shared.exceptions import AccessDeniedError, ErrorCode
from myhome.infrastructure.persistence.sqlalchemy.repositories import (
    CommunityRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from myhome_auth import JWTCodec, PasswordHashingService, SecurityTokenService
from myhome_auth.persistence.sqlalchemy import SecurityTokenRepositorySQLAlchemy
from myhome_config.settings import Settings

logger = logging.getLogger(__name__)


def get_api_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Session
# -----------------------------------------------------------------------------


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request from the application's
    shared session maker. Routers commit explicitly; anything left
    uncommitted is rolled back when the session closes.

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_jwt_codec() -> JWTCodec:
    """Get the shared, stateless JWT codec."""
    return JWTCodec()


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.bcrypt_rounds)


def get_mail_service(request: Request) -> MailService:
    return request.app.state.mail_service


def get_security_token_service(
    session: DBSession,
    settings: SettingsDep,
) -> SecurityTokenService:
    return SecurityTokenService(
        repository=SecurityTokenRepositorySQLAlchemy(session),
        email_confirm_lifetime=settings.email_confirm_token_lifetime,
        password_reset_lifetime=settings.password_reset_token_lifetime,
    )


def get_authentication_service(
    session: DBSession,
    settings: SettingsDep,
    jwt_codec: JWTCodec = Depends(get_jwt_codec),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_codec=jwt_codec,
        token_secret=settings.jwt_secret_key.get_secret_value(),
        token_lifetime=settings.jwt_token_lifetime,
    )


def get_user_service(
    session: DBSession,
    password_service: PasswordHashingService = Depends(get_password_service),
    security_token_service: SecurityTokenService = Depends(get_security_token_service),
    mail_service: MailService = Depends(get_mail_service),
) -> UserService:
    return UserService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        security_token_service=security_token_service,
        mail_service=mail_service,
    )


def get_community_service(session: DBSession) -> CommunityService:
    return CommunityService(
        community_repository=CommunityRepositorySQLAlchemy(session),
        user_repository=UserRepositorySQLAlchemy(session),
    )


# Type aliases for injected services
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
CommunityServiceDep = Annotated[CommunityService, Depends(get_community_service)]


# -----------------------------------------------------------------------------
# Caller identity
# -----------------------------------------------------------------------------


def get_principal(request: Request) -> Principal:
    """Principal established by RequestAuthenticationMiddleware.

    Falls back to anonymous when the middleware is not installed.
    """
    return getattr(request.state, "principal", None) or Principal.anonymous()


def require_principal(
    principal: Principal = Depends(get_principal),
) -> Principal:
    """
    Require an authenticated caller.

    Raises
    ------
    AccessDeniedError
        401 AUTHENTICATION_REQUIRED if the request carried no valid token
    """
    if not principal.is_authenticated:
        raise AccessDeniedError(
            "Authentication required",
            code=ErrorCode.AUTHENTICATION_REQUIRED,
        )
    return principal


CurrentPrincipal = Annotated[Principal, Depends(require_principal)]
