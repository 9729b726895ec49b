"""Authentication service for email/password login."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from myhome.domain.shared.time import utc_now
from myhome_auth import (
    AppJwt,
    AuthenticationData,
    CredentialsIncorrectError,
    JWTCodec,
    PasswordHashingService,
    UserNotFoundError,
)

if TYPE_CHECKING:
    from myhome.domain.user import User, UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Verifies credentials against the stored bcrypt hash and issues a
    bearer token. Login is read-only: nothing is written on success or
    failure.
    """

    def __init__(  # noqa: PLR0913
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_codec: JWTCodec,
        token_secret: str,
        token_lifetime: timedelta,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_codec = jwt_codec
        self._token_secret = token_secret
        self._token_lifetime = token_lifetime
        self._clock = clock

    def _create_jwt(self, user: User) -> AppJwt:
        return AppJwt(
            user_id=user.user_id,
            expiration=self._clock() + self._token_lifetime,
        )

    async def login(self, email: str, password: str) -> AuthenticationData:
        """Authenticate by email and password.

        Raises
        ------
        UserNotFoundError
            If no user is registered under ``email``
        CredentialsIncorrectError
            If the password does not match

        Both are InvalidCredentialsError and carry the same message.
        """
        logger.debug("Received login request")
        user = await self._user_repo.find_by_email(email)
        if user is None:
            self._password_service.verify_dummy(password)
            logger.warning("Login failed: unknown email")
            raise UserNotFoundError(email)

        if not self._password_service.verify(password, user.encrypted_password):
            logger.warning("Login failed: wrong password for user %s", user.user_id)
            raise CredentialsIncorrectError(user.user_id)

        encoded_token = self._jwt_codec.encode(self._create_jwt(user), self._token_secret)

        logger.info("User logged in: %s", user.user_id)
        return AuthenticationData(jwt_token=encoded_token, user_id=user.user_id)
