"""User account flows: registration, email confirmation, password reset."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from myhome.domain.user import EmailAlreadyExistsError, User
from myhome_auth import (
    PasswordHashingService,
    SecurityTokenError,
    SecurityTokenService,
    SecurityTokenType,
)

if TYPE_CHECKING:
    from myhome.application.ports import MailService
    from myhome.domain.user import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """
    Application service for user account management.

    The token-guarded flows return booleans instead of raising, so the
    routers can answer every failure (unknown user, bad, expired or
    spent token) with the same response. Callers own the transaction:
    commit on True, roll back on False.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        security_token_service: SecurityTokenService,
        mail_service: MailService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._token_service = security_token_service
        self._mail_service = mail_service

    async def create_user(self, name: str, email: str, password: str) -> User:
        """Register a user and send the email confirmation token.

        Raises
        ------
        EmailAlreadyExistsError
            If the email is taken
        WeakPasswordError
            If the password doesn't meet requirements
        """
        if await self._user_repo.find_by_email(email) is not None:
            raise EmailAlreadyExistsError(email)

        user = User.create(
            name=name,
            email=email,
            encrypted_password=self._password_service.hash(password),
        )
        await self._user_repo.save(user)

        email_confirm_token = await self._token_service.create_email_confirm_token(
            user.user_id,
        )
        self._mail_service.send_account_created(user, email_confirm_token)

        logger.info("User registered: %s", user.user_id)
        return user

    async def get_user_details(self, user_id: str) -> User | None:
        return await self._user_repo.find_by_user_id(user_id)

    async def request_reset_password(self, email: str) -> bool:
        user = await self._user_repo.find_by_email(email)
        if user is None:
            logger.debug("Password reset requested for unknown email")
            return False

        reset_token = await self._token_service.create_password_reset_token(user.user_id)
        return self._mail_service.send_password_recover_code(user, reset_token.token)

    async def reset_password(self, email: str, token: str, new_password: str) -> bool:
        """Replace the password if ``token`` is a valid reset token for ``email``.

        The token is consumed before the new hash is written, so of two
        concurrent resets with the same token only one changes the password.

        Raises
        ------
        WeakPasswordError
            If the new password doesn't meet requirements (checked before
            the token is touched)
        """
        self._password_service.validate_strength(new_password)

        user = await self._user_repo.find_by_email(email)
        if user is None:
            return False

        try:
            await self._token_service.consume_valid_token(
                token,
                user.user_id,
                SecurityTokenType.PASSWORD_RESET,
            )
        except SecurityTokenError as e:
            logger.warning("Password reset rejected for user %s: %s", user.user_id, e)
            return False

        user.change_password(self._password_service.hash(new_password))
        await self._user_repo.save(user)

        logger.info("Password reset completed for user: %s", user.user_id)
        return self._mail_service.send_password_successfully_changed(user)

    async def confirm_email(self, user_id: str, email_confirm_token: str) -> bool:
        user = await self._user_repo.find_by_user_id(user_id)
        if user is None or user.email_confirmed:
            return False

        token = await self._token_service.find_valid_token(
            email_confirm_token,
            user_id,
            SecurityTokenType.EMAIL_CONFIRM,
        )
        if token is None:
            return False

        user.confirm_email()
        await self._user_repo.save(user)
        try:
            await self._token_service.use_token(token)
        except SecurityTokenError:
            return False

        self._mail_service.send_account_confirmed(user)
        logger.info("Email confirmed for user: %s", user_id)
        return True

    async def resend_email_confirm(self, user_id: str) -> bool:
        user = await self._user_repo.find_by_user_id(user_id)
        if user is None or user.email_confirmed:
            return False

        await self._token_service.discard_unused_tokens(
            user_id,
            SecurityTokenType.EMAIL_CONFIRM,
        )
        email_confirm_token = await self._token_service.create_email_confirm_token(user_id)
        return self._mail_service.send_account_created(user, email_confirm_token)
