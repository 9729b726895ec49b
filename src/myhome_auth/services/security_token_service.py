"""Lifecycle management for single-use security tokens.

Tokens authorize out-of-band actions (email confirmation, password
reset). Validation and consumption are separate steps so callers can
run the guarded side effect in between; consumption itself is an atomic
conditional update, so a token value can be spent only once even under
concurrent requests.
"""

import logging
import secrets
from collections.abc import Callable
from datetime import date, timedelta

from myhome.domain.shared.time import today_utc
from myhome_auth.exceptions import (
    SecurityTokenAlreadyUsedError,
    SecurityTokenNotFoundError,
)
from myhome_auth.repositories import (
    SecurityToken,
    SecurityTokenRepository,
    SecurityTokenType,
)

logger = logging.getLogger(__name__)


class SecurityTokenService:
    """Create, validate and consume security tokens.

    Examples
    --------
    >>> service = SecurityTokenService(repo, timedelta(days=7), timedelta(days=1))
    >>> token = await service.create_password_reset_token(user.user_id)
    >>> found = await service.find_valid_token(
    ...     token.token, user.user_id, SecurityTokenType.PASSWORD_RESET
    ... )
    >>> await service.use_token(found)
    """

    TOKEN_BYTES = 32

    def __init__(
        self,
        repository: SecurityTokenRepository,
        email_confirm_lifetime: timedelta,
        password_reset_lifetime: timedelta,
        today: Callable[[], date] = today_utc,
    ):
        for lifetime in (email_confirm_lifetime, password_reset_lifetime):
            if lifetime < timedelta(days=1):
                msg = f"Security token lifetime must be at least one day, got {lifetime}"
                raise ValueError(msg)

        self._repository = repository
        self._lifetimes = {
            SecurityTokenType.EMAIL_CONFIRM: email_confirm_lifetime,
            SecurityTokenType.PASSWORD_RESET: password_reset_lifetime,
        }
        self._today = today

    async def create_token(
        self,
        token_type: SecurityTokenType,
        owner_id: str,
    ) -> SecurityToken:
        """Generate and persist a new unused token for ``owner_id``.

        The expiry date is the creation date plus the configured lifetime
        for ``token_type``, counted in whole days (any part day is dropped).
        """
        creation_date = self._today()
        lifetime = self._lifetimes[token_type]
        token = SecurityToken(
            token_type=token_type,
            token=secrets.token_urlsafe(self.TOKEN_BYTES),
            creation_date=creation_date,
            expiry_date=creation_date + timedelta(days=lifetime.days),
            owner_id=owner_id,
        )
        saved = await self._repository.save(token)
        logger.info(
            "Created %s token for user %s (expires %s)",
            token_type.value,
            owner_id,
            saved.expiry_date.isoformat(),
        )
        return saved

    async def create_email_confirm_token(self, owner_id: str) -> SecurityToken:
        return await self.create_token(SecurityTokenType.EMAIL_CONFIRM, owner_id)

    async def create_password_reset_token(self, owner_id: str) -> SecurityToken:
        return await self.create_token(SecurityTokenType.PASSWORD_RESET, owner_id)

    async def find_valid_token(
        self,
        candidate: str,
        owner_id: str,
        expected_type: SecurityTokenType,
    ) -> SecurityToken | None:
        """Return the owner's first unused, unexpired token matching
        ``candidate`` and ``expected_type``, or None.
        """
        today = self._today()
        tokens = await self._repository.find_by_owner(owner_id)
        return next(
            (t for t in tokens if t.is_valid_for(candidate, expected_type, today)),
            None,
        )

    async def use_token(self, token: SecurityToken) -> SecurityToken:
        """Mark a previously validated token as consumed.

        Raises
        ------
        SecurityTokenAlreadyUsedError
            If another caller consumed the token first
        """
        if not await self._repository.mark_used(token.token):
            logger.warning(
                "Rejected second use of %s token for user %s",
                token.token_type.value,
                token.owner_id,
            )
            raise SecurityTokenAlreadyUsedError(token.token)

        logger.info(
            "Consumed %s token for user %s",
            token.token_type.value,
            token.owner_id,
        )
        return token.as_used()

    async def consume_valid_token(
        self,
        candidate: str,
        owner_id: str,
        expected_type: SecurityTokenType,
    ) -> SecurityToken:
        """Validate and consume in one step.

        Raises
        ------
        SecurityTokenNotFoundError
            If no valid token matches
        SecurityTokenAlreadyUsedError
            If the token was consumed concurrently
        """
        token = await self.find_valid_token(candidate, owner_id, expected_type)
        if token is None:
            raise SecurityTokenNotFoundError
        return await self.use_token(token)

    async def discard_unused_tokens(
        self,
        owner_id: str,
        token_type: SecurityTokenType,
    ) -> int:
        return await self._repository.delete_unused_for_owner(owner_id, token_type)

    async def purge_expired(self) -> int:
        """Delete every token that can no longer be used."""
        deleted = await self._repository.cleanup_expired(self._today())
        if deleted:
            logger.info("Purged %d expired security tokens", deleted)
        return deleted
