"""JWT token codec.

Encodes an AppJwt claim into a compact HS512-signed bearer token and
decodes it back after verifying signature and expiration.
"""

from datetime import datetime, timezone

import jwt

from myhome_auth.exceptions import InvalidTokenError, TokenExpiredError, WeakSecretError
from myhome_auth.schemas import AppJwt


class JWTCodec:
    """Stateless encoder/decoder for bearer tokens.

    The secret is passed on every call instead of being held by the
    instance, so a single codec can be shared across all requests.

    Examples
    --------
    >>> codec = JWTCodec()
    >>> token = codec.encode(AppJwt("user-1", expiration), secret)
    >>> codec.decode(token, secret).user_id
    'user-1'
    """

    ALGORITHM = "HS512"
    # RFC 7518 section 3.2: the key must be at least as long as the hash output
    MIN_SECRET_BYTES = 64

    def encode(self, claim: AppJwt, secret: str | bytes) -> str:
        """Sign a claim into a compact token.

        Parameters
        ----------
        claim
            The identity claim to embed
        secret
            Shared HMAC secret

        Returns
        -------
        The encoded JWT token string

        Raises
        ------
        WeakSecretError
            If the secret is shorter than MIN_SECRET_BYTES
        """
        key = self._key_bytes(secret)
        if len(key) < self.MIN_SECRET_BYTES:
            msg = (
                f"{self.ALGORITHM} requires a secret of at least "
                f"{self.MIN_SECRET_BYTES} bytes, got {len(key)}"
            )
            raise WeakSecretError(msg)

        payload = {
            "sub": claim.user_id,
            "exp": int(claim.expiration.timestamp()),
        }
        return jwt.encode(payload, key, algorithm=self.ALGORITHM)

    def decode(
        self,
        token: str,
        secret: str | bytes,
        now: datetime | None = None,
    ) -> AppJwt:
        """Verify and decode a token.

        Parameters
        ----------
        token
            The JWT token string to verify
        secret
            Shared HMAC secret
        now
            Reference time for the expiration check (defaults to the
            current UTC time)

        Returns
        -------
        The reconstructed claim

        Raises
        ------
        TokenExpiredError
            If the signature is valid but the expiration has passed
        InvalidTokenError
            For any other verification failure
        """
        try:
            payload = jwt.decode(
                token,
                self._key_bytes(secret),
                algorithms=[self.ALGORITHM],
                options={"require": ["sub", "exp"], "verify_exp": False},
            )
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

        try:
            user_id = str(payload["sub"])
            expiration = datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc)
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e

        claim = AppJwt(user_id=user_id, expiration=expiration)
        if claim.is_expired(now):
            raise TokenExpiredError
        return claim

    @staticmethod
    def _key_bytes(secret: str | bytes) -> bytes:
        if isinstance(secret, bytes):
            return secret
        return secret.encode("utf-8")
