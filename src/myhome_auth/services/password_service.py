"""bcrypt password hashing for account registration and password reset."""

from functools import lru_cache

import bcrypt

from myhome_auth.exceptions import WeakPasswordError


@lru_cache(maxsize=4)
def _dummy_hash(rounds: int) -> bytes:
    return bcrypt.hashpw(b"myhome-dummy-password", bcrypt.gensalt(rounds=rounds))


class PasswordHashingService:
    """Hash and check account passwords with bcrypt.

    Registration and password reset both go through ``hash``, so the
    length rules below apply to every stored password. Login goes
    through ``verify``; hashes are never compared any other way.

    bcrypt only reads the first 72 bytes of its input. Longer passwords
    are rejected instead of being silently truncated, otherwise two
    passwords sharing a 72-byte prefix would verify against each other.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> stored = service.hash("correct horse battery")
    >>> service.verify("correct horse battery", stored)
    True
    >>> service.hash("short")
    Traceback (most recent call last):
    ...
    myhome_auth.exceptions.WeakPasswordError: Password must be at least 8 characters
    """

    MIN_LENGTH = 8
    MAX_BYTES = 72

    def __init__(self, rounds: int = 12):
        """
        Parameters
        ----------
        rounds
            bcrypt cost factor. Settings lower it for tests.
        """
        self._rounds = rounds

    def hash(self, password: str) -> str:
        self.validate_strength(password)
        hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=self._rounds))
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Check ``password`` against a stored hash.

        A malformed stored hash counts as a mismatch.
        """
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except (ValueError, TypeError):
            return False

    def verify_dummy(self, password: str) -> bool:
        """Spend one ``verify`` on a fixed hash of the same cost; always False.

        Used when there is no stored hash to check, so a login for an
        unknown account takes as long as one with a wrong password.
        """
        bcrypt.checkpw(password.encode("utf-8")[: self.MAX_BYTES], _dummy_hash(self._rounds))
        return False

    def validate_strength(self, password: str) -> None:
        """Raise WeakPasswordError unless 8 characters <= password <= 72 bytes."""
        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)

        if len(password.encode("utf-8")) > self.MAX_BYTES:
            msg = f"Password cannot exceed {self.MAX_BYTES} bytes"
            raise WeakPasswordError(msg)
