"""Caller identity for a single request."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Principal:
    """Immutable identity established for the current request.

    An anonymous principal has no ``user_id``. Authenticated principals
    carry no roles; role checks are done per resource.
    """

    user_id: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    @classmethod
    def anonymous(cls) -> Principal:
        return cls()

    @classmethod
    def authenticated(cls, user_id: str) -> Principal:
        return cls(user_id=user_id)

    def __str__(self) -> str:
        return f"Principal({self.user_id or 'anonymous'})"
