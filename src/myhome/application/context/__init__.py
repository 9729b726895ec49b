"""Request-scoped context values."""

from myhome.application.context.principal import Principal

__all__ = ["Principal"]
