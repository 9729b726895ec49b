"""Mail delivery adapters."""

from myhome.infrastructure.email.dev_mail_service import DevMailService

__all__ = ["DevMailService"]
