"""Ports to infrastructure collaborators."""

from myhome.application.ports.mail_service import MailService

__all__ = ["MailService"]
