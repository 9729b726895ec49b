"""Outbound mail port.

Each method returns True when the message was handed off for delivery.
"""

from abc import ABC, abstractmethod

from myhome.domain.user import User
from myhome_auth.repositories import SecurityToken


class MailService(ABC):
    @abstractmethod
    def send_account_created(self, user: User, email_confirm_token: SecurityToken) -> bool:
        """Send the welcome mail carrying the email confirmation link."""

    @abstractmethod
    def send_account_confirmed(self, user: User) -> bool:
        """Tell the user their email address is confirmed."""

    @abstractmethod
    def send_password_recover_code(self, user: User, code: str) -> bool:
        """Send the password reset code."""

    @abstractmethod
    def send_password_successfully_changed(self, user: User) -> bool:
        """Notify the user their password was changed."""
