"""Mail service that writes outgoing messages to the log instead of SMTP."""

import logging

from myhome.application.ports import MailService
from myhome.domain.user import User
from myhome_auth.repositories import SecurityToken

logger = logging.getLogger(__name__)

ACCOUNT_CREATED_SUBJECT = "Welcome to MyHome"

ACCOUNT_CREATED_TEXT = """Hello {name},

your MyHome account has been created.

Confirm your email address with this link (valid until {expiry_date}):
/api/v1/users/{user_id}/email-confirm/{token}

-- MyHome
"""

ACCOUNT_CONFIRMED_SUBJECT = "Your email address is confirmed - MyHome"

ACCOUNT_CONFIRMED_TEXT = """Hello {name},

your email address has been confirmed. You can now log in.

-- MyHome
"""

PASSWORD_RECOVER_SUBJECT = "Password Reset Request - MyHome"

PASSWORD_RECOVER_TEXT = """Hello {name},

you requested a password reset for your MyHome account.

Your reset code is: {code}

If you didn't request this, you can safely ignore this email.

-- MyHome
"""

PASSWORD_CHANGED_SUBJECT = "Your password was changed - MyHome"

PASSWORD_CHANGED_TEXT = """Hello {name},

the password of your MyHome account was just changed.

If this wasn't you, reset your password immediately.

-- MyHome
"""


class DevMailService(MailService):
    """Log every message instead of delivering it.

    Used for local development and tests. The message bodies contain the
    security tokens, so never enable DEBUG logging for this module in
    production.
    """

    def __init__(self) -> None:
        self.sent: list[tuple[str, str, str]] = []

    def _send_email(self, to_email: str, subject: str, text_body: str) -> bool:
        self.sent.append((to_email, subject, text_body))
        logger.info("Mail '%s' queued for %s", subject, to_email)
        logger.debug("Mail body:\n%s", text_body)
        return True

    def send_account_created(self, user: User, email_confirm_token: SecurityToken) -> bool:
        return self._send_email(
            user.email,
            ACCOUNT_CREATED_SUBJECT,
            ACCOUNT_CREATED_TEXT.format(
                name=user.name,
                user_id=user.user_id,
                token=email_confirm_token.token,
                expiry_date=email_confirm_token.expiry_date.isoformat(),
            ),
        )

    def send_account_confirmed(self, user: User) -> bool:
        return self._send_email(
            user.email,
            ACCOUNT_CONFIRMED_SUBJECT,
            ACCOUNT_CONFIRMED_TEXT.format(name=user.name),
        )

    def send_password_recover_code(self, user: User, code: str) -> bool:
        return self._send_email(
            user.email,
            PASSWORD_RECOVER_SUBJECT,
            PASSWORD_RECOVER_TEXT.format(name=user.name, code=code),
        )

    def send_password_successfully_changed(self, user: User) -> bool:
        return self._send_email(
            user.email,
            PASSWORD_CHANGED_SUBJECT,
            PASSWORD_CHANGED_TEXT.format(name=user.name),
        )
