"""Client-side helpers for HTTP tests against the full application."""

import re

from fastapi.testclient import TestClient

CONFIRM_LINK = re.compile(r"/api/v1/users/(?P<user_id>[^/\s]+)/email-confirm/(?P<token>\S+)")
RESET_CODE = re.compile(r"Your reset code is: (?P<code>\S+)")


class ApiHelper:
    """Drives the public endpoints the way a client would."""

    def __init__(self, client: TestClient, mailbox: list):
        self.client = client
        self.mailbox = mailbox

    def register(self, name: str, email: str, password: str) -> dict:
        response = self.client.post(
            "/api/v1/users",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()

    def last_mail_to(self, email: str) -> str:
        return next(body for to, _, body in reversed(self.mailbox) if to == email)

    def confirm(self, email: str) -> None:
        match = CONFIRM_LINK.search(self.last_mail_to(email))
        response = self.client.get(match.group(0))
        assert response.status_code == 200, response.text

    def login(self, email: str, password: str) -> dict[str, str]:
        response = self.client.post(
            "/api/v1/auth/login",
            json={"email": email, "password": password},
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.headers['token']}"}

    def signup(self, name: str, email: str, password: str = "secure_password_123"):
        user = self.register(name, email, password)
        self.confirm(email)
        return user, self.login(email, password)
