import pytest
from fastapi.testclient import TestClient

from myhome.presentation.api import create_app
from myhome_config import Settings
from tests.shared.api import ApiHelper
from tests.shared.fakes import TEST_SECRET


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        jwt_secret_key=TEST_SECRET,
        database_dsn=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        bcrypt_rounds=4,
        jwt_token_expire_minutes=60,
        log_level="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def mailbox(app):
    return app.state.mail_service.sent


@pytest.fixture
def api(client, mailbox) -> ApiHelper:
    return ApiHelper(client, mailbox)
