"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/
    │   ├── myhome_auth/       # Token codec, password hashing, security tokens
    │   ├── domain/            # User and Community aggregates
    │   ├── application/       # Application services with mocked repositories
    │   ├── infrastructure/    # SQLAlchemy repositories on SQLite
    │   └── presentation/      # Middleware and HTTP routes
    └── shared/                # Fakes and fixtures used across test packages
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from myhome_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")

# Settings requires a signing secret; tests never rely on a real one
os.environ.setdefault(
    "JWT_SECRET_KEY",
    "test-secret-key-that-is-long-enough-for-hs512-signing-0123456789abcdef",
)


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached settings so environment changes in one test don't leak."""
    clear_settings_cache()
    yield
    clear_settings_cache()
