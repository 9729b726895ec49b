"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.

Run with ``uvicorn myhome.presentation.api.app:create_app --factory``.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from myhome.infrastructure.email import DevMailService
from myhome.infrastructure.persistence.sqlalchemy.models import Base
from myhome.infrastructure.security import SessionScopedCommunityAdminLookup
from myhome.presentation.api.dependencies import get_jwt_codec
from myhome.presentation.api.exception_handlers import setup_exception_handlers
from myhome.presentation.api.middleware import install_security_middleware
from myhome.presentation.api.routers import (
    auth_router,
    communities_router,
    users_router,
)
from myhome.presentation.api.routers.auth import TOKEN_HEADER, USER_ID_HEADER
from myhome_auth import WeakSecretError
from myhome_auth.persistence.sqlalchemy import AuthBase
from myhome_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    Sets up logging for the myhome packages with:
    - Console output with timestamps and module names
    - Configurable log level for myhome modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("myhome").setLevel(log_level)
    logging.getLogger("myhome_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Email/password login.

The bearer token is returned in the `token` response header and must be
sent as `Authorization: Bearer <token>` on later requests.
""",
    },
    {
        "name": "Users",
        "description": """User accounts.

- Registration with email confirmation
- Password reset via a mailed single-use code
- Reading your own account details
""",
    },
    {
        "name": "Communities",
        "description": """Communities, their administrators and amenities.

Managing admins and amenities requires being an admin of the community.
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting MyHome API v%s...", API_VERSION)
    engine: AsyncEngine = app.state.engine
    await _init_database_schema(engine)
    yield

    logger.info("Shutting down MyHome API...")
    await engine.dispose()
    logger.info("Database connections closed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Initialize database schema (if not existent) and verify connectivity."""
    logger.info("Initializing database schema...")
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
            await conn.run_sync(AuthBase.metadata.create_all)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    logger.info("Database schema initialized successfully")


def _check_signing_secret(settings: Settings) -> None:
    secret = settings.jwt_secret_key.get_secret_value().encode("utf-8")
    codec = get_jwt_codec()
    if len(secret) < codec.MIN_SECRET_BYTES:
        msg = (
            f"JWT_SECRET_KEY must be at least {codec.MIN_SECRET_BYTES} bytes "
            f"for {codec.ALGORITHM}, got {len(secret)}"
        )
        raise WeakSecretError(msg)


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints.

    Returns
    -------
    APIRouter with all v1 endpoints mounted.
    """
    v1_router = APIRouter()

    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(users_router, prefix="/users", tags=["Users"])
    v1_router.include_router(
        communities_router,
        prefix="/communities",
        tags=["Communities"],
    )

    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.

    Raises
    ------
    WeakSecretError
        If the configured signing secret is too short for HS512
    """
    if settings is None:
        settings = get_settings()

    # Configure logging on first app creation (not on module import)
    _configure_logging(settings.log_level)
    _check_signing_secret(settings)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Community and property management backend.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    # Shared per-application resources, read by the dependencies
    engine = create_async_engine(
        settings.database_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_maker = async_sessionmaker(engine, expire_on_commit=False)
    app.state.mail_service = DevMailService()

    install_security_middleware(
        app,
        settings=settings,
        jwt_codec=get_jwt_codec(),
        admin_lookup=SessionScopedCommunityAdminLookup(app.state.session_maker),
    )

    # Added last so CORS preflight is answered before the request filters
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[USER_ID_HEADER, TOKEN_HEADER],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint.

        Unversioned for load balancer/monitoring compatibility.
        """
        return {
            "status": "healthy",
            "version": API_VERSION,
            "api_versions": ["v1"],
        }

    return app
