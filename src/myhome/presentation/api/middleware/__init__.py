"""Request filters: bearer authentication and community authorization."""

from fastapi import FastAPI

from myhome.domain.community import CommunityAdminLookup
from myhome.presentation.api.middleware.authentication import (
    RequestAuthenticationMiddleware,
)
from myhome.presentation.api.middleware.community_authorization import (
    COMMUNITY_ADMINS_PATH,
    COMMUNITY_AMENITIES_PATH,
    CommunityAdminAuthorizationMiddleware,
)
from myhome_auth import JWTCodec
from myhome_config.settings import Settings


def install_security_middleware(
    app: FastAPI,
    settings: Settings,
    jwt_codec: JWTCodec,
    admin_lookup: CommunityAdminLookup,
) -> None:
    """Install the request filters in their required order.

    Starlette runs the middleware added last first, so authentication is
    added after the authorization filters that depend on its Principal.
    """
    for path_pattern in (COMMUNITY_ADMINS_PATH, COMMUNITY_AMENITIES_PATH):
        app.add_middleware(
            CommunityAdminAuthorizationMiddleware,
            path_pattern=path_pattern,
            admin_lookup=admin_lookup,
        )

    app.add_middleware(
        RequestAuthenticationMiddleware,
        jwt_codec=jwt_codec,
        secret=settings.jwt_secret_key.get_secret_value(),
        header_name=settings.auth_header_name,
        header_prefix=settings.auth_header_prefix,
    )


__all__ = [
    "COMMUNITY_ADMINS_PATH",
    "COMMUNITY_AMENITIES_PATH",
    "CommunityAdminAuthorizationMiddleware",
    "RequestAuthenticationMiddleware",
    "install_security_middleware",
]
