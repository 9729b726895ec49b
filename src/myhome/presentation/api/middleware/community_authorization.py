"""Community-scoped authorization middleware.

Guards the community management routes: only administrators of the
community named in the path may reach the handler.
"""

import logging
import re
from uuid import UUID

from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import JSONResponse
from starlette.types import ASGIApp

from myhome.application.context import Principal
from myhome.domain.community import CommunityAdminLookup
from myhome.domain.shared.exceptions import ErrorCode

logger = logging.getLogger(__name__)

# Any segment matches; ids the route would parse in another spelling are
# canonicalised before the lookup and anything unparseable is denied.
COMMUNITY_ADMINS_PATH = re.compile(r"/communities/(?P<community_id>[^/]+)/admins(?:/|$)")
COMMUNITY_AMENITIES_PATH = re.compile(r"/communities/(?P<community_id>[^/]+)/amenities(?:/|$)")

DENIED_MESSAGE = "Only administrators of this community may perform this operation"


def _canonical_community_id(segment: str) -> str | None:
    """Return the lowercase hyphenated form the route would see, or None."""
    try:
        return str(UUID(segment))
    except ValueError:
        return None


class CommunityAdminAuthorizationMiddleware(BaseHTTPMiddleware):
    """Allow a request on a guarded path only for the community's admins.

    Requests whose path does not match ``path_pattern`` pass through
    untouched. For matching requests (any HTTP method) the caller is
    denied with 403 when anonymous, when the id is not a UUID, when the
    community is unknown, or when their user id is not among the
    community's admins. Every spelling accepted by ``UUID()`` (hex,
    braced, ``urn:uuid:``) is checked against the same canonical id.
    On denial the route handler is never invoked.

    Must run after RequestAuthenticationMiddleware; a request without a
    principal is treated as anonymous.
    """

    def __init__(
        self,
        app: ASGIApp,
        path_pattern: re.Pattern[str],
        admin_lookup: CommunityAdminLookup,
    ):
        super().__init__(app)
        self._path_pattern = path_pattern
        self._admin_lookup = admin_lookup

    async def _is_allowed(self, principal: Principal, community_id: str | None) -> bool:
        if community_id is None or not principal.is_authenticated:
            return False

        admins = await self._admin_lookup.find_admins_of_community(community_id)
        if admins is None:
            return False
        return any(admin.user_id == principal.user_id for admin in admins)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        match = self._path_pattern.search(request.url.path)
        if match is None:
            return await call_next(request)

        community_id = _canonical_community_id(match.group("community_id"))
        principal = getattr(request.state, "principal", None) or Principal.anonymous()

        if not await self._is_allowed(principal, community_id):
            logger.warning(
                "Denied %s %s for %s: not an admin of community %s",
                request.method,
                request.url.path,
                principal,
                community_id,
            )
            return JSONResponse(
                status_code=status.HTTP_403_FORBIDDEN,
                content={
                    "detail": DENIED_MESSAGE,
                    "code": ErrorCode.COMMUNITY_ADMIN_REQUIRED.value,
                },
            )

        return await call_next(request)
