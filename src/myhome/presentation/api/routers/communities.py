"""Community router.

The admin and amenity routes are guarded by
CommunityAdminAuthorizationMiddleware; handlers there run only for
admins of the community in the path.
"""

import logging
from uuid import UUID

from fastapi import APIRouter, status

from myhome.presentation.api.dependencies import (
    CommunityServiceDep,
    CurrentPrincipal,
    DBSession,
)
from myhome.presentation.api.schemas.communities import (
    AddAdminsRequest,
    AddAmenitiesRequest,
    AmenityResponse,
    CommunityAdminResponse,
    CommunityResponse,
    CreateCommunityRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a community",
    responses={401: {"description": "Not authenticated"}},
)
async def create_community(
    request: CreateCommunityRequest,
    principal: CurrentPrincipal,
    community_service: CommunityServiceDep,
    session: DBSession,
) -> CommunityResponse:
    """Create a community administered by the caller."""
    community = await community_service.create_community(
        creator_user_id=principal.user_id,
        name=request.name,
        district=request.district,
    )
    await session.commit()
    return CommunityResponse.from_domain(community)


# The middleware canonicalises community_id with the same UUID parsing, so the
# id checked there is the id these handlers act on.
@router.get(
    "/{community_id}/admins",
    summary="List community admins",
    responses={403: {"description": "Caller is not an admin of this community"}},
)
async def list_admins(
    community_id: UUID,
    community_service: CommunityServiceDep,
) -> list[CommunityAdminResponse]:
    admins = await community_service.list_admins(str(community_id))
    return [CommunityAdminResponse.from_domain(admin) for admin in admins]


@router.post(
    "/{community_id}/admins",
    summary="Add community admins",
    responses={
        403: {"description": "Caller is not an admin of this community"},
        404: {"description": "Unknown user"},
    },
)
async def add_admins(
    community_id: UUID,
    request: AddAdminsRequest,
    community_service: CommunityServiceDep,
    session: DBSession,
) -> CommunityResponse:
    community = await community_service.add_admins(
        str(community_id),
        set(request.user_ids),
    )
    await session.commit()
    return CommunityResponse.from_domain(community)


@router.post(
    "/{community_id}/amenities",
    status_code=status.HTTP_201_CREATED,
    summary="Add amenities to a community",
    responses={403: {"description": "Caller is not an admin of this community"}},
)
async def add_amenities(
    community_id: UUID,
    request: AddAmenitiesRequest,
    community_service: CommunityServiceDep,
    session: DBSession,
) -> list[AmenityResponse]:
    amenities = await community_service.add_amenities(
        str(community_id),
        [(a.name, a.description, a.price) for a in request.amenities],
    )
    await session.commit()
    return [AmenityResponse.from_domain(amenity) for amenity in amenities]
