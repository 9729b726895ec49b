"""Authentication router: email/password login."""

import logging

from fastapi import APIRouter, Response, status

from myhome.presentation.api.dependencies import AuthService
from myhome.presentation.api.schemas.auth import LoginRequest

logger = logging.getLogger(__name__)

router = APIRouter()

USER_ID_HEADER = "userId"
TOKEN_HEADER = "token"  # NOQA: S105


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    summary="Login with email and password",
    responses={
        200: {
            "description": "Login successful; credentials in the "
            f"`{USER_ID_HEADER}` and `{TOKEN_HEADER}` response headers",
        },
        401: {"description": "Invalid email or password"},
    },
)
async def login(request: LoginRequest, auth_service: AuthService) -> Response:
    """
    Authenticate and receive a bearer token.

    The token is returned in the ``token`` header and the caller's
    public id in the ``userId`` header; the body is empty. Every failure
    yields the same 401 response (INVALID_CREDENTIALS).
    """
    auth_data = await auth_service.login(request.email, request.password)

    return Response(
        status_code=status.HTTP_200_OK,
        headers={
            USER_ID_HEADER: auth_data.user_id,
            TOKEN_HEADER: auth_data.jwt_token,
        },
    )
