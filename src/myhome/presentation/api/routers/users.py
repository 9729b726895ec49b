"""User account router: registration, email confirmation, password reset."""

import logging

from fastapi import APIRouter, status

from myhome.domain.shared.exceptions import (
    AccessDeniedError,
    ErrorCode,
    ValidationError,
)
from myhome.domain.user import UnknownUserError
from myhome.presentation.api.dependencies import (
    CurrentPrincipal,
    DBSession,
    UserServiceDep,
)
from myhome.presentation.api.schemas.users import (
    CreateUserRequest,
    MessageResponse,
    PasswordAction,
    PasswordRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_TOKEN_MESSAGE = "The link or code is invalid or has expired"


def _invalid_security_token() -> ValidationError:
    return ValidationError(
        INVALID_TOKEN_MESSAGE,
        code=ErrorCode.INVALID_SECURITY_TOKEN,
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered, confirmation mail sent"},
        400: {"description": "Weak password"},
        409: {"description": "Email already registered"},
    },
)
async def create_user(
    request: CreateUserRequest,
    user_service: UserServiceDep,
    session: DBSession,
) -> UserResponse:
    user = await user_service.create_user(
        name=request.name,
        email=request.email,
        password=request.password,
    )
    await session.commit()
    return UserResponse.from_domain(user)


@router.get(
    "/{user_id}/email-confirm/{email_confirm_token}",
    summary="Confirm the email address",
    responses={400: {"description": "Invalid, expired or used token"}},
)
async def confirm_email(
    user_id: str,
    email_confirm_token: str,
    user_service: UserServiceDep,
    session: DBSession,
) -> MessageResponse:
    if not await user_service.confirm_email(user_id, email_confirm_token):
        await session.rollback()
        raise _invalid_security_token()

    await session.commit()
    return MessageResponse(message="Email address confirmed")


@router.get(
    "/{user_id}/email-confirm-resend",
    summary="Send a new email confirmation link",
    responses={400: {"description": "Unknown or already confirmed user"}},
)
async def resend_email_confirm(
    user_id: str,
    user_service: UserServiceDep,
    session: DBSession,
) -> MessageResponse:
    if not await user_service.resend_email_confirm(user_id):
        await session.rollback()
        raise ValidationError("Email confirmation cannot be resent for this user")

    await session.commit()
    return MessageResponse(message="Confirmation mail sent")


@router.post(
    "/password",
    summary="Request or perform a password reset",
    responses={
        400: {"description": "Unknown email, invalid code or weak password"},
    },
)
async def password_reset(
    action: PasswordAction,
    request: PasswordRequest,
    user_service: UserServiceDep,
    session: DBSession,
) -> MessageResponse:
    """
    Two-step password reset.

    ``action=FORGOT`` mails a reset code to ``email``. ``action=RESET``
    replaces the password if ``token`` is a valid, unused reset code for
    that email.
    """
    if action is PasswordAction.FORGOT:
        if not await user_service.request_reset_password(request.email):
            await session.rollback()
            raise ValidationError("Password reset could not be requested")
        await session.commit()
        return MessageResponse(message="Password reset code sent")

    if not request.token or not request.new_password:
        raise ValidationError("token and new_password are required for RESET")

    if not await user_service.reset_password(
        request.email,
        request.token,
        request.new_password,
    ):
        await session.rollback()
        raise _invalid_security_token()

    await session.commit()
    return MessageResponse(message="Password changed")


@router.get(
    "/{user_id}",
    summary="Get user details",
    responses={
        401: {"description": "Not authenticated"},
        403: {"description": "Not your account"},
        404: {"description": "User not found"},
    },
)
async def get_user_details(
    user_id: str,
    principal: CurrentPrincipal,
    user_service: UserServiceDep,
) -> UserResponse:
    if principal.user_id != user_id:
        logger.warning("%s denied access to user %s", principal, user_id)
        raise AccessDeniedError("You may only access your own account")

    user = await user_service.get_user_details(user_id)
    if user is None:
        raise UnknownUserError(user_id)
    return UserResponse.from_domain(user)
