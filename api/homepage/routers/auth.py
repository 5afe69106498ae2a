"""Authentication router for admin login and account management."""

from fastapi import APIRouter, Depends, Request, status

from homepage.auth.dependencies import get_auth_service, get_current_identity, require_admin
from homepage.config import settings
from homepage.middleware.rate_limit import limiter
from homepage.schemas.account import Identity
from homepage.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    UpdateAccountRequest,
    UpdatePasswordRequest,
    VerifyResponse,
)
from homepage.services.auth import AuthService

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
)
@limiter.limit(settings.login_rate_limit)
async def login(
    request: Request,
    data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    """
    Authenticate the admin and return a bearer token.

    The token is valid for 7 days and is not refreshable.
    """
    token, identity = await auth_service.login(data.username, data.password)
    return LoginResponse(token=token, user=identity)


@router.get(
    "/verify",
    response_model=VerifyResponse,
    status_code=status.HTTP_200_OK,
)
async def verify(
    identity: Identity = Depends(get_current_identity),
) -> VerifyResponse:
    """Return the identity behind the bearer token."""
    return VerifyResponse(user=identity)


@router.put(
    "/account",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
)
async def update_account(
    data: UpdateAccountRequest,
    _: Identity = Depends(require_admin),
    auth_service: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    """Rename the admin account."""
    await auth_service.update_username(data.username)
    return MessageResponse(message="Account updated successfully")


@router.put(
    "/password",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
)
async def update_password(
    data: UpdatePasswordRequest,
    _: Identity = Depends(require_admin),
    auth_service: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    """
    Change the admin password.

    The new password needs at least 8 characters, an uppercase letter, a
    lowercase letter and a special symbol.
    """
    await auth_service.update_password(data.current_password, data.new_password)
    return MessageResponse(message="Password updated successfully")
