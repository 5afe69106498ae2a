"""Authentication dependencies for FastAPI endpoints."""

from fastapi import Depends, Header, Request

from homepage.errors import InvalidToken, MissingToken
from homepage.schemas.account import ADMIN_ROLE, Identity
from homepage.services.auth import AuthService
from homepage.services.profile import ProfileService
from homepage.store.base import CredentialStore


def get_store(request: Request) -> CredentialStore:
    """Dependency that provides the store opened in the app lifespan."""
    return request.app.state.store


def get_auth_service(store: CredentialStore = Depends(get_store)) -> AuthService:
    return AuthService(store)


def get_profile_service(store: CredentialStore = Depends(get_store)) -> ProfileService:
    return ProfileService(store)


async def get_current_identity(
    authorization: str | None = Header(default=None),
    auth_service: AuthService = Depends(get_auth_service),
) -> Identity:
    """
    Validate the ``Authorization: Bearer <token>`` header.

    Raises:
        MissingToken: header absent or not a bearer credential
        InvalidToken: token malformed or signed with another secret
        ExpiredSessionError: token past its expiry
    """
    if not authorization:
        raise MissingToken()

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer":
        raise MissingToken()
    token = token.strip()
    if not token:
        raise InvalidToken()

    return auth_service.verify(token)


async def require_admin(
    identity: Identity = Depends(get_current_identity),
) -> Identity:
    """
    Require the authenticated identity to have the admin role.

    Raises:
        AuthorizationError: 403 if the role is not admin
    """
    AuthService.require_role(identity, ADMIN_ROLE)
    return identity
