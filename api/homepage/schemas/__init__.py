"""Pydantic schemas for request/response validation."""

from homepage.schemas.account import ADMIN_ROLE, AdminAccount, Identity
from homepage.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    UpdateAccountRequest,
    UpdatePasswordRequest,
    VerifyResponse,
)
from homepage.schemas.profile import (
    DEFAULT_PROFILE,
    Contact,
    Link,
    ProfileDocument,
    ProfileUpdate,
    ProfileUpdateResponse,
    Project,
    Skill,
)

__all__ = [
    "ADMIN_ROLE",
    "AdminAccount",
    "Identity",
    "LoginRequest",
    "LoginResponse",
    "VerifyResponse",
    "UpdateAccountRequest",
    "UpdatePasswordRequest",
    "MessageResponse",
    "Skill",
    "Project",
    "Link",
    "Contact",
    "ProfileDocument",
    "ProfileUpdate",
    "ProfileUpdateResponse",
    "DEFAULT_PROFILE",
]
