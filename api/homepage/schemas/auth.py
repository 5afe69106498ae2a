"""Authentication schemas for request/response validation."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from homepage.schemas.account import Identity


class LoginRequest(BaseModel):
    """Admin login request schema."""

    username: str
    password: str


class LoginResponse(BaseModel):
    """Login response carrying the bearer token."""

    token: str
    user: Identity


class VerifyResponse(BaseModel):
    user: Identity


class UpdateAccountRequest(BaseModel):
    """Request to rename the admin account."""

    username: str = ""


class UpdatePasswordRequest(BaseModel):
    """Request to change the admin password. Accepts camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    current_password: str = ""
    new_password: str = ""


class MessageResponse(BaseModel):
    message: str
