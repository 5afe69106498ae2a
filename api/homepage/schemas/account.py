"""Admin account and identity schemas."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field

ADMIN_ROLE = "admin"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AdminAccount(BaseModel):
    """Stored admin account, independent of the persistence medium."""

    id: int = 1
    username: str
    password_hash: str
    role: str = ADMIN_ROLE
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    def touch(self) -> None:
        self.updated_at = _utcnow()


class Identity(BaseModel):
    """The verified subject of a session token."""

    username: str
    role: str
