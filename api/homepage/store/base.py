"""Storage abstraction for the admin account and the profile document."""

from abc import ABC, abstractmethod

from homepage.schemas.account import AdminAccount

ACCOUNT_KEY = "admin"
PROFILE_KEY = "profile"


class CredentialStore(ABC):
    """
    Get/put access to the two records the homepage keeps.

    Writes are whole-record replaces with last-write-wins semantics. There is
    no transaction spanning the account and the profile. Implementations raise
    ``StorageError`` for any read or write failure.
    """

    async def init(self) -> None:
        """Prepare the backing medium (create files, tables)."""

    async def close(self) -> None:
        """Release held resources."""

    @abstractmethod
    async def get_account(self) -> AdminAccount | None:
        """Return the admin account, or None if none was created yet."""

    @abstractmethod
    async def put_account(self, account: AdminAccount) -> None:
        """Replace the admin account."""

    @abstractmethod
    async def get_profile(self) -> dict | None:
        """Return the stored profile document, or None if never saved."""

    @abstractmethod
    async def put_profile(self, document: dict) -> None:
        """Replace the profile document."""
