"""Admin authentication and account management."""

import asyncio
import logging

from homepage.auth.jwt import create_session_token, decode_session_token
from homepage.auth.password import hash_password, validate_password_strength, verify_password
from homepage.errors import AuthorizationError, InvalidCredentials, StorageError, ValidationError
from homepage.schemas.account import Identity
from homepage.store.base import CredentialStore

logger = logging.getLogger(__name__)


class AuthService:
    """Service for logging in, verifying sessions and changing the admin account."""

    def __init__(self, store: CredentialStore):
        self.store = store

    async def login(self, username: str, password: str) -> tuple[str, Identity]:
        """
        Check credentials against the admin account and issue a session token.

        Returns:
            (token, identity) for the admin account.

        Raises:
            ValidationError: username or password missing
            InvalidCredentials: unknown username or wrong password
        """
        if not username or not password:
            raise ValidationError("Username and password are required")

        account = await self.store.get_account()
        if account is None or account.username != username:
            logger.info("Rejected login for unknown username %r", username)
            raise InvalidCredentials()

        if not await asyncio.to_thread(verify_password, password, account.password_hash):
            logger.info("Rejected login for %r: wrong password", username)
            raise InvalidCredentials()

        identity = Identity(username=account.username, role=account.role)
        return create_session_token(identity.username, identity.role), identity

    def verify(self, token: str) -> Identity:
        """Return the identity a session token asserts. See ``decode_session_token``."""
        return decode_session_token(token)

    @staticmethod
    def require_role(identity: Identity, role: str) -> None:
        if identity.role != role:
            raise AuthorizationError()

    async def update_password(self, current_password: str, new_password: str) -> None:
        """
        Replace the admin password.

        The new password is checked against the policy before the current one
        is verified. The stored hash is untouched on every failure.

        Raises:
            ValidationError: a password is missing
            WeakPasswordError: new password breaks the policy
            InvalidCredentials: current password is wrong
            StorageError: no account exists or the write failed
        """
        if not current_password or not new_password:
            raise ValidationError("Current password and new password are required")
        validate_password_strength(new_password)

        account = await self.store.get_account()
        if account is None:
            logger.error("Password change requested but no admin account exists")
            raise StorageError("Admin account does not exist")

        if not await asyncio.to_thread(verify_password, current_password, account.password_hash):
            raise InvalidCredentials("Current password is incorrect")

        account.password_hash = await asyncio.to_thread(hash_password, new_password)
        account.touch()
        await self.store.put_account(account)
        logger.info("Password updated for %r", account.username)

    async def update_username(self, new_username: str) -> None:
        """
        Rename the admin account.

        Tokens issued under the old name stay valid until they expire.
        """
        new_username = (new_username or "").strip()
        if not new_username:
            raise ValidationError("Username cannot be empty", field="username")

        account = await self.store.get_account()
        if account is None:
            logger.error("Account update requested but no admin account exists")
            raise StorageError("Admin account does not exist")

        old_username = account.username
        account.username = new_username
        account.touch()
        await self.store.put_account(account)
        logger.info("Admin account renamed from %r to %r", old_username, new_username)
