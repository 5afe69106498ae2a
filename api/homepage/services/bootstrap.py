"""First-startup initialization of the store."""

import asyncio
import logging

from homepage.auth.password import hash_password
from homepage.config import DEFAULT_ADMIN_PASSWORD, settings
from homepage.schemas.account import ADMIN_ROLE, AdminAccount
from homepage.schemas.profile import DEFAULT_PROFILE
from homepage.store.base import CredentialStore

logger = logging.getLogger(__name__)


async def ensure_defaults(store: CredentialStore) -> None:
    """Create the admin account and the default profile if they are missing."""
    if await store.get_account() is None:
        account = AdminAccount(
            username=settings.admin_username,
            password_hash=await asyncio.to_thread(hash_password, settings.admin_password),
            role=ADMIN_ROLE,
        )
        await store.put_account(account)
        logger.info("Created admin account %r", account.username)
        if settings.admin_password == DEFAULT_ADMIN_PASSWORD:
            logger.warning("Admin account uses the default password; change it after logging in")

    if await store.get_profile() is None:
        await store.put_profile(DEFAULT_PROFILE.to_document())
        logger.info("Created default profile")
