"""
Tests for first-startup initialization.
"""

from homepage.auth.password import verify_password
from homepage.schemas.profile import DEFAULT_PROFILE
from homepage.services.auth import AuthService
from homepage.services.bootstrap import ensure_defaults
from homepage.store import CredentialStore


class TestEnsureDefaults:
    async def test_creates_default_admin(self, empty_store: CredentialStore):
        await ensure_defaults(empty_store)
        account = await empty_store.get_account()
        assert account.username == "admin"
        assert account.role == "admin"
        assert account.password_hash != "admin123"
        assert verify_password("admin123", account.password_hash)

    async def test_default_login_works(self, empty_store: CredentialStore):
        await ensure_defaults(empty_store)
        token, identity = await AuthService(empty_store).login("admin", "admin123")
        assert token and identity.username == "admin"

    async def test_creates_default_profile(self, empty_store: CredentialStore):
        await ensure_defaults(empty_store)
        assert await empty_store.get_profile() == DEFAULT_PROFILE.to_document()

    async def test_uses_configured_credentials(
        self, empty_store: CredentialStore, test_settings, monkeypatch
    ):
        monkeypatch.setattr(test_settings, "admin_username", "owner")
        monkeypatch.setattr(test_settings, "admin_password", "Configured!1")
        await ensure_defaults(empty_store)
        _, identity = await AuthService(empty_store).login("owner", "Configured!1")
        assert identity.username == "owner"

    async def test_is_idempotent(self, empty_store: CredentialStore):
        await ensure_defaults(empty_store)
        account = await empty_store.get_account()
        await empty_store.put_profile({**DEFAULT_PROFILE.to_document(), "name": "Kept"})

        await ensure_defaults(empty_store)

        assert (await empty_store.get_account()).password_hash == account.password_hash
        assert (await empty_store.get_profile())["name"] == "Kept"
