"""
Tests for ProfileService merge semantics against both store backends.
"""

import pytest

from homepage.errors import StorageError, ValidationError
from homepage.schemas.profile import DEFAULT_PROFILE
from homepage.services.profile import ProfileService
from homepage.store import CredentialStore


@pytest.fixture
def profile_service(store: CredentialStore) -> ProfileService:
    return ProfileService(store)


class TestGetProfile:
    async def test_default_when_nothing_stored(self, empty_store: CredentialStore):
        profile = await ProfileService(empty_store).get_profile()
        assert profile == DEFAULT_PROFILE

    async def test_default_is_a_copy(self, empty_store: CredentialStore):
        profile = await ProfileService(empty_store).get_profile()
        profile.skills.clear()
        assert DEFAULT_PROFILE.skills

    async def test_invalid_stored_document_falls_back_to_default(self, empty_store: CredentialStore):
        """A stored profile without a name and with an out-of-range level is not served."""
        await empty_store.put_profile({"title": "no name", "skills": [{"name": "X", "level": 150}]})
        assert await ProfileService(empty_store).get_profile() == DEFAULT_PROFILE

    async def test_read_failure_falls_back_to_default(self, empty_store: CredentialStore, monkeypatch):
        async def broken():
            raise StorageError()

        monkeypatch.setattr(empty_store, "get_profile", broken)
        assert await ProfileService(empty_store).get_profile() == DEFAULT_PROFILE


class TestUpdateProfile:
    async def test_name_only_update_keeps_other_fields(self, profile_service: ProfileService):
        before = await profile_service.get_profile()
        await profile_service.update_profile({"name": "X"})
        after = await profile_service.get_profile()
        assert after.name == "X"
        assert after.model_copy(update={"name": before.name}) == before

    async def test_empty_partial_rejected_and_document_unchanged(
        self, profile_service: ProfileService
    ):
        before = await profile_service.get_profile()
        with pytest.raises(ValidationError):
            await profile_service.update_profile({})
        assert await profile_service.get_profile() == before

    async def test_merge_fidelity(self, profile_service: ProfileService):
        partial = {
            "name": "Grace",
            "bio": "Compilers",
            "contact": {"email": "grace@example.com", "location": "Arlington"},
            "links": [{"type": "website", "label": "Home", "url": "https://example.com"}],
        }
        await profile_service.update_profile(partial)
        document = (await profile_service.get_profile()).to_document()
        for key, value in partial.items():
            assert document[key] == value

    async def test_disjoint_updates_accumulate(self, profile_service: ProfileService):
        await profile_service.update_profile({"name": "Grace", "title": "Rear Admiral"})
        await profile_service.update_profile({"name": "Grace", "about": "COBOL"})
        profile = await profile_service.get_profile()
        assert profile.title == "Rear Admiral"
        assert profile.about == "COBOL"

    async def test_partial_contact_replaces_whole_contact(self, profile_service: ProfileService):
        await profile_service.update_profile({"name": "Grace", "contact": {"location": "NYC"}})
        profile = await profile_service.get_profile()
        assert profile.contact.location == "NYC"
        assert profile.contact.email == ""

    async def test_update_on_empty_store_merges_onto_default(self, empty_store: CredentialStore):
        service = ProfileService(empty_store)
        updated = await service.update_profile({"name": "Grace"})
        assert updated.title == DEFAULT_PROFILE.title
        assert await empty_store.get_profile() == updated.to_document()

    async def test_invalid_nested_value_is_validation_error(self, profile_service: ProfileService):
        with pytest.raises(ValidationError) as exc_info:
            await profile_service.update_profile({"name": "Grace", "skills": [{"name": "X", "level": -1}]})
        assert exc_info.value.field == "skills.0.level"

    async def test_write_failure_is_storage_error(self, store: CredentialStore, monkeypatch):
        async def broken(document):
            raise StorageError()

        monkeypatch.setattr(store, "put_profile", broken)
        with pytest.raises(StorageError):
            await ProfileService(store).update_profile({"name": "Grace"})
