"""Profile document reads and shallow-merge updates."""

import logging

from pydantic import ValidationError as SchemaError

from homepage.errors import StorageError, ValidationError
from homepage.schemas.profile import DEFAULT_PROFILE, ProfileDocument
from homepage.store.base import CredentialStore

logger = logging.getLogger(__name__)


class ProfileService:
    def __init__(self, store: CredentialStore):
        self.store = store

    async def get_profile(self) -> ProfileDocument:
        """Return the stored profile, falling back to the default one. Never raises."""
        try:
            document = await self.store.get_profile()
        except StorageError:
            logger.warning("Serving default profile because the stored one could not be read")
            return DEFAULT_PROFILE.model_copy(deep=True)
        if document is None:
            return DEFAULT_PROFILE.model_copy(deep=True)
        try:
            return ProfileDocument.model_validate(document)
        except SchemaError:
            logger.exception("Serving default profile because the stored one is invalid")
            return DEFAULT_PROFILE.model_copy(deep=True)

    async def update_profile(self, partial: dict) -> ProfileDocument:
        """
        Merge ``partial`` into the stored profile and persist the result.

        The merge is shallow: each top-level key in ``partial`` replaces the
        stored value wholesale (``contact`` included), keys not in ``partial``
        are kept.

        Raises:
            ValidationError: ``name`` missing or empty
            StorageError: the stored document could not be read or written
        """
        name = partial.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Name cannot be empty", field="name")

        current = await self.store.get_profile()
        if current is None:
            current = DEFAULT_PROFILE.to_document()

        try:
            merged = ProfileDocument.model_validate({**current, **partial})
        except SchemaError as exc:
            error = exc.errors()[0]
            field = ".".join(str(loc) for loc in error["loc"])
            raise ValidationError(f"{field}: {error['msg']}", field=field) from exc
        await self.store.put_profile(merged.to_document())
        logger.info("Profile updated (%s)", ", ".join(sorted(partial)))
        return merged
