"""Persistence backends for the admin account and profile document."""

from homepage.config import Settings
from homepage.store.base import CredentialStore
from homepage.store.json_file import JSONFileStore
from homepage.store.sql import SQLStore


def create_store(settings: Settings) -> CredentialStore:
    """Build the store selected by ``STORAGE_BACKEND``."""
    if settings.storage_backend == "sql":
        return SQLStore(settings.database_url)
    return JSONFileStore(settings.data_file)


__all__ = ["CredentialStore", "JSONFileStore", "SQLStore", "create_store"]
