"""Flat JSON file store."""

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError as SchemaError

from homepage.errors import StorageError
from homepage.schemas.account import AdminAccount
from homepage.store.base import ACCOUNT_KEY, PROFILE_KEY, CredentialStore

logger = logging.getLogger(__name__)


class JSONFileStore(CredentialStore):
    """
    Keeps both records in one JSON file: ``{"admin": {...}, "profile": {...}}``.

    Each write rewrites the whole file through a temp file and ``os.replace``
    so readers never see a half-written document. Both records share the
    file, so every read-modify-write of it runs under one lock.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._write_lock = asyncio.Lock()

    async def init(self) -> None:
        await asyncio.to_thread(self.path.parent.mkdir, parents=True, exist_ok=True)

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.exception("Failed to read data file %s", self.path)
            raise StorageError("Failed to load stored data") from exc
        if not isinstance(data, dict):
            logger.error("Data file %s does not contain a JSON object", self.path)
            raise StorageError("Failed to load stored data")
        return data

    def _save(self, data: dict) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(data, fh, ensure_ascii=False, indent=2)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            logger.exception("Failed to write data file %s", self.path)
            raise StorageError("Failed to save data") from exc

    def _put(self, key: str, value: dict) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    async def get_account(self) -> AdminAccount | None:
        data = await asyncio.to_thread(self._load)
        raw = data.get(ACCOUNT_KEY)
        if not raw:
            return None
        try:
            return AdminAccount.model_validate(raw)
        except SchemaError as exc:
            logger.exception("Admin record in %s is invalid", self.path)
            raise StorageError("Failed to load stored data") from exc

    async def put_account(self, account: AdminAccount) -> None:
        async with self._write_lock:
            await asyncio.to_thread(self._put, ACCOUNT_KEY, account.model_dump(mode="json"))

    async def get_profile(self) -> dict | None:
        data = await asyncio.to_thread(self._load)
        document = data.get(PROFILE_KEY)
        if not document:
            return None
        if not isinstance(document, dict):
            logger.error("Profile record in %s is not a JSON object", self.path)
            raise StorageError("Failed to load stored data")
        return document

    async def put_profile(self, document: dict) -> None:
        async with self._write_lock:
            await asyncio.to_thread(self._put, PROFILE_KEY, document)
