"""Relational store backed by async SQLAlchemy."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from homepage.database import create_engine, create_sessionmaker, init_db
from homepage.errors import StorageError
from homepage.models import AdminAccountRow, DocumentRow
from homepage.schemas.account import ADMIN_ROLE, AdminAccount
from homepage.store.base import PROFILE_KEY, CredentialStore

logger = logging.getLogger(__name__)


class SQLStore(CredentialStore):
    """Admin account in ``admin_accounts``, profile as a JSON row in ``documents``."""

    def __init__(self, database_url: str):
        self.engine = create_engine(database_url)
        self.sessionmaker = create_sessionmaker(self.engine)

    async def init(self) -> None:
        try:
            await init_db(self.engine)
        except SQLAlchemyError as exc:
            logger.exception("Failed to initialize database schema")
            raise StorageError() from exc

    async def close(self) -> None:
        await self.engine.dispose()

    async def get_account(self) -> AdminAccount | None:
        try:
            async with self.sessionmaker() as session:
                result = await session.execute(
                    select(AdminAccountRow).where(AdminAccountRow.role == ADMIN_ROLE).limit(1)
                )
                row = result.scalar_one_or_none()
        except SQLAlchemyError as exc:
            logger.exception("Failed to load admin account")
            raise StorageError("Failed to load stored data") from exc

        if row is None:
            return None
        return AdminAccount(
            id=row.id,
            username=row.username,
            password_hash=row.password_hash,
            role=row.role,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    async def put_account(self, account: AdminAccount) -> None:
        try:
            async with self.sessionmaker() as session:
                result = await session.execute(
                    select(AdminAccountRow).where(AdminAccountRow.role == ADMIN_ROLE).limit(1)
                )
                row = result.scalar_one_or_none()
                if row is None:
                    row = AdminAccountRow(created_at=account.created_at)
                    session.add(row)
                row.username = account.username
                row.password_hash = account.password_hash
                row.role = account.role
                row.updated_at = account.updated_at
                await session.commit()
        except SQLAlchemyError as exc:
            logger.exception("Failed to save admin account")
            raise StorageError("Failed to save data") from exc

    async def get_profile(self) -> dict | None:
        try:
            async with self.sessionmaker() as session:
                row = await session.get(DocumentRow, PROFILE_KEY)
        except SQLAlchemyError as exc:
            logger.exception("Failed to load profile document")
            raise StorageError("Failed to load stored data") from exc
        if row is None:
            return None
        if not isinstance(row.content, dict):
            logger.error("Profile document row does not hold a JSON object")
            raise StorageError("Failed to load stored data")
        return row.content

    async def put_profile(self, document: dict) -> None:
        try:
            async with self.sessionmaker() as session:
                row = await session.get(DocumentRow, PROFILE_KEY)
                if row is None:
                    session.add(DocumentRow(key=PROFILE_KEY, content=document))
                else:
                    row.content = document
                await session.commit()
        except SQLAlchemyError as exc:
            logger.exception("Failed to save profile document")
            raise StorageError("Failed to save data") from exc
