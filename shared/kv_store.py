# shared/kv_store.py
from datetime import datetime, timezone
from typing import Any, List, Optional, Tuple

from fastapi import Depends
from sqlalchemy import Column, DateTime, Integer, JSON, String, delete, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from shared.db import Base, get_db
from shared.errors import Conflict


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class KvEntry(Base):
    __tablename__ = "kv_store"

    key = Column(String, primary_key=True)
    value = Column(JSON, nullable=False)
    revision = Column(Integer, nullable=False, default=1)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)


class KeyValueStore:
    """Key/JSON-value store kept in a single table.

    Every write bumps the row's revision. Passing ``expected_revision`` to
    :meth:`set` turns the write into a compare-and-swap: ``0`` means the key
    must not exist yet, any other value must match the stored revision.
    A failed swap raises :class:`Conflict`.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, key: str) -> Optional[Any]:
        value, _ = await self.get_with_revision(key)
        return value

    async def get_with_revision(self, key: str) -> Tuple[Optional[Any], int]:
        result = await self.db.execute(select(KvEntry.value, KvEntry.revision).where(KvEntry.key == key))
        row = result.first()
        if row is None:
            return None, 0
        return row.value, row.revision

    async def set(self, key: str, value: Any, expected_revision: Optional[int] = None) -> int:
        if expected_revision is None:
            return await self._upsert(key, value)
        if expected_revision == 0:
            return await self._insert(key, value)

        result = await self.db.execute(
            update(KvEntry)
            .where(KvEntry.key == key, KvEntry.revision == expected_revision)
            .values(value=value, revision=expected_revision + 1, updated_at=_utcnow())
        )
        if result.rowcount != 1:
            await self.db.rollback()
            raise Conflict(f"'{key}' was modified concurrently")
        await self.db.commit()
        return expected_revision + 1

    async def delete(self, key: str) -> None:
        await self.db.execute(delete(KvEntry).where(KvEntry.key == key))
        await self.db.commit()

    async def get_by_prefix(self, prefix: str) -> List[Any]:
        result = await self.db.execute(
            select(KvEntry.value).where(KvEntry.key.startswith(prefix, autoescape=True)).order_by(KvEntry.key)
        )
        return list(result.scalars().all())

    async def _upsert(self, key: str, value: Any) -> int:
        row = await self.db.get(KvEntry, key, populate_existing=True)
        if row is None:
            self.db.add(KvEntry(key=key, value=value, revision=1))
            try:
                await self.db.commit()
                return 1
            except IntegrityError:
                # Another writer created the key first; overwrite it instead
                await self.db.rollback()
                await self.db.execute(
                    update(KvEntry)
                    .where(KvEntry.key == key)
                    .values(value=value, revision=KvEntry.revision + 1, updated_at=_utcnow())
                )
                await self.db.commit()
                _, revision = await self.get_with_revision(key)
                return revision

        row.value = value
        row.revision = row.revision + 1
        await self.db.commit()
        return row.revision

    async def _insert(self, key: str, value: Any) -> int:
        self.db.add(KvEntry(key=key, value=value, revision=1))
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise Conflict(f"'{key}' was created concurrently")
        return 1


def get_kv_store(db: AsyncSession = Depends(get_db)) -> KeyValueStore:
    return KeyValueStore(db)
