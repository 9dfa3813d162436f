"""SQL Record Store

Persistent record store on async SQLAlchemy. Enabled when DATABASE_URL is
set; keeps the same contract as MemoryStore so route handlers are unchanged.
"""

import logging
from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic_core import to_jsonable_python
from sqlalchemy import delete, select

from records_service.core.errors import NotFoundError
from records_service.infrastructure.database.client import DatabaseClient
from records_service.infrastructure.database.models import (
    PasswordResetTokenDB,
    RecordDB,
    RecordSequenceDB,
)
from records_service.infrastructure.store.provider import (
    Deriver,
    Record,
    RecordStore,
    next_timestamp,
    utcnow,
)

logger = logging.getLogger(__name__)

_RESERVED = ("id", "created_at", "updated_at")


def _aware(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone=True columns
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_record(row: RecordDB) -> Record:
    record = dict(row.payload or {})
    record["id"] = row.record_id
    record["created_at"] = _aware(row.created_at)
    record["updated_at"] = _aware(row.updated_at)
    return record


def _to_payload(fields: Record) -> Record:
    return to_jsonable_python({k: v for k, v in fields.items() if k not in _RESERVED})


class SqlStore(RecordStore):
    """Record store backed by a relational database.

    Every call runs in its own session and commits before returning.
    """

    name = "sql"

    def __init__(self, db_client: DatabaseClient):
        self.db = db_client

    async def initialize(self) -> None:
        await self.db.initialize()

    async def close(self) -> None:
        await self.db.close()

    async def _next_id(self, session, kind: str) -> int:
        sequence = await session.get(RecordSequenceDB, kind)
        if sequence is None:
            sequence = RecordSequenceDB(kind=kind, last_id=0)
            session.add(sequence)
        sequence.last_id += 1
        return sequence.last_id

    async def create(self, kind: str, fields: Record, derive: Optional[Deriver] = None) -> Record:
        async with self.db.get_session() as session:
            record_id = await self._next_id(session, kind)
            values = dict(fields)
            if derive:
                values.update(derive(record_id))

            now = utcnow()
            row = RecordDB(
                kind=kind,
                record_id=record_id,
                payload=_to_payload(values),
                created_at=now,
                updated_at=now,
            )
            session.add(row)
            await session.commit()

        logger.debug(f"Created {kind} record {record_id}")
        return _to_record(row)

    async def get(self, kind: str, record_id: int) -> Optional[Record]:
        async with self.db.get_session() as session:
            row = await session.get(RecordDB, (kind, record_id))
            return _to_record(row) if row is not None else None

    async def update(self, kind: str, record_id: int, patch: Record) -> Record:
        async with self.db.get_session() as session:
            row = await session.get(RecordDB, (kind, record_id))
            if row is None:
                raise NotFoundError(f"{kind} record {record_id} not found")

            row.payload = {**(row.payload or {}), **_to_payload(patch)}
            row.updated_at = next_timestamp(_aware(row.updated_at))
            await session.commit()
            return _to_record(row)

    async def delete(self, kind: str, record_id: int) -> None:
        async with self.db.get_session() as session:
            row = await session.get(RecordDB, (kind, record_id))
            if row is None:
                raise NotFoundError(f"{kind} record {record_id} not found")
            await session.delete(row)
            await session.commit()

    async def list(self, kind: str) -> List[Record]:
        async with self.db.get_session() as session:
            stmt = select(RecordDB).where(RecordDB.kind == kind).order_by(RecordDB.record_id)
            result = await session.execute(stmt)
            return [_to_record(row) for row in result.scalars().all()]

    async def find_by(self, kind: str, field: str, value: Any) -> Optional[Record]:
        wanted = to_jsonable_python(value)
        for record in await self.list(kind):
            if field in _RESERVED:
                if record.get(field) == value:
                    return record
            elif record.get(field) == wanted:
                return record
        return None

    async def save_reset_token(self, token: str, user_id: int, expires_at: datetime) -> None:
        async with self.db.get_session() as session:
            await session.merge(
                PasswordResetTokenDB(token=token, user_id=user_id, expires_at=expires_at)
            )
            await session.commit()

    async def get_reset_token(self, token: str) -> Optional[Record]:
        async with self.db.get_session() as session:
            row = await session.get(PasswordResetTokenDB, token)
            if row is None:
                return None

            expires_at = _aware(row.expires_at)
            if expires_at < utcnow():
                await session.delete(row)
                await session.commit()
                return None

            return {"token": row.token, "user_id": row.user_id, "expires_at": expires_at}

    async def delete_reset_token(self, token: str) -> None:
        async with self.db.get_session() as session:
            await session.execute(
                delete(PasswordResetTokenDB).where(PasswordResetTokenDB.token == token)
            )
            await session.commit()

    async def health_check(self) -> bool:
        return await self.db.health_check()
