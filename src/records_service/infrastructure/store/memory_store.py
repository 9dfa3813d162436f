"""In-Memory Record Store

Dict-of-dicts store with a per-kind id counter. State lives for the lifetime
of the process only.
"""

import copy
import logging
from collections import defaultdict
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from records_service.core.errors import NotFoundError
from records_service.infrastructure.store.provider import (
    Deriver,
    Record,
    RecordStore,
    next_timestamp,
    utcnow,
)

logger = logging.getLogger(__name__)


class MemoryStore(RecordStore):
    """Process-local record store.

    Single event loop, no locking: concurrent writers to one id are
    last-write-wins.
    """

    name = "memory"

    def __init__(self):
        self._tables: Dict[str, Dict[int, Record]] = defaultdict(dict)
        self._counters: Dict[str, int] = defaultdict(int)
        self._reset_tokens: Dict[str, Record] = {}
        logger.info("In-memory record store initialized (no persistence)")

    async def create(self, kind: str, fields: Record, derive: Optional[Deriver] = None) -> Record:
        self._counters[kind] += 1
        record_id = self._counters[kind]
        now = utcnow()

        record = dict(fields)
        if derive:
            record.update(derive(record_id))
        record.update(id=record_id, created_at=now, updated_at=now)

        self._tables[kind][record_id] = record
        return copy.deepcopy(record)

    async def get(self, kind: str, record_id: int) -> Optional[Record]:
        record = self._tables[kind].get(record_id)
        return copy.deepcopy(record) if record is not None else None

    async def update(self, kind: str, record_id: int, patch: Record) -> Record:
        existing = self._tables[kind].get(record_id)
        if existing is None:
            raise NotFoundError(f"{kind} record {record_id} not found")

        updated = {**existing, **patch}
        updated["id"] = record_id
        updated["created_at"] = existing["created_at"]
        updated["updated_at"] = next_timestamp(existing["updated_at"])

        self._tables[kind][record_id] = updated
        return copy.deepcopy(updated)

    async def delete(self, kind: str, record_id: int) -> None:
        if record_id not in self._tables[kind]:
            raise NotFoundError(f"{kind} record {record_id} not found")
        del self._tables[kind][record_id]

    async def list(self, kind: str) -> List[Record]:
        table = self._tables[kind]
        return [copy.deepcopy(table[key]) for key in sorted(table)]

    async def find_by(self, kind: str, field: str, value: Any) -> Optional[Record]:
        for record in self._tables[kind].values():
            if record.get(field) == value:
                return copy.deepcopy(record)
        return None

    async def save_reset_token(self, token: str, user_id: int, expires_at: datetime) -> None:
        self._reset_tokens[token] = {"token": token, "user_id": user_id, "expires_at": expires_at}

    async def get_reset_token(self, token: str) -> Optional[Record]:
        data = self._reset_tokens.get(token)
        if data is None:
            return None

        expires_at = data["expires_at"]
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        if expires_at < utcnow():
            del self._reset_tokens[token]
            return None

        return dict(data)

    async def delete_reset_token(self, token: str) -> None:
        self._reset_tokens.pop(token, None)

    async def health_check(self) -> bool:
        return True
