"""Record Store Interface

Abstract base class defining the contract for record storage implementations.
Supports both process memory (default, non-persistent) and a SQL database
selected through DATABASE_URL.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional

Record = Dict[str, Any]
Deriver = Callable[[int], Dict[str, Any]]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def next_timestamp(previous: Optional[datetime]) -> datetime:
    """Current time, nudged forward so it is strictly after ``previous``"""
    now = utcnow()
    if previous is None:
        return now
    if previous.tzinfo is None:
        previous = previous.replace(tzinfo=timezone.utc)
    if now <= previous:
        return previous + timedelta(microseconds=1)
    return now


class RecordStore(ABC):
    """Abstract record store for deployment-neutral persistence.

    Records are plain dicts keyed by snake_case field names. Every record
    carries ``id``, ``created_at`` and ``updated_at``, all assigned by the
    store. Returned records are copies.
    """

    name = "abstract"

    async def initialize(self) -> None:
        """Prepare the backend (create tables, open connections)"""

    async def close(self) -> None:
        """Release backend resources"""

    @abstractmethod
    async def create(self, kind: str, fields: Record, derive: Optional[Deriver] = None) -> Record:
        """Insert a record under the next id for ``kind``.

        Args:
            kind: Entity table name (e.g. "cases")
            fields: Record fields, without id or timestamps
            derive: Optional callable receiving the new id and returning
                extra fields computed from it (e.g. a case number)

        Returns:
            The stored record
        """
        pass

    @abstractmethod
    async def get(self, kind: str, record_id: int) -> Optional[Record]:
        """Fetch a record by id, or None"""
        pass

    @abstractmethod
    async def update(self, kind: str, record_id: int, patch: Record) -> Record:
        """Shallow-merge ``patch`` over an existing record and bump ``updated_at``.

        Raises:
            NotFoundError: If no record has this id
        """
        pass

    @abstractmethod
    async def delete(self, kind: str, record_id: int) -> None:
        """Remove a record outright (no soft delete, no cascade).

        Raises:
            NotFoundError: If no record has this id
        """
        pass

    @abstractmethod
    async def list(self, kind: str) -> List[Record]:
        """All records of ``kind`` in id order"""
        pass

    @abstractmethod
    async def find_by(self, kind: str, field: str, value: Any) -> Optional[Record]:
        """First record whose ``field`` equals ``value``, or None"""
        pass

    @abstractmethod
    async def save_reset_token(self, token: str, user_id: int, expires_at: datetime) -> None:
        pass

    @abstractmethod
    async def get_reset_token(self, token: str) -> Optional[Record]:
        """Return ``{"token", "user_id", "expires_at"}`` for a live token.

        Expired tokens are removed and reported as missing.
        """
        pass

    @abstractmethod
    async def delete_reset_token(self, token: str) -> None:
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the backend is reachable"""
        pass
