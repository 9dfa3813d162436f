"""Record store module.

Provides deployment-neutral persistence via the RecordStore interface.
"""

from records_service.infrastructure.store.factory import get_record_store, reset_record_store
from records_service.infrastructure.store.provider import RecordStore
from records_service.infrastructure.store.memory_store import MemoryStore
from records_service.infrastructure.store.sql_store import SqlStore

__all__ = [
    "get_record_store",
    "reset_record_store",
    "RecordStore",
    "MemoryStore",
    "SqlStore",
]
