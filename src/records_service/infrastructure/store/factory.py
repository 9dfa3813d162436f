"""Record Store Factory

Factory pattern for deployment-neutral store selection.
Chooses between process memory and a SQL database based on DATABASE_URL.
"""

import logging
import os
from typing import Optional

from records_service.config.settings import settings
from records_service.infrastructure.database.client import DatabaseClient
from records_service.infrastructure.store.memory_store import MemoryStore
from records_service.infrastructure.store.provider import RecordStore
from records_service.infrastructure.store.sql_store import SqlStore

logger = logging.getLogger(__name__)

# Singleton instance shared by every request handler
_store_instance: Optional[RecordStore] = None


def get_record_store() -> RecordStore:
    """Get or create the global record store instance.

    Uses the DATABASE_URL environment variable (or the ``database_url``
    setting) to determine the backend:
    - unset (default): in-memory store, lost on restart
    - set: SQL store on that connection string

    Example:
        ```python
        # Demo / development
        (no DATABASE_URL)

        # Single-node persistence
        DATABASE_URL=sqlite+aiosqlite:///./data/records.db

        # Postgres
        DATABASE_URL=postgresql+asyncpg://records:secret@db:5432/records
        ```
    """
    global _store_instance

    if _store_instance is not None:
        return _store_instance

    database_url = os.getenv("DATABASE_URL") or settings.database_url

    if database_url:
        _store_instance = SqlStore(DatabaseClient(database_url))
        logger.info(f"SQL record store selected: {database_url}")
    else:
        _store_instance = MemoryStore()
        logger.info("In-memory record store selected")

    return _store_instance


def reset_record_store():
    """Reset the global record store instance.

    Used for testing or reconfiguration. Should not be called in production code.
    """
    global _store_instance
    _store_instance = None
    logger.warning("Record store instance reset")
