"""Database layer"""

from .client import DatabaseClient
from .models import Base, PasswordResetTokenDB, RecordDB, RecordSequenceDB

__all__ = ["DatabaseClient", "Base", "PasswordResetTokenDB", "RecordDB", "RecordSequenceDB"]
