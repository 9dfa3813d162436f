"""
Database Models

SQLAlchemy ORM models backing the SQL record store. Records of every kind
share one table; the fields live in a JSON payload.
"""

from sqlalchemy import Column, String, Integer, DateTime, JSON
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class RecordDB(Base):
    """One stored record of any kind"""

    __tablename__ = "records"

    kind = Column(String(50), primary_key=True)
    record_id = Column(Integer, primary_key=True)
    payload = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, index=True)

    def __repr__(self):
        return f"<RecordDB(kind='{self.kind}', record_id={self.record_id})>"


class RecordSequenceDB(Base):
    """Last id handed out per kind, so ids are never reused after a delete"""

    __tablename__ = "record_sequences"

    kind = Column(String(50), primary_key=True)
    last_id = Column(Integer, nullable=False, default=0)


class PasswordResetTokenDB(Base):
    """Outstanding password reset token"""

    __tablename__ = "password_reset_tokens"

    token = Column(String(128), primary_key=True)
    user_id = Column(Integer, nullable=False, index=True)
    expires_at = Column(DateTime(timezone=True), nullable=False)
