"""
Session Store

Server-side sessions keyed by an opaque cookie value. Each session holds the
authenticated user's id and a snapshot of the public user record; the admin
gate reads the role from that snapshot. Sessions live in process memory and
end on logout, expiry or restart.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from records_service.config.settings import settings
from records_service.core.security import generate_session_token

logger = logging.getLogger(__name__)


@dataclass
class Session:
    token: str
    user_id: int
    user: Dict[str, Any]
    expires_at: datetime
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def role(self) -> Optional[str]:
        return self.user.get("role")

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


class SessionStore:
    """In-process session table"""

    def __init__(self, max_age_seconds: int = None):
        self.max_age_seconds = max_age_seconds or settings.session_max_age_seconds
        self._sessions: Dict[str, Session] = {}

    def create(self, user: Dict[str, Any]) -> Session:
        token = generate_session_token()
        session = Session(
            token=token,
            user_id=user["id"],
            user=dict(user),
            expires_at=datetime.now(timezone.utc) + timedelta(seconds=self.max_age_seconds),
        )
        self._sessions[token] = session
        logger.info(f"Session created for user {session.user_id}")
        return session

    def get(self, token: Optional[str]) -> Optional[Session]:
        if not token:
            return None
        session = self._sessions.get(token)
        if session is None:
            return None
        if session.expires_at <= datetime.now(timezone.utc):
            del self._sessions[token]
            return None
        return session

    def destroy(self, token: Optional[str]) -> bool:
        if not token:
            return False
        return self._sessions.pop(token, None) is not None

    def refresh_user(self, user: Dict[str, Any]) -> None:
        """Replace the cached snapshot in every session of this user"""
        for session in self._sessions.values():
            if session.user_id == user["id"]:
                session.user = dict(user)

    def clear(self) -> None:
        self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)


# Global session store instance
session_store = SessionStore()
