"""Unit tests for the server-side session table"""

from datetime import datetime, timedelta, timezone

import pytest

from records_service.core.sessions import SessionStore


@pytest.mark.unit
class TestSessionStore:

    def test_create_and_get(self):
        sessions = SessionStore(max_age_seconds=60)
        session = sessions.create({"id": 1, "username": "admin", "role": "admin"})

        found = sessions.get(session.token)
        assert found.user_id == 1
        assert found.is_admin
        assert len(sessions) == 1

    def test_unknown_or_empty_token(self):
        sessions = SessionStore()

        assert sessions.get(None) is None
        assert sessions.get("") is None
        assert sessions.get("nope") is None

    def test_expired_session_is_dropped(self):
        sessions = SessionStore()
        session = sessions.create({"id": 1, "role": "user"})
        session.expires_at = datetime.now(timezone.utc) - timedelta(seconds=1)

        assert sessions.get(session.token) is None
        assert len(sessions) == 0

    def test_destroy(self):
        sessions = SessionStore()
        session = sessions.create({"id": 1, "role": "user"})

        assert sessions.destroy(session.token) is True
        assert sessions.destroy(session.token) is False
        assert sessions.get(session.token) is None

    def test_refresh_user_updates_every_session_of_that_user(self):
        sessions = SessionStore()
        first = sessions.create({"id": 1, "role": "user"})
        second = sessions.create({"id": 1, "role": "user"})
        other = sessions.create({"id": 2, "role": "user"})

        sessions.refresh_user({"id": 1, "role": "admin"})

        assert first.is_admin and second.is_admin
        assert not other.is_admin

    def test_snapshot_is_a_copy(self):
        sessions = SessionStore()
        user = {"id": 1, "role": "user"}
        session = sessions.create(user)

        user["role"] = "admin"
        assert session.role == "user"
