"""Unit tests for the in-memory record store"""

from datetime import datetime, timedelta, timezone

import pytest

from records_service.core.errors import NotFoundError


@pytest.mark.unit
class TestMemoryStore:
    """Record CRUD on MemoryStore"""

    async def test_create_assigns_id_and_timestamps(self, memory_store):
        record = await memory_store.create("cases", {"title": "A"})

        assert record["id"] == 1
        assert record["title"] == "A"
        assert record["created_at"] == record["updated_at"]
        assert record["created_at"].tzinfo is not None

    async def test_ids_are_per_kind(self, memory_store):
        await memory_store.create("cases", {"title": "A"})
        plate = await memory_store.create("license_plates", {"plate_number": "X1"})

        assert plate["id"] == 1

    async def test_derive_receives_new_id(self, memory_store):
        await memory_store.create("cases", {"title": "A"})
        record = await memory_store.create(
            "cases", {"title": "B"}, derive=lambda rid: {"case_number": f"N-{rid}"}
        )

        assert record["case_number"] == "N-2"

    async def test_ids_not_reused_after_delete(self, memory_store):
        first = await memory_store.create("cases", {"title": "A"})
        await memory_store.delete("cases", first["id"])

        second = await memory_store.create("cases", {"title": "B"})
        assert second["id"] == 2

    async def test_update_merges_and_advances_timestamp(self, memory_store):
        record = await memory_store.create("cases", {"title": "A", "status": "Open"})

        first = await memory_store.update("cases", record["id"], {"status": "Closed"})
        second = await memory_store.update("cases", record["id"], {"title": "B"})

        assert second["status"] == "Closed"
        assert second["title"] == "B"
        assert record["updated_at"] < first["updated_at"] < second["updated_at"]
        assert second["created_at"] == record["created_at"]

    async def test_update_cannot_change_id(self, memory_store):
        record = await memory_store.create("cases", {"title": "A"})
        updated = await memory_store.update("cases", record["id"], {"id": 99})

        assert updated["id"] == record["id"]

    async def test_update_missing_raises(self, memory_store):
        with pytest.raises(NotFoundError):
            await memory_store.update("cases", 42, {"title": "B"})

    async def test_delete_missing_raises(self, memory_store):
        record = await memory_store.create("cases", {"title": "A"})
        await memory_store.delete("cases", record["id"])

        assert await memory_store.get("cases", record["id"]) is None
        with pytest.raises(NotFoundError):
            await memory_store.delete("cases", record["id"])

    async def test_returned_records_are_copies(self, memory_store):
        record = await memory_store.create("cases", {"title": "A", "tags": ["x"]})
        record["tags"].append("y")

        stored = await memory_store.get("cases", record["id"])
        assert stored["tags"] == ["x"]

    async def test_list_in_id_order(self, memory_store):
        for title in ("A", "B", "C"):
            await memory_store.create("cases", {"title": title})

        records = await memory_store.list("cases")
        assert [r["title"] for r in records] == ["A", "B", "C"]
        assert await memory_store.list("reports") == []

    async def test_find_by(self, memory_store):
        await memory_store.create("users", {"username": "a"})
        await memory_store.create("users", {"username": "b"})

        found = await memory_store.find_by("users", "username", "b")
        assert found["id"] == 2
        assert await memory_store.find_by("users", "username", "zzz") is None


@pytest.mark.unit
class TestMemoryStoreResetTokens:
    """Password reset token storage"""

    async def test_live_token_round_trip(self, memory_store):
        expires = datetime.now(timezone.utc) + timedelta(hours=1)
        await memory_store.save_reset_token("tok", 7, expires)

        data = await memory_store.get_reset_token("tok")
        assert data["user_id"] == 7

        await memory_store.delete_reset_token("tok")
        assert await memory_store.get_reset_token("tok") is None

    async def test_expired_token_is_dropped(self, memory_store):
        expires = datetime.now(timezone.utc) - timedelta(seconds=1)
        await memory_store.save_reset_token("old", 7, expires)

        assert await memory_store.get_reset_token("old") is None

    async def test_health_check(self, memory_store):
        assert await memory_store.health_check() is True
