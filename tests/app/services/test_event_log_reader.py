"""Testes do EventLogReader (lookup, página e stats)."""

from __future__ import annotations

import pytest

from app.infra.stores import MemoryEventLogStore
from app.services import EventLogReader
from utils.errors import NotFoundError, StorageNotConfiguredError


async def _store_with_events(count: int) -> MemoryEventLogStore:
    store = MemoryEventLogStore()
    for i in range(count):
        email = f"user{i}@example.com"
        record = {"email": email, "timestamp": f"2026-01-01T00:00:{i:02d}"}
        await store.put(f"event_{1000 + i}_{email.replace('@', '_at_')}", record)
        await store.put(f"latest_{email.replace('@', '_at_')}", record)
    return store


class TestEventLogReader:
    @pytest.mark.asyncio
    async def test_latest_for_unknown_email(self) -> None:
        reader = EventLogReader(MemoryEventLogStore())

        with pytest.raises(NotFoundError, match="No events found for this email"):
            await reader.latest_for("x@y.com")

    @pytest.mark.asyncio
    async def test_latest_for_known_email(self) -> None:
        reader = EventLogReader(await _store_with_events(2))

        result = await reader.latest_for("user1@example.com")

        assert result["email"] == "user1@example.com"
        assert result["event"]["timestamp"] == "2026-01-01T00:00:01"

    @pytest.mark.asyncio
    async def test_recent_page_is_newest_first(self) -> None:
        reader = EventLogReader(await _store_with_events(5))

        page = await reader.recent(limit=3)

        assert [event["email"] for event in page["events"]] == [
            "user4@example.com",
            "user3@example.com",
            "user2@example.com",
        ]
        assert page["total"] == 3
        assert page["has_more"] is True

    @pytest.mark.asyncio
    async def test_recent_complete_listing(self) -> None:
        reader = EventLogReader(await _store_with_events(2))

        page = await reader.recent()

        assert page["total"] == 2
        assert page["has_more"] is False

    @pytest.mark.asyncio
    async def test_stats(self) -> None:
        store = await _store_with_events(3)
        await store.put("event_9999_user0_at_example.com", {"email": "user0@example.com"})

        stats = await EventLogReader(store).stats()

        assert stats["total_events"] == 4
        assert stats["unique_subscribers"] == 3

    @pytest.mark.asyncio
    async def test_namespace_isolates_keys(self) -> None:
        store = await _store_with_events(1)

        stats = await EventLogReader(store, namespace="other:").stats()

        assert stats["total_events"] == 0

    @pytest.mark.asyncio
    async def test_without_store(self) -> None:
        reader = EventLogReader(None)

        with pytest.raises(StorageNotConfiguredError, match="Event log storage not configured"):
            await reader.stats()
