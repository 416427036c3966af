"""Testes do MemoryEventLogStore."""

from __future__ import annotations

import pytest

from app.infra.stores import MemoryEventLogStore


class TestMemoryEventLogStore:
    @pytest.mark.asyncio
    async def test_put_and_get(self) -> None:
        store = MemoryEventLogStore()
        await store.put("latest_a", {"status": "confirmed"})

        assert await store.get("latest_a") == {"status": "confirmed"}
        assert await store.get("missing") is None

    @pytest.mark.asyncio
    async def test_values_are_copies(self) -> None:
        store = MemoryEventLogStore()
        value = {"status": "confirmed"}
        await store.put("k", value)
        value["status"] = "bounced"

        fetched = await store.get("k")
        fetched["status"] = "unsubscribed"

        assert await store.get("k") == {"status": "confirmed"}

    @pytest.mark.asyncio
    async def test_list_by_prefix_with_limit(self) -> None:
        store = MemoryEventLogStore()
        for key in ("event_1", "event_3", "event_2", "latest_x"):
            await store.put(key, {})

        listing = await store.list_keys("event_", 2)
        newest = await store.list_keys("event_", 2, newest_first=True)
        everything = await store.list_keys("event_")

        assert listing.keys == ["event_1", "event_2"]
        assert listing.list_complete is False
        assert newest.keys == ["event_3", "event_2"]
        assert everything.keys == ["event_1", "event_2", "event_3"]
        assert everything.list_complete is True

    @pytest.mark.asyncio
    async def test_evicts_oldest_key_past_capacity(self) -> None:
        store = MemoryEventLogStore(max_records=2)
        for key in ("event_1", "event_2", "event_3"):
            await store.put(key, {})

        assert await store.get("event_1") is None
        assert (await store.list_keys("event_")).keys == ["event_2", "event_3"]
