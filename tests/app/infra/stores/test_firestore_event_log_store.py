"""Testes do FirestoreEventLogStore com mock do client."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from app.infra.stores import FirestoreEventLogStore
from utils.errors import FirestoreUnavailableError


def _snapshot(key: str) -> MagicMock:
    snapshot = MagicMock()
    snapshot.get.side_effect = lambda field: key if field == "key" else None
    return snapshot


class TestFirestoreEventLogStore:
    @pytest.mark.asyncio
    async def test_put_writes_key_and_value(self) -> None:
        db = MagicMock()
        store = FirestoreEventLogStore(db)

        await store.put("latest_a/b", {"status": "confirmed"})

        db.collection.assert_called_with("subscriber_logs")
        db.collection.return_value.document.assert_called_with("latest_a%2Fb")
        db.collection.return_value.document.return_value.set.assert_called_once_with(
            {"key": "latest_a/b", "value": {"status": "confirmed"}}
        )

    @pytest.mark.asyncio
    async def test_get_existing_and_missing(self) -> None:
        db = MagicMock()
        document = db.collection.return_value.document.return_value
        document.get.return_value = MagicMock(
            exists=True, to_dict=MagicMock(return_value={"key": "k", "value": {"a": 1}})
        )
        store = FirestoreEventLogStore(db, "custom")

        assert await store.get("k") == {"a": 1}
        db.collection.assert_called_with("custom")

        document.get.return_value = MagicMock(exists=False)
        assert await store.get("k") is None

    @pytest.mark.asyncio
    async def test_list_keys_uses_range_query(self) -> None:
        db = MagicMock()
        ordered = db.collection.return_value.where.return_value.where.return_value.order_by
        ordered.return_value.limit.return_value.stream.return_value = [
            _snapshot("event_3"),
            _snapshot("event_2"),
            _snapshot("event_1"),
        ]
        store = FirestoreEventLogStore(db)

        listing = await store.list_keys("event_", 2, newest_first=True)

        ordered.assert_called_once_with("key", direction="DESCENDING")
        ordered.return_value.limit.assert_called_once_with(3)
        assert listing.keys == ["event_3", "event_2"]
        assert listing.list_complete is False

    @pytest.mark.asyncio
    async def test_errors_are_wrapped(self) -> None:
        db = MagicMock()
        db.collection.side_effect = RuntimeError("unavailable")
        store = FirestoreEventLogStore(db)

        with pytest.raises(FirestoreUnavailableError):
            await store.put("k", {})
        with pytest.raises(FirestoreUnavailableError):
            await store.list_keys("event_")
