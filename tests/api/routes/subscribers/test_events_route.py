"""Testes das consultas GET ao log de eventos."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import pytest

from api.routes.subscribers import events
from api.routes.subscribers.events import parse_limit
from app.infra.stores import MemoryEventLogStore
from tests.api.routes.subscribers.helpers import build_relay, build_request
from utils.errors import ValidationError


def _json(response) -> dict:
    return json.loads(response.body.decode("utf-8"))


async def _seed(store: MemoryEventLogStore) -> None:
    await store.put("event_1000_a_at_b.com", {"email": "a@b.com", "timestamp": "2026-01-01T00:00:00"})
    await store.put("event_2000_c_at_d.com", {"email": "c@d.com", "timestamp": "2026-01-02T00:00:00"})
    await store.put("latest_a_at_b.com", {"email": "a@b.com", "status": "confirmed"})
    await store.put("latest_c_at_d.com", {"email": "c@d.com", "status": "bounced"})


class TestQueryEventLog:
    @pytest.mark.asyncio
    async def test_lookup_missing_email_returns_404(self) -> None:
        request = build_request(
            build_relay(), method="GET", path="/events", query_string="email=x@y.com"
        )

        response = await events.query_event_log(request, "events")

        assert response.status_code == 404
        assert _json(response)["error"] == "No events found for this email"

    @pytest.mark.asyncio
    async def test_lookup_existing_email(self) -> None:
        store = MemoryEventLogStore()
        await _seed(store)
        request = build_request(
            build_relay(store=store), method="GET", path="/events", query_string="email=a@b.com"
        )

        response = await events.query_event_log(request, "events")

        assert response.status_code == 200
        assert _json(response) == {
            "email": "a@b.com",
            "event": {"email": "a@b.com", "status": "confirmed"},
        }

    @pytest.mark.asyncio
    async def test_listing_newest_first_with_has_more(self) -> None:
        store = MemoryEventLogStore()
        await _seed(store)
        request = build_request(
            build_relay(store=store), method="GET", path="/api/events", query_string="limit=1"
        )

        response = await events.query_event_log(request, "api/events")
        payload = _json(response)

        assert response.status_code == 200
        assert [event["email"] for event in payload["events"]] == ["c@d.com"]
        assert payload["total"] == 1
        assert payload["has_more"] is True

    @pytest.mark.asyncio
    async def test_stats(self) -> None:
        store = MemoryEventLogStore()
        await _seed(store)
        request = build_request(build_relay(store=store), method="GET", path="/stats")

        response = await events.query_event_log(request, "stats")
        payload = _json(response)

        assert payload["total_events"] == 2
        assert payload["unique_subscribers"] == 2
        assert "last_updated" in payload

    @pytest.mark.asyncio
    async def test_unknown_path_returns_404(self) -> None:
        request = build_request(build_relay(), method="GET", path="/other")

        response = await events.query_event_log(request, "other")

        assert response.status_code == 404
        assert _json(response)["error"] == "Not found"

    @pytest.mark.asyncio
    async def test_requires_token_when_configured(self) -> None:
        relay = build_relay(auth_token="secret")

        denied = await events.query_event_log(
            build_request(relay, method="GET", path="/stats"), "stats"
        )
        by_query = await events.query_event_log(
            build_request(relay, method="GET", path="/stats", query_string="token=secret"),
            "stats",
        )
        by_header = await events.query_event_log(
            build_request(
                relay,
                method="GET",
                path="/stats",
                headers={"Authorization": "Bearer secret"},
            ),
            "stats",
        )

        assert denied.status_code == 401
        assert by_query.status_code == 200
        assert by_header.status_code == 200

    @pytest.mark.asyncio
    async def test_storage_not_configured(self) -> None:
        request = build_request(build_relay(with_store=False), method="GET", path="/stats")

        response = await events.query_event_log(request, "stats")

        assert response.status_code == 500
        assert _json(response)["error"] == "Event log storage not configured"

    @pytest.mark.asyncio
    async def test_store_failure_returns_generic_message(self) -> None:
        relay = build_relay()
        relay.event_log_reader.recent = AsyncMock(side_effect=RuntimeError("down"))
        request = build_request(relay, method="GET", path="/events")

        response = await events.query_event_log(request, "events")

        assert response.status_code == 500
        assert _json(response)["error"] == "Failed to retrieve events"

    @pytest.mark.asyncio
    async def test_stats_failure_returns_generic_message(self) -> None:
        relay = build_relay()
        relay.event_log_reader.stats = AsyncMock(side_effect=RuntimeError("down"))
        request = build_request(relay, method="GET", path="/stats")

        response = await events.query_event_log(request, "stats")

        assert response.status_code == 500
        assert _json(response)["error"] == "Failed to retrieve stats"

    @pytest.mark.asyncio
    async def test_invalid_limit_returns_400(self) -> None:
        request = build_request(build_relay(), method="GET", path="/events", query_string="limit=abc")

        response = await events.query_event_log(request, "events")

        assert response.status_code == 400


class TestParseLimit:
    def test_default(self) -> None:
        assert parse_limit(None) == 50
        assert parse_limit("") == 50

    def test_capped(self) -> None:
        assert parse_limit("5000") == 1000

    @pytest.mark.parametrize("raw", ["0", "-3", "1.5", "ten"])
    def test_invalid(self, raw: str) -> None:
        with pytest.raises(ValidationError):
            parse_limit(raw)
