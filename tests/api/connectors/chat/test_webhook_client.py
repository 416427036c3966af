"""Testes dos canais de chat (Discord/Slack) via MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from api.connectors.chat import ChatWebhookChannel, create_chat_channels
from api.payload_builders.chat import DiscordPayloadBuilder
from app.domain import SubscriberEvent
from app.infra.http import HttpClient, HttpError
from config.settings import NotificationSettings

SYNC_RESULT = {"subscriber": {"uuid": "u1", "ref_code": "R1"}}


def _event() -> SubscriberEvent:
    return SubscriberEvent.create("ana@example.com", "confirmed", {"source": "ghost-webhook"})


@pytest.mark.asyncio
async def test_send_posts_built_payload() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(204)

    channel = ChatWebhookChannel(
        "discord",
        "https://discord.test/hook",
        DiscordPayloadBuilder(),
        HttpClient(transport=httpx.MockTransport(handler)),
    )
    await channel.send(_event(), SYNC_RESULT)

    assert str(seen[0].url) == "https://discord.test/hook"
    body = json.loads(seen[0].content)
    assert body["embeds"][0]["title"] == "🎉 New SparkLoop Subscriber!"


@pytest.mark.asyncio
async def test_send_raises_on_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500)

    channel = ChatWebhookChannel(
        "slack",
        "https://slack.test/hook",
        DiscordPayloadBuilder(),
        HttpClient(transport=httpx.MockTransport(handler)),
    )
    with pytest.raises(HttpError) as exc_info:
        await channel.send(_event(), SYNC_RESULT)

    assert exc_info.value.status_code == 500


def test_channels_created_only_for_configured_urls() -> None:
    assert create_chat_channels(NotificationSettings()) == []

    only_slack = create_chat_channels(NotificationSettings(slack_webhook_url="https://s"))
    assert [channel.name for channel in only_slack] == ["slack"]

    both = create_chat_channels(
        NotificationSettings(discord_webhook_url="https://d", slack_webhook_url="https://s")
    )
    assert [channel.name for channel in both] == ["discord", "slack"]
