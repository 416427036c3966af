"""Canal de notificação via webhook de chat (Discord/Slack).

Cada canal faz um POST fire-and-forget do payload montado pelo builder.
Status não-2xx vira exceção; o Notifier isola e loga por canal.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

from api.payload_builders.chat import DiscordPayloadBuilder, SlackPayloadBuilder
from app.infra.http import HttpClient, HttpClientConfig, HttpError

if TYPE_CHECKING:
    import httpx

    from app.domain import SubscriberEvent, SyncResult
    from config.settings import NotificationSettings

logger = logging.getLogger(__name__)


class ChatPayloadBuilder(Protocol):
    def build(self, event: SubscriberEvent, sync_result: SyncResult) -> dict[str, Any]: ...


class ChatWebhookChannel:
    """Canal que publica em uma URL de incoming webhook.

    Args:
        name: Nome do canal para logs ("discord", "slack")
        webhook_url: URL do webhook
        builder: Builder do payload
        http_client: Cliente HTTP compartilhado
    """

    def __init__(
        self,
        name: str,
        webhook_url: str,
        builder: ChatPayloadBuilder,
        http_client: HttpClient,
    ) -> None:
        self.name = name
        self._webhook_url = webhook_url
        self._builder = builder
        self._http = http_client

    async def send(self, event: SubscriberEvent, sync_result: SyncResult) -> None:
        payload = self._builder.build(event, sync_result)
        response = await self._http.post(
            self._webhook_url,
            json=payload,
            headers={"Content-Type": "application/json"},
        )
        if response.status_code >= 400:
            raise HttpError(
                f"{self.name}_webhook_rejected",
                status_code=response.status_code,
            )
        logger.info(
            "chat_notification_sent",
            extra={"channel": self.name, "status_code": response.status_code},
        )


def create_chat_channels(
    settings: NotificationSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[ChatWebhookChannel]:
    """Cria canais habilitados (URL configurada) a partir das settings."""
    from config.settings import get_notification_settings

    notifications = settings or get_notification_settings()
    http_client = HttpClient(
        HttpClientConfig(timeout_seconds=notifications.request_timeout_seconds),
        transport=transport,
    )
    channels: list[ChatWebhookChannel] = []
    if notifications.discord_webhook_url:
        channels.append(
            ChatWebhookChannel(
                "discord",
                notifications.discord_webhook_url,
                DiscordPayloadBuilder(),
                http_client,
            )
        )
    if notifications.slack_webhook_url:
        channels.append(
            ChatWebhookChannel(
                "slack",
                notifications.slack_webhook_url,
                SlackPayloadBuilder(),
                http_client,
            )
        )
    return channels
