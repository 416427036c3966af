"""Protocolo de canal de notificação (chat webhook)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain import SubscriberEvent, SyncResult


class NotificationChannelProtocol(Protocol):
    """Canal que publica uma mensagem formatada por evento confirmado.

    ``send`` pode levantar exceção; o Notifier isola falhas por canal.
    """

    name: str

    async def send(self, event: SubscriberEvent, sync_result: SyncResult) -> None: ...
