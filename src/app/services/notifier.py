"""Fan-out best-effort de notificações para canais de chat.

Só dispara para status ``confirmed``. Os canais rodam em paralelo e são
independentes: a falha de um não impede a tentativa dos outros, e
nenhuma falha chega ao chamador.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from app.domain import SubscriberStatus
from config.logging import log_side_effect_failure, mask_email

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain import SubscriberEvent, SyncResult
    from app.protocols.notification_channel import NotificationChannelProtocol

logger = logging.getLogger(__name__)


class Notifier:
    """Dispara uma mensagem por canal configurado."""

    def __init__(self, channels: Sequence[NotificationChannelProtocol] = ()) -> None:
        self._channels = list(channels)

    @property
    def channel_names(self) -> list[str]:
        return [channel.name for channel in self._channels]

    async def notify(self, event: SubscriberEvent, sync_result: SyncResult) -> None:
        """Envia para todos os canais; nunca levanta exceção."""
        if event.status is not SubscriberStatus.CONFIRMED or not self._channels:
            return

        results = await asyncio.gather(
            *(channel.send(event, sync_result) for channel in self._channels),
            return_exceptions=True,
        )
        for channel, result in zip(self._channels, results, strict=True):
            if isinstance(result, BaseException):
                log_side_effect_failure(logger, f"notifier.{channel.name}", result)
            else:
                logger.info(
                    "notification_dispatched",
                    extra={"channel": channel.name, "email": mask_email(event.email)},
                )
