"""Use case de sincronização de subscriber com o SparkLoop.

Sequência: sync upstream (fatal em erro) → auditoria + notificação em
paralelo (best-effort). Os side effects são aguardados antes da
resposta para manter o correlation_id nos logs, mas seus resultados
são coletados e descartados; nenhuma falha altera o retorno.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.observability import get_correlation_id, record_latency, record_sync_outcome
from config.logging import log_side_effect_failure, mask_email

if TYPE_CHECKING:
    from collections.abc import Awaitable, Mapping

    from app.domain import SubscriberEvent, SyncResult
    from app.services import AuditRecorder, Notifier, SubscriberSynchronizer

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SyncSubscriberResult:
    """Saída do use case: evento processado e corpo do SparkLoop."""

    event: SubscriberEvent
    sync_result: SyncResult


async def run_best_effort(side_effects: Mapping[str, Awaitable[Any]]) -> None:
    """Executa side effects em paralelo e descarta falhas (apenas loga)."""
    names = list(side_effects)
    results = await asyncio.gather(*side_effects.values(), return_exceptions=True)
    for name, result in zip(names, results, strict=True):
        if isinstance(result, BaseException):
            log_side_effect_failure(logger, name, result)


class SyncSubscriberUseCase:
    """Orquestra sync + fan-out best-effort.

    Args:
        synchronizer: Upsert no SparkLoop
        audit_recorder: Gravação no log de eventos
        notifier: Notificações de chat
    """

    def __init__(
        self,
        synchronizer: SubscriberSynchronizer,
        audit_recorder: AuditRecorder,
        notifier: Notifier,
    ) -> None:
        self._synchronizer = synchronizer
        self._audit_recorder = audit_recorder
        self._notifier = notifier

    async def execute(self, event: SubscriberEvent) -> SyncSubscriberResult:
        """Sincroniza o evento.

        Raises:
            UpstreamError: Se o SparkLoop rejeitar o sync
        """
        started_at = time.perf_counter()
        outcome = await self._synchronizer.sync(event.email, event.status, event.metadata)
        sync_result = outcome.body
        record_sync_outcome(
            event.status.value,
            outcome.operation,
            event.source,
            get_correlation_id(),
        )

        await run_best_effort(
            {
                "audit_recorder": self._audit_recorder.record(event, sync_result),
                "notifier": self._notifier.notify(event, sync_result),
            }
        )

        record_latency(
            "pipeline",
            "sync_subscriber",
            (time.perf_counter() - started_at) * 1000,
            get_correlation_id(),
        )
        logger.info(
            "subscriber_sync_completed",
            extra={"email": mask_email(event.email), "status": event.status.value},
        )
        return SyncSubscriberResult(event=event, sync_result=sync_result)
