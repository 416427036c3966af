"""Registro de auditoria dos eventos processados (best-effort).

Cada sync bem-sucedido gera duas escritas independentes:
- ``event_<epoch ms>_<email>``: entrada cronológica (listagem)
- ``latest_<email>``: sobrescrita do último evento do email (lookup)

Sem leitura prévia e sem transação entre as chaves: o último a
escrever vence. Falhas são logadas e nunca propagadas.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING

from app.domain import AuditRecord
from config.logging import log_side_effect_failure, mask_email

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain import SubscriberEvent, SyncResult
    from app.protocols.event_log_store import EventLogStoreProtocol

logger = logging.getLogger(__name__)

EVENT_KEY_PREFIX = "event_"
LATEST_KEY_PREFIX = "latest_"


def sanitize_email(email: str) -> str:
    """Forma do email usada nas chaves (``@`` → ``_at_``)."""
    return email.replace("@", "_at_")


def event_key(email: str, written_at_ms: int, namespace: str = "") -> str:
    return f"{namespace}{EVENT_KEY_PREFIX}{written_at_ms}_{sanitize_email(email)}"


def latest_key(email: str, namespace: str = "") -> str:
    return f"{namespace}{LATEST_KEY_PREFIX}{sanitize_email(email)}"


def _now_ms() -> int:
    return int(time.time() * 1000)


class AuditRecorder:
    """Grava AuditRecords no log de eventos.

    Args:
        store: Store key-value (None = log desativado, apenas loga)
        namespace: Prefixo opcional de todas as chaves
        clock_ms: Relógio em epoch ms (injetável em testes)
    """

    def __init__(
        self,
        store: EventLogStoreProtocol | None,
        namespace: str = "",
        clock_ms: Callable[[], int] | None = None,
    ) -> None:
        self._store = store
        self._namespace = namespace
        self._clock_ms = clock_ms or _now_ms

    async def record(self, event: SubscriberEvent, sync_result: SyncResult) -> None:
        """Grava as duas chaves; nunca levanta exceção."""
        if self._store is None:
            logger.info("event_log_not_configured", extra={"component": "audit_recorder"})
            return

        try:
            record = AuditRecord(event=event, sync_result=sync_result).to_dict()
            chronological = event_key(event.email, self._clock_ms(), self._namespace)
            latest = latest_key(event.email, self._namespace)
            results = await asyncio.gather(
                self._store.put(chronological, record),
                self._store.put(latest, record),
                return_exceptions=True,
            )
        except Exception as exc:
            log_side_effect_failure(logger, "audit_recorder", exc)
            return

        failed = False
        for key_kind, result in zip(("event", "latest"), results, strict=True):
            if isinstance(result, BaseException):
                failed = True
                log_side_effect_failure(logger, "audit_recorder", result, key_kind=key_kind)

        if not failed:
            logger.info(
                "event_recorded",
                extra={"email": mask_email(event.email), "status": event.status.value},
            )
