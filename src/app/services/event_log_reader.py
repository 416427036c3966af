"""Consultas somente-leitura ao log de eventos (rotas GET)."""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from app.services.audit_recorder import EVENT_KEY_PREFIX, LATEST_KEY_PREFIX, latest_key
from utils.errors import NotFoundError, StorageNotConfiguredError

if TYPE_CHECKING:
    from app.protocols.event_log_store import EventLogStoreProtocol

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 1000


class EventLogReader:
    """Lookup por email, página de eventos recentes e estatísticas.

    Args:
        store: Store do log de eventos (None = não configurado)
        namespace: Mesmo prefixo usado pelo AuditRecorder
    """

    def __init__(self, store: EventLogStoreProtocol | None, namespace: str = "") -> None:
        self._store = store
        self._namespace = namespace

    def _require_store(self) -> EventLogStoreProtocol:
        if self._store is None:
            raise StorageNotConfiguredError()
        return self._store

    async def latest_for(self, email: str) -> dict[str, Any]:
        """Último evento processado do email.

        Raises:
            NotFoundError: Se não há registro para o email
        """
        store = self._require_store()
        event = await store.get(latest_key(email, self._namespace))
        if event is None:
            raise NotFoundError("No events found for this email")
        return {"email": email, "event": event}

    async def recent(self, limit: int = DEFAULT_PAGE_SIZE) -> dict[str, Any]:
        """Página dos eventos mais recentes primeiro, com ``has_more``."""
        store = self._require_store()
        listing = await store.list_keys(
            f"{self._namespace}{EVENT_KEY_PREFIX}", limit, newest_first=True
        )
        values = await asyncio.gather(*(store.get(key) for key in listing.keys))
        events = [value for value in values if value is not None]
        events.sort(key=lambda item: str(item.get("timestamp", "")), reverse=True)
        return {
            "events": events[:limit],
            "total": len(listing.keys),
            "has_more": not listing.list_complete,
        }

    async def stats(self) -> dict[str, Any]:
        """Contagem total de eventos e de subscribers únicos."""
        store = self._require_store()
        events, latest = await asyncio.gather(
            store.list_keys(f"{self._namespace}{EVENT_KEY_PREFIX}"),
            store.list_keys(f"{self._namespace}{LATEST_KEY_PREFIX}"),
        )
        return {
            "total_events": len(events.keys),
            "unique_subscribers": len(latest.keys),
            "last_updated": datetime.now(UTC).isoformat(),
        }
