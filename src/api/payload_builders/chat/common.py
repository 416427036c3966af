"""Campos comuns às notificações de novo subscriber."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain import SyncResult

NOTIFICATION_TITLE = "🎉 New SparkLoop Subscriber!"
CONFIRMED_LABEL = "✅ Confirmed"
NOT_AVAILABLE = "N/A"


def upstream_subscriber(sync_result: SyncResult) -> dict[str, Any]:
    """Objeto ``subscriber`` do SparkLoop (vazio se ausente)."""
    subscriber = sync_result.get("subscriber")
    return subscriber if isinstance(subscriber, dict) else {}


def source_label(metadata: Mapping[str, Any]) -> str:
    """Origem exibida: source, senão evento Ghost, senão Unknown."""
    return str(metadata.get("source") or metadata.get("ghost_event") or "Unknown")
