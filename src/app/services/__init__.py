"""Serviços de aplicação.

Unidades reutilizáveis do pipeline (rate limit, sync, auditoria,
notificação). Implementações concretas de IO ficam em app/infra/ e
api/connectors/.
"""

from app.services.audit_recorder import AuditRecorder
from app.services.event_log_reader import EventLogReader
from app.services.notifier import Notifier
from app.services.rate_limiter import (
    RateWindowState,
    SlidingWindowRateLimiter,
    client_address,
    is_rate_limited,
)
from app.services.upstream_sync import SubscriberSynchronizer, SyncOutcome

__all__ = [
    "AuditRecorder",
    "EventLogReader",
    "Notifier",
    "RateWindowState",
    "SlidingWindowRateLimiter",
    "SubscriberSynchronizer",
    "SyncOutcome",
    "client_address",
    "is_rate_limited",
]
