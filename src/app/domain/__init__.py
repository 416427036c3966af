"""Domínio — modelos imutáveis do relay."""

from app.domain.subscriber import (
    VALID_STATUSES,
    AuditRecord,
    PayloadSource,
    SubscriberEvent,
    SubscriberStatus,
    SyncResult,
)

__all__ = [
    "VALID_STATUSES",
    "AuditRecord",
    "PayloadSource",
    "SubscriberEvent",
    "SubscriberStatus",
    "SyncResult",
]
