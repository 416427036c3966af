"""Stores — implementações concretas do log de eventos.

Módulos disponíveis:
    - memory_stores: log em memória para desenvolvimento/testes
    - redis_event_log_store: log em Redis (Upstash)
    - firestore_event_log_store: log em Firestore
"""

from __future__ import annotations

from app.infra.stores.firestore_event_log_store import FirestoreEventLogStore
from app.infra.stores.memory_stores import MemoryEventLogStore
from app.infra.stores.redis_event_log_store import RedisEventLogStore

__all__ = [
    "FirestoreEventLogStore",
    "MemoryEventLogStore",
    "RedisEventLogStore",
]
