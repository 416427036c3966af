"""Factories de dependências — criação de implementações concretas.

Monta o grafo do relay a partir das settings: store do log de eventos,
cliente SparkLoop, canais de chat, rate limiter e use case.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from api.connectors.chat import create_chat_channels
from api.connectors.sparkloop import create_sparkloop_http_client
from app.bootstrap.clients import create_async_redis_client, create_firestore_client
from app.infra.stores import FirestoreEventLogStore, MemoryEventLogStore, RedisEventLogStore
from app.services import (
    AuditRecorder,
    EventLogReader,
    Notifier,
    SlidingWindowRateLimiter,
    SubscriberSynchronizer,
)
from app.use_cases.subscribers import SyncSubscriberUseCase
from config.settings import (
    get_base_settings,
    get_event_log_settings,
    get_firestore_settings,
    get_ghost_settings,
    get_notification_settings,
    get_rate_limit_settings,
    get_sparkloop_settings,
)

if TYPE_CHECKING:
    import httpx

    from app.protocols.event_log_store import EventLogStoreProtocol
    from config.settings import BaseSettings, EventLogSettings, GhostSettings

logger = logging.getLogger(__name__)


@dataclass
class RelayDependencies:
    """Grafo de dependências usado pelas rotas.

    Attributes:
        ghost: Settings de autenticação de entrada
        use_case: Pipeline de sync (POST)
        event_log_reader: Consultas ao log de eventos (GET)
        rate_limiter: Limiter por origem (None = desativado)
    """

    ghost: GhostSettings
    use_case: SyncSubscriberUseCase
    event_log_reader: EventLogReader
    rate_limiter: SlidingWindowRateLimiter | None = None


# ──────────────────────────────────────────────────────────────────────────────
# Event Log Store Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_event_log_store(
    settings: EventLogSettings | None = None,
    base: BaseSettings | None = None,
) -> EventLogStoreProtocol | None:
    """Cria store do log de eventos baseado na configuração.

    Lê EVENT_LOG_BACKEND da env:
    - "memory": MemoryEventLogStore (dev only)
    - "redis": RedisEventLogStore
    - "firestore": FirestoreEventLogStore
    - "disabled": None (gravação apenas logada, consultas → 500)

    Returns:
        Implementação de EventLogStoreProtocol ou None
    """
    event_log = settings or get_event_log_settings()
    base_settings = base or get_base_settings()
    backend = event_log.backend

    if backend == "disabled":
        logger.info("event_log_store_created", extra={"backend": "disabled"})
        return None

    if backend == "redis":
        store: EventLogStoreProtocol = RedisEventLogStore(create_async_redis_client())
        logger.info("event_log_store_created", extra={"backend": "redis"})
        return store

    if backend == "firestore":
        firestore_settings = get_firestore_settings()
        client = create_firestore_client(
            firestore_settings.project_id or base_settings.gcp_project or None
        )
        store = FirestoreEventLogStore(client, firestore_settings.collection_event_log)
        logger.info("event_log_store_created", extra={"backend": "firestore"})
        return store

    if backend == "memory":
        if not base_settings.is_development:
            logger.warning(
                "memory_event_log_in_non_dev",
                extra={"backend": "memory", "environment": base_settings.environment},
            )
        store = MemoryEventLogStore()
        logger.info("event_log_store_created", extra={"backend": "memory"})
        return store

    msg = f"EVENT_LOG_BACKEND inválido: {backend}"
    raise ValueError(msg)


# ──────────────────────────────────────────────────────────────────────────────
# Relay Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_relay_dependencies(
    store: EventLogStoreProtocol | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RelayDependencies:
    """Cria o grafo completo do relay.

    Args:
        store: Store já construído (default: conforme EVENT_LOG_BACKEND)
        transport: Transport httpx compartilhado (testes)
    """
    event_log = get_event_log_settings()
    if store is None:
        store = create_event_log_store(event_log)
    namespace = event_log.key_prefix

    synchronizer = SubscriberSynchronizer(
        create_sparkloop_http_client(get_sparkloop_settings(), transport=transport)
    )
    notifier = Notifier(create_chat_channels(get_notification_settings(), transport=transport))
    use_case = SyncSubscriberUseCase(
        synchronizer=synchronizer,
        audit_recorder=AuditRecorder(store, namespace),
        notifier=notifier,
    )

    rate_limit = get_rate_limit_settings()
    rate_limiter = (
        SlidingWindowRateLimiter(rate_limit.max_requests, rate_limit.window_ms)
        if rate_limit.enabled
        else None
    )

    logger.info(
        "relay_dependencies_created",
        extra={
            "event_log_backend": event_log.backend,
            "notification_channels": notifier.channel_names,
            "rate_limit_enabled": rate_limit.enabled,
        },
    )
    return RelayDependencies(
        ghost=get_ghost_settings(),
        use_case=use_case,
        event_log_reader=EventLogReader(store, namespace),
        rate_limiter=rate_limiter,
    )
