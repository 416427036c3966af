"""Agregador de settings do relay Ghost → SparkLoop.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Inbound (Ghost webhooks + chamadas diretas)
from config.settings.ghost import (
    GHOST_EVENT_HEADER,
    GHOST_SIGNATURE_HEADER,
    GhostSettings,
    get_ghost_settings,
)

# Infrastructure settings
from config.settings.infra import (
    EventLogSettings,
    FirestoreSettings,
    LogBackend,
    get_event_log_settings,
    get_firestore_settings,
)

# Side effects
from config.settings.notifications import (
    NotificationSettings,
    get_notification_settings,
)
from config.settings.rate_limit import (
    RateLimitSettings,
    get_rate_limit_settings,
)

# Upstream
from config.settings.sparkloop import (
    SPARKLOOP_API_BASE_URL,
    SPARKLOOP_API_VERSION,
    SparkLoopSettings,
    get_sparkloop_settings,
)

__all__ = [
    # Constants
    "GHOST_EVENT_HEADER",
    "GHOST_SIGNATURE_HEADER",
    "SPARKLOOP_API_BASE_URL",
    "SPARKLOOP_API_VERSION",
    # Base
    "BaseSettings",
    "Environment",
    # Infrastructure
    "EventLogSettings",
    "FirestoreSettings",
    # Channels
    "GhostSettings",
    "LogBackend",
    "NotificationSettings",
    "RateLimitSettings",
    "SparkLoopSettings",
    "get_base_settings",
    "get_event_log_settings",
    "get_firestore_settings",
    "get_ghost_settings",
    "get_notification_settings",
    "get_rate_limit_settings",
    "get_sparkloop_settings",
]
