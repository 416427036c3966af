"""Agregador de settings de infraestrutura.

Re-exporta todas as settings de infraestrutura para uso externo.
"""

from __future__ import annotations

from config.settings.infra.event_log import (
    EventLogSettings,
    LogBackend,
    get_event_log_settings,
)
from config.settings.infra.firestore import (
    FirestoreSettings,
    get_firestore_settings,
)

__all__ = [
    # Event log
    "EventLogSettings",
    # Firestore
    "FirestoreSettings",
    # Types
    "LogBackend",
    "get_event_log_settings",
    "get_firestore_settings",
]
