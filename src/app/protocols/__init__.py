"""Protocolos e contratos do core da aplicação."""

from .event_log_store import EventLogStoreProtocol, KeyListing
from .notification_channel import NotificationChannelProtocol
from .sparkloop_client import SparkLoopClientProtocol, UpstreamResponse

__all__ = [
    "EventLogStoreProtocol",
    "KeyListing",
    "NotificationChannelProtocol",
    "SparkLoopClientProtocol",
    "UpstreamResponse",
]
