"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AuthError,
    FirestoreUnavailableError,
    InfrastructureError,
    MethodNotAllowedError,
    NotFoundError,
    RateLimitError,
    RedisConnectionError,
    RelayError,
    StorageNotConfiguredError,
    UpstreamError,
    ValidationError,
)

__all__ = [
    "AuthError",
    "FirestoreUnavailableError",
    "InfrastructureError",
    "MethodNotAllowedError",
    "NotFoundError",
    "RateLimitError",
    "RedisConnectionError",
    "RelayError",
    "StorageNotConfiguredError",
    "UpstreamError",
    "ValidationError",
]
