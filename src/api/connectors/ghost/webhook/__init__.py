"""Webhook Ghost: autenticação e parsing seguro."""

from .receive import (
    InvalidJsonError,
    InvalidSignatureError,
    parse_webhook_request,
)

__all__ = [
    "InvalidJsonError",
    "InvalidSignatureError",
    "parse_webhook_request",
]
