"""Normalizer Ghost — webhooks de members e chamadas diretas."""

from .extractor import (
    MISSING_EMAIL_MESSAGE,
    DirectShape,
    InboundPayload,
    WebhookShape,
    classify_payload,
)
from .normalizer import (
    build_webhook_metadata,
    derive_member_status,
    derive_webhook_status,
    normalize,
    normalize_shape,
)

__all__ = [
    "MISSING_EMAIL_MESSAGE",
    "DirectShape",
    "InboundPayload",
    "WebhookShape",
    "build_webhook_metadata",
    "classify_payload",
    "derive_member_status",
    "derive_webhook_status",
    "normalize",
    "normalize_shape",
]
