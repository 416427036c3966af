"""Normalizer: payload inbound → SubscriberEvent canônico.

Regras de status para webhooks (a ordem importa):
a. Estado do member: free/paid/comped → confirmed; deleted ou
   cancelled → unsubscribed; qualquer outro → confirmed.
b. Evento de remoção (member.deleted/member.unsubscribed) → unsubscribed.
c. Evento de add/update: ``subscribed is False`` → unsubscribed; senão
   confirmed, exceto quando (a) já marcou o member como encerrado.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.ghost.headers import get_header
from api.normalizers.ghost.extractor import (
    DirectShape,
    InboundPayload,
    WebhookShape,
    classify_payload,
)
from api.validators.subscriber import validate_email, validate_status
from app.domain import SubscriberEvent, SubscriberStatus
from config.logging import mask_email
from config.settings.ghost import GHOST_EVENT_HEADER

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

ACTIVE_MEMBER_STATES = frozenset({"free", "paid", "comped"})
ENDED_MEMBER_STATES = frozenset({"cancelled"})
REMOVAL_EVENTS = frozenset({"member.deleted", "member.unsubscribed"})
UPSERT_EVENTS = frozenset({"member.added", "member.updated"})

WEBHOOK_SOURCE_TAG = "ghost-webhook"


def derive_member_status(member: Mapping[str, Any]) -> SubscriberStatus:
    """Regra (a): status base a partir do estado do member."""
    lifecycle = member.get("status")
    if lifecycle in ACTIVE_MEMBER_STATES:
        return SubscriberStatus.CONFIRMED
    if member.get("deleted") or lifecycle in ENDED_MEMBER_STATES:
        return SubscriberStatus.UNSUBSCRIBED
    return SubscriberStatus.CONFIRMED


def derive_webhook_status(
    member: Mapping[str, Any],
    event_type: str | None,
) -> SubscriberStatus:
    """Aplica as regras (a), (b) e (c) em sequência."""
    status = derive_member_status(member)
    if event_type in REMOVAL_EVENTS:
        return SubscriberStatus.UNSUBSCRIBED
    if event_type in UPSERT_EVENTS:
        if member.get("subscribed") is False:
            return SubscriberStatus.UNSUBSCRIBED
        if status is SubscriberStatus.UNSUBSCRIBED:
            return status
        return SubscriberStatus.CONFIRMED
    return status


def build_webhook_metadata(
    member: Mapping[str, Any],
    event_type: str | None,
) -> dict[str, Any]:
    """Metadata fixa de eventos vindos do Ghost."""
    return {
        "name": member.get("name"),
        "ghost_status": member.get("status"),
        "ghost_event": event_type,
        "subscribed": member.get("subscribed"),
        "source": WEBHOOK_SOURCE_TAG,
        "ghost_uuid": member.get("uuid"),
        "ghost_id": member.get("id"),
    }


def _normalize_webhook(shape: WebhookShape) -> SubscriberEvent:
    email = validate_email(shape.email)
    status = derive_webhook_status(shape.member, shape.event_type)
    logger.info(
        "ghost_webhook_normalized",
        extra={
            "ghost_event": shape.event_type,
            "email": mask_email(email),
            "status": status.value,
        },
    )
    return SubscriberEvent.create(
        email=email,
        status=status,
        metadata=build_webhook_metadata(shape.member, shape.event_type),
        source="webhook",
    )


def _normalize_direct(shape: DirectShape) -> SubscriberEvent:
    email = validate_email(shape.email)
    status = validate_status(shape.status)
    logger.info(
        "direct_call_normalized",
        extra={"email": mask_email(email), "status": status.value},
    )
    return SubscriberEvent.create(
        email=email,
        status=status,
        metadata=shape.extras,
        source="direct",
    )


def normalize_shape(shape: InboundPayload) -> SubscriberEvent:
    """Converte payload já classificado em evento validado."""
    if isinstance(shape, WebhookShape):
        return _normalize_webhook(shape)
    return _normalize_direct(shape)


def normalize(
    body: object,
    headers: Mapping[str, str],
    *,
    event_header: str = GHOST_EVENT_HEADER,
) -> SubscriberEvent:
    """Classifica, deriva status e valida o corpo inbound.

    Args:
        body: JSON decodificado do request
        headers: Headers (lookup case-insensitive do header de evento)
        event_header: Nome do header de tipo de evento

    Raises:
        ValidationError: email ausente/inválido ou status inválido

    Returns:
        SubscriberEvent imutável
    """
    event_type = get_header(headers, event_header)
    return normalize_shape(classify_payload(body, event_type))

