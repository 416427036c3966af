"""Classificação do corpo inbound em um dos formatos suportados.

Formatos (union etiquetada ``InboundPayload``):
- WebhookShape: ``{"member": {...}}`` ou ``{"member": {"current": {...}}}``
  com email no member, tipo de evento vindo do header ``x-ghost-event``
- DirectShape: ``{"email": ..., "status"?: ..., ...extras}``

Não faz validação de negócio - apenas extração estrutural.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from utils.errors import ValidationError

MISSING_EMAIL_MESSAGE = (
    'Missing email. Expected either "email" field or "member.email" field'
)
DEFAULT_DIRECT_STATUS = "confirmed"


@dataclass(frozen=True, slots=True)
class WebhookShape:
    """Webhook do Ghost: objeto member (já desembrulhado de ``current``)."""

    member: dict[str, Any]
    event_type: str | None = None
    kind: Literal["webhook"] = "webhook"

    @property
    def email(self) -> object:
        return self.member.get("email")


@dataclass(frozen=True, slots=True)
class DirectShape:
    """Chamada direta: email/status no topo, demais campos viram metadata."""

    email: object
    status: object = DEFAULT_DIRECT_STATUS
    extras: dict[str, Any] = field(default_factory=dict)
    kind: Literal["direct"] = "direct"


InboundPayload = WebhookShape | DirectShape


def _extract_member(body: dict[str, Any]) -> dict[str, Any] | None:
    member = body.get("member")
    if not isinstance(member, dict):
        return None
    current = member.get("current")
    if isinstance(current, dict):
        return current
    return member


def classify_payload(body: object, event_type: str | None = None) -> InboundPayload:
    """Identifica o formato do corpo.

    Args:
        body: JSON já decodificado
        event_type: Valor do header de evento (webhooks)

    Raises:
        ValidationError: Se nenhum formato traz email

    Returns:
        WebhookShape ou DirectShape
    """
    if not isinstance(body, dict):
        raise ValidationError(MISSING_EMAIL_MESSAGE)

    member = _extract_member(body)
    if member is not None and member.get("email"):
        return WebhookShape(member=member, event_type=event_type)

    if body.get("email"):
        extras = {k: v for k, v in body.items() if k not in ("email", "status")}
        status = body.get("status")
        return DirectShape(
            email=body["email"],
            status=DEFAULT_DIRECT_STATUS if status is None else status,
            extras=extras,
        )

    raise ValidationError(MISSING_EMAIL_MESSAGE)
