"""Modelos de domínio do relay de subscribers.

SubscriberEvent é criado pelo normalizer a cada request e é imutável;
SyncResult é o corpo opaco devolvido pelo SparkLoop; AuditRecord é o
que vai para o log de eventos.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Literal

# Corpo JSON da API do SparkLoop, repassado sem modificação
SyncResult = dict[str, Any]

PayloadSource = Literal["webhook", "direct"]


class SubscriberStatus(StrEnum):
    """Status canônicos aceitos pelo SparkLoop."""

    CONFIRMED = "confirmed"
    UNCONFIRMED = "unconfirmed"
    UNSUBSCRIBED = "unsubscribed"
    BOUNCED = "bounced"


# Ordem usada na mensagem de erro de validação
VALID_STATUSES: tuple[str, ...] = tuple(status.value for status in SubscriberStatus)


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class SubscriberEvent:
    """Evento canônico (email, status, metadata).

    Attributes:
        email: Email já validado
        status: Status canônico
        metadata: Campos extras (somente leitura)
        source: Formato de entrada que originou o evento
    """

    email: str
    status: SubscriberStatus
    metadata: MappingProxyType[str, Any] = field(
        default_factory=lambda: MappingProxyType({})
    )
    source: PayloadSource = "direct"

    @classmethod
    def create(
        cls,
        email: str,
        status: SubscriberStatus | str,
        metadata: dict[str, Any] | None = None,
        source: PayloadSource = "direct",
    ) -> SubscriberEvent:
        """Cria evento copiando metadata para uma view imutável."""
        return cls(
            email=email,
            status=SubscriberStatus(status),
            metadata=MappingProxyType(dict(metadata or {})),
            source=source,
        )

    def metadata_dict(self) -> dict[str, Any]:
        """Cópia mutável da metadata (para montar payloads)."""
        return dict(self.metadata)


@dataclass(frozen=True, slots=True)
class AuditRecord:
    """Registro persistido por evento processado com sucesso."""

    event: SubscriberEvent
    sync_result: SyncResult
    timestamp: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> dict[str, Any]:
        """Serializa no formato gravado no log de eventos."""
        subscriber = self.sync_result.get("subscriber")
        if not isinstance(subscriber, dict):
            subscriber = {}
        return {
            "email": self.event.email,
            "status": self.event.status.value,
            "sparkloop_response": self.sync_result,
            "additional_data": self.event.metadata_dict(),
            "timestamp": self.timestamp.isoformat(),
            "subscriber_uuid": subscriber.get("uuid"),
            "ref_code": subscriber.get("ref_code"),
        }
