"""Protocolo do cliente da API de subscribers do SparkLoop.

Evita dependência direta da camada api: o synchronizer só conhece
respostas (status + corpo) e decide o fallback update → create.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True, slots=True)
class UpstreamResponse:
    """Resposta HTTP já decodificada da API remota."""

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)
    error_detail: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def not_found(self) -> bool:
        return self.status_code == 404


class SparkLoopClientProtocol(Protocol):
    """Contrato mínimo para o cliente SparkLoop."""

    async def update_subscriber(
        self, identifier: str, payload: dict[str, Any]
    ) -> UpstreamResponse: ...

    async def create_subscriber(self, payload: dict[str, Any]) -> UpstreamResponse: ...
