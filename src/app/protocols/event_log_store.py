"""Protocolo do store key-value do log de eventos.

Contrato mínimo exigido pelo AuditRecorder e pelas consultas GET:
put/get por chave e listagem por prefixo. Escritas são atômicas por
chave; não há transação entre chaves.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class KeyListing:
    """Resultado de listagem por prefixo.

    Attributes:
        keys: Chaves retornadas (já ordenadas e limitadas)
        list_complete: False se havia mais chaves além do limite
    """

    keys: list[str] = field(default_factory=list)
    list_complete: bool = True


class EventLogStoreProtocol(ABC):
    """Contrato assíncrono do log de eventos."""

    @abstractmethod
    async def put(self, key: str, value: dict[str, Any]) -> None:
        """Grava (ou sobrescreve) o valor da chave."""

    @abstractmethod
    async def get(self, key: str) -> dict[str, Any] | None:
        """Retorna o valor da chave ou None se ausente."""

    @abstractmethod
    async def list_keys(
        self,
        prefix: str,
        limit: int | None = None,
        *,
        newest_first: bool = False,
    ) -> KeyListing:
        """Lista chaves com o prefixo em ordem lexicográfica.

        Args:
            prefix: Prefixo das chaves
            limit: Máximo de chaves retornadas (None = todas)
            newest_first: Inverte a ordem antes de aplicar o limite
        """
