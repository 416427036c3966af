"""Settings de autenticação dos webhooks do Ghost e chamadas diretas."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

GHOST_SIGNATURE_HEADER: str = "x-ghost-signature"
GHOST_EVENT_HEADER: str = "x-ghost-event"


@dataclass(frozen=True)
class GhostSettings:
    """Configurações de entrada.

    Attributes:
        auth_token: Secret compartilhado. Usado como chave HMAC no modo
            webhook assinado e como token estático (Bearer/query) no
            modo direto. Vazio desativa a autenticação.
        signature_header: Header com a assinatura do Ghost
        event_header: Header com o tipo de evento do Ghost
    """

    auth_token: str = ""
    signature_header: str = GHOST_SIGNATURE_HEADER
    event_header: str = GHOST_EVENT_HEADER

    @property
    def auth_enabled(self) -> bool:
        """Retorna True se há secret configurado."""
        return bool(self.auth_token)

    def validate(self) -> list[str]:
        """Valida configurações de entrada."""
        errors: list[str] = []
        if not self.signature_header:
            errors.append("GHOST_SIGNATURE_HEADER não pode ser vazio")
        return errors


def _load_from_env() -> GhostSettings:
    """Carrega GhostSettings de variáveis de ambiente."""
    return GhostSettings(
        auth_token=os.getenv("AUTH_TOKEN", ""),
        signature_header=os.getenv("GHOST_SIGNATURE_HEADER", GHOST_SIGNATURE_HEADER).lower(),
        event_header=os.getenv("GHOST_EVENT_HEADER", GHOST_EVENT_HEADER).lower(),
    )


@lru_cache(maxsize=1)
def get_ghost_settings() -> GhostSettings:
    """Retorna instância cacheada de GhostSettings."""
    return _load_from_env()
