"""Settings do log de eventos de subscribers.

Configura o backend key-value onde cada evento processado é gravado
(chave cronológica + chave "latest" por email).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

LogBackend = Literal["memory", "redis", "firestore", "disabled"]

_VALID_BACKENDS = ("memory", "redis", "firestore", "disabled")


@dataclass(frozen=True)
class EventLogSettings:
    """Configurações do log de eventos.

    Attributes:
        backend: Backend do log (memory|redis|firestore|disabled)
        key_prefix: Namespace opcional aplicado a todas as chaves
    """

    backend: LogBackend = "memory"
    key_prefix: str = ""

    @property
    def enabled(self) -> bool:
        """Retorna True se algum backend está ativo."""
        return self.backend != "disabled"

    def validate(self, redis_url: str, gcp_project: str, is_dev: bool) -> list[str]:
        """Valida configurações do log de eventos.

        Args:
            redis_url: URL do Redis.
            gcp_project: Projeto GCP.
            is_dev: Se está em desenvolvimento.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.backend not in _VALID_BACKENDS:
            errors.append(f"EVENT_LOG_BACKEND inválido: {self.backend}")

        if self.backend == "memory" and not is_dev:
            errors.append("EVENT_LOG_BACKEND=memory proibido em staging/production")

        if self.backend == "redis" and not redis_url:
            errors.append("EVENT_LOG_BACKEND=redis requer REDIS_URL")

        if self.backend == "firestore" and not gcp_project:
            errors.append("EVENT_LOG_BACKEND=firestore requer GCP_PROJECT")

        return errors


def _load_event_log_from_env() -> EventLogSettings:
    """Carrega EventLogSettings de variáveis de ambiente."""
    backend_str = os.getenv("EVENT_LOG_BACKEND", "memory").lower()
    backend: LogBackend = backend_str if backend_str in _VALID_BACKENDS else "memory"  # type: ignore[assignment]

    return EventLogSettings(
        backend=backend,
        key_prefix=os.getenv("EVENT_LOG_PREFIX", ""),
    )


@lru_cache(maxsize=1)
def get_event_log_settings() -> EventLogSettings:
    """Retorna instância cacheada de EventLogSettings."""
    return _load_event_log_from_env()
