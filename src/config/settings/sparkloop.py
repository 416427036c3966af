"""Settings específicas da API do SparkLoop.

Configurações do destino upstream (API de subscribers v2).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da API SparkLoop
SPARKLOOP_API_VERSION: str = "v2"
SPARKLOOP_API_BASE_URL: str = "https://api.sparkloop.app"
SPARKLOOP_USER_AGENT: str = "SparkLoop-Worker/1.0"


@dataclass(frozen=True)
class SparkLoopSettings:
    """Configurações do cliente SparkLoop.

    Attributes:
        api_key: Chave enviada no header X-Api-Key
        api_base_url: URL base da API
        api_version: Versão da API (ex: v2)
        request_timeout_seconds: Timeout para requisições HTTP
        user_agent: User-Agent enviado nas chamadas
    """

    api_key: str = ""
    api_base_url: str = SPARKLOOP_API_BASE_URL
    api_version: str = SPARKLOOP_API_VERSION
    request_timeout_seconds: float = 30.0
    user_agent: str = SPARKLOOP_USER_AGENT

    @property
    def subscribers_endpoint(self) -> str:
        """URL da collection de subscribers (create)."""
        return f"{self.api_base_url.rstrip('/')}/{self.api_version}/subscribers"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do SparkLoop.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_key:
            errors.append("SPARKLOOP_API_KEY não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("SPARKLOOP_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> SparkLoopSettings:
    """Carrega SparkLoopSettings a partir de variáveis de ambiente."""
    return SparkLoopSettings(
        api_key=os.getenv("SPARKLOOP_API_KEY", ""),
        api_base_url=os.getenv("SPARKLOOP_API_BASE_URL", SPARKLOOP_API_BASE_URL),
        api_version=os.getenv("SPARKLOOP_API_VERSION", SPARKLOOP_API_VERSION),
        request_timeout_seconds=float(
            os.getenv("SPARKLOOP_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        user_agent=os.getenv("SPARKLOOP_USER_AGENT", SPARKLOOP_USER_AGENT),
    )


@lru_cache(maxsize=1)
def get_sparkloop_settings() -> SparkLoopSettings:
    """Retorna instância cacheada de SparkLoopSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
