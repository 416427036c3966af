"""Settings base do relay Ghost → SparkLoop.

Ambiente de execução, nome do serviço (campo ``service`` dos logs e do
health check) e conexões de infraestrutura compartilhadas pelos backends
do log de eventos.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

DEFAULT_SERVICE_NAME = "ghost-sparkloop-relay"

# Ambientes onde settings inválidas impedem o boot
STRICT_ENVIRONMENTS = frozenset({"staging", "production"})

_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "production": "production",
    "prod": "production",
    "staging": "staging",
    "stage": "staging",
}


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do serviço.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço nos logs e no health check
        gcp_project: ID do projeto GCP (backend Firestore do log de eventos)
        redis_url: URL de conexão Redis (backend Redis do log de eventos)
    """

    environment: Environment = "development"
    service_name: str = DEFAULT_SERVICE_NAME
    gcp_project: str = ""
    redis_url: str = ""

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def strict_validation(self) -> bool:
        """True se erros de configuração devem abortar o startup."""
        return self.environment in STRICT_ENVIRONMENTS

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if self.environment not in ("development", *STRICT_ENVIRONMENTS):
            errors.append(f"ENVIRONMENT inválido: {self.environment}")
        if not self.service_name.strip():
            errors.append("SERVICE_NAME não pode ser vazio")
        return errors


def parse_environment(raw: str) -> Environment:
    """Normaliza o valor de ENVIRONMENT; desconhecido vira development."""
    return _ENVIRONMENT_ALIASES.get(raw.strip().lower(), "development")


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    return BaseSettings(
        environment=parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", DEFAULT_SERVICE_NAME),
        gcp_project=os.getenv("GCP_PROJECT", os.getenv("GOOGLE_CLOUD_PROJECT", "")),
        redis_url=os.getenv("REDIS_URL", ""),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
