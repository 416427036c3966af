"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_relay_dependencies

    # Na inicialização do serviço
    initialize_app()

    # Obter o grafo de dependências do relay
    dependencies = get_relay_dependencies()
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_event_log_settings,
    get_firestore_settings,
    get_ghost_settings,
    get_notification_settings,
    get_rate_limit_settings,
    get_sparkloop_settings,
)

if TYPE_CHECKING:
    from app.bootstrap.dependencies import RelayDependencies

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço.
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=get_base_settings().service_name,
        correlation_id_getter=get_correlation_id,
    )


def collect_settings_errors() -> list[str]:
    """Agrega erros de validação de todos os grupos de settings."""
    base = get_base_settings()
    errors: list[str] = [f"base: {error}" for error in base.validate()]

    errors.extend(f"sparkloop: {error}" for error in get_sparkloop_settings().validate())
    errors.extend(f"ghost: {error}" for error in get_ghost_settings().validate())
    errors.extend(f"rate_limit: {error}" for error in get_rate_limit_settings().validate())
    errors.extend(
        f"notifications: {error}" for error in get_notification_settings().validate()
    )

    event_log = get_event_log_settings()
    errors.extend(
        f"event_log: {error}"
        for error in event_log.validate(base.redis_url, base.gcp_project, base.is_development)
    )
    if event_log.backend == "firestore":
        errors.extend(
            f"firestore: {error}"
            for error in get_firestore_settings().validate(base.gcp_project)
        )
    return errors


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development`/`test` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    environment = base.environment
    errors = collect_settings_errors()

    if not get_ghost_settings().auth_enabled:
        logger.warning(
            "auth_disabled",
            extra={"component": "bootstrap", "environment": environment},
        )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.strict_validation:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


@lru_cache(maxsize=1)
def get_relay_dependencies() -> RelayDependencies:
    """Obtém o grafo de dependências do relay (singleton)."""
    from app.bootstrap.dependencies import create_relay_dependencies

    return create_relay_dependencies()
