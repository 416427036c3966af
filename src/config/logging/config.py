"""Configuração centralizada de logging.

Funções para configurar logging estruturado JSON com:
- Campos obrigatórios (correlation_id, service, level, logger, message)
- Formatação padronizada
- Níveis configuráveis por ambiente

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do serviço (app/bootstrap/)
    configure_logging(level="INFO", service_name="ghost-sparkloop-relay")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("subscriber_synced", extra={"latency_ms": 42})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "ghost-sparkloop-relay"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Deve ser chamada uma vez na inicialização (app/bootstrap/).

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: de ContextVar).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]

    # httpx loga a URL completa em INFO (inclui email no path do PUT)
    logging.getLogger("httpx").setLevel(max(logging.WARNING, root.level))


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado.

    O filter injeta automaticamente service e correlation_id.
    """
    return logging.getLogger(name)


def log_side_effect_failure(
    logger: logging.Logger,
    component: str,
    exc: BaseException,
    **context: object,
) -> None:
    """Log observável de falha absorvida em side effect best-effort.

    Usado pelo registro de auditoria e pelas notificações: a falha é
    registrada e nunca propagada para a resposta principal.

    Args:
        logger: Logger instance.
        component: Nome do componente (ex: "audit_recorder", "notifier.slack").
        exc: Exceção absorvida (apenas o tipo e a mensagem são logados).
        **context: Campos adicionais sem PII.

    Exemplo:
        log_side_effect_failure(logger, "notifier.discord", exc, status_code=500)
    """
    extra: dict[str, object] = {
        "side_effect_failed": True,
        "component": component,
        "error_type": type(exc).__name__,
        "error": str(exc),
        **context,
    }
    logger.warning(
        "side_effect_failed",
        extra=extra,
    )
