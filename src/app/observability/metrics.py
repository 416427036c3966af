"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e agregadas
posteriormente (BigQuery, Cloud Logging metrics etc.).

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Sync outcome: counter de sincronizações por status e operação upstream
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "upstream_sync", "pipeline")
        operation: Nome da operação (ex: "update", "create", "post")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_sync_outcome(
    status: str,
    operation: str,
    source: str,
    correlation_id: str | None = None,
) -> None:
    """Registra resultado de sincronização com o SparkLoop.

    Args:
        status: Status canônico enviado (confirmed, unsubscribed...)
        operation: Operação que teve sucesso ("update" ou "create")
        source: Formato de entrada ("webhook" ou "direct")
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_sync_outcome",
        extra={
            "metric_type": "sync_outcome",
            "component": "upstream_sync",
            "status": status,
            "operation": operation,
            "source": source,
            "correlation_id": correlation_id,
        },
    )
