"""Sincronização idempotente (update-or-create) com o SparkLoop.

Fluxo:
1. PUT update-by-id com status + metadata sem campos internos
2. 404 → POST create com email + mesmo payload
3. Qualquer outro não-2xx → UpstreamError (sem retry; a política de
   retry é do chamador)
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal

from app.infra.http import HttpError
from app.observability import get_correlation_id, record_latency
from config.logging import mask_email
from utils.errors import UpstreamError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain import SubscriberStatus, SyncResult
    from app.protocols.sparkloop_client import SparkLoopClientProtocol, UpstreamResponse

logger = logging.getLogger(__name__)

# Campos de rastreamento que nunca vão para o SparkLoop
INTERNAL_METADATA_KEYS = frozenset({"ghost_event", "ghost_status", "subscribed", "source"})
UNKNOWN_ERROR = "Unknown error"

SyncOperation = Literal["update", "create"]


def build_update_payload(
    status: SubscriberStatus | str,
    metadata: Mapping[str, Any],
) -> dict[str, Any]:
    """Payload do PUT: status + metadata pública.

    Valores None seguem como null.
    """
    payload: dict[str, Any] = {"status": str(status)}
    for key, value in metadata.items():
        if key in INTERNAL_METADATA_KEYS or key == "status":
            continue
        payload[key] = value
    return payload


def build_create_payload(
    email: str,
    status: SubscriberStatus | str,
    metadata: Mapping[str, Any],
) -> dict[str, Any]:
    """Payload do POST create: email + payload do update."""
    return {"email": email, **build_update_payload(status, metadata)}


@dataclass(frozen=True, slots=True)
class SyncOutcome:
    """Resultado do upsert: operação que teve sucesso e corpo remoto."""

    operation: SyncOperation
    body: SyncResult


class SubscriberSynchronizer:
    """Executa o upsert contra a API remota.

    Args:
        client: Cliente que implementa SparkLoopClientProtocol
    """

    def __init__(self, client: SparkLoopClientProtocol) -> None:
        self._client = client

    async def sync(
        self,
        email: str,
        status: SubscriberStatus | str,
        metadata: Mapping[str, Any],
    ) -> SyncOutcome:
        """Sincroniza o subscriber; o corpo remoto volta sem modificação.

        Raises:
            UpstreamError: Falha remota, de rede ou API key ausente
        """
        started_at = time.perf_counter()
        update_payload = build_update_payload(status, metadata)
        logger.info(
            "sparkloop_update_started",
            extra={"email": mask_email(email), "status": str(status)},
        )

        response = await self._call("update", self._client.update_subscriber(email, update_payload))
        operation: SyncOperation = "update"
        if response.not_found:
            logger.info("sparkloop_subscriber_not_found", extra={"email": mask_email(email)})
            create_payload = build_create_payload(email, status, metadata)
            response = await self._call("create", self._client.create_subscriber(create_payload))
            operation = "create"

        if not response.ok:
            detail = f"SparkLoop API error: {response.error_detail or UNKNOWN_ERROR}"
            logger.error(
                "sparkloop_api_error",
                extra={"operation": operation, "status_code": response.status_code},
            )
            raise UpstreamError(detail, remote_status=response.status_code)

        record_latency(
            "upstream_sync",
            operation,
            (time.perf_counter() - started_at) * 1000,
            get_correlation_id(),
        )
        logger.info(
            "sparkloop_subscriber_synced",
            extra={"email": mask_email(email), "operation": operation},
        )
        return SyncOutcome(operation=operation, body=response.body)

    @staticmethod
    async def _call(operation: str, call: Any) -> UpstreamResponse:
        try:
            return await call
        except ValueError as exc:
            # API key ausente
            raise UpstreamError(str(exc)) from exc
        except HttpError as exc:
            logger.error(
                "sparkloop_request_failed",
                extra={"operation": operation, "error": str(exc)},
            )
            raise UpstreamError(f"SparkLoop API error: {exc}", remote_status=exc.status_code) from exc
