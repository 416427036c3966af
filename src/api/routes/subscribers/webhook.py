"""Endpoint de sincronização de subscribers.

Endpoints:
- POST /{qualquer path}: webhook de member do Ghost ou chamada direta

Fluxo:
1. Rate limit por endereço de origem (429)
2. Autenticação: assinatura Ghost ou token estático (401)
3. JSON válido (400)
4. Normalização e validação (400)
5. Sync com o SparkLoop (502 em falha)
6. Auditoria + notificação best-effort
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from api.connectors.ghost.webhook import parse_webhook_request
from api.normalizers.ghost import normalize
from api.routes.responses import (
    INTERNAL_ERROR_MESSAGE,
    error_response,
    json_response,
    utc_timestamp,
)
from api.routes.subscribers.state import get_relay
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from app.services import client_address
from config.logging import mask_email
from utils.errors import RateLimitError, RelayError

logger = logging.getLogger(__name__)

router = APIRouter()

SUCCESS_MESSAGE = "Subscriber updated successfully"


@router.post("/{path:path}", response_model=None)
async def sync_subscriber(request: Request, path: str = "") -> JSONResponse:
    """Recebe evento de subscriber e sincroniza com o SparkLoop.

    Returns:
        200 com email, status e resposta do SparkLoop, ou erro JSON.
    """
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        relay = get_relay(request)
        headers = dict(request.headers)
        source = client_address(headers)
        logger.info(
            "subscriber_request_received",
            extra={"method": "POST", "path": f"/{path}", "client": source},
        )

        try:
            if relay.rate_limiter is not None and relay.rate_limiter.is_limited(source):
                raise RateLimitError()

            raw_body = await request.body()
            payload, signature_result = parse_webhook_request(
                raw_body=raw_body,
                headers=headers,
                secret=relay.ghost.auth_token or None,
                query_params=dict(request.query_params),
                signature_header=relay.ghost.signature_header,
            )
            logger.info(
                "subscriber_request_authenticated",
                extra={
                    "auth_mode": signature_result.mode,
                    "auth_skipped": signature_result.skipped,
                    "payload_size": len(raw_body),
                },
            )

            event = normalize(payload, headers, event_header=relay.ghost.event_header)
            result = await relay.use_case.execute(event)

        except RelayError as exc:
            logger.warning(
                "subscriber_request_rejected",
                extra={
                    "status_code": exc.status_code,
                    "error_type": type(exc).__name__,
                    "error": exc.message,
                },
            )
            return error_response(exc.message, exc.status_code, exc.details)

        logger.info(
            "subscriber_request_completed",
            extra={"email": mask_email(event.email), "status": event.status.value},
        )
        return json_response(
            {
                "success": True,
                "message": SUCCESS_MESSAGE,
                "email": event.email,
                "status": event.status.value,
                "sparkloop": result.sync_result,
                "timestamp": utc_timestamp(),
            }
        )

    except Exception:
        logger.exception("subscriber_request_failed")
        return error_response(
            INTERNAL_ERROR_MESSAGE,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            {"error_id": get_correlation_id()},
        )

    finally:
        reset_correlation_id(token)
