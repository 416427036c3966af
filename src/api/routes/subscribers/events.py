"""Consultas ao log de eventos (somente leitura).

Endpoints:
- GET .../events?email=: último evento do email
- GET .../events?limit=: página dos eventos mais recentes
- GET .../stats: contagens agregadas
- GET demais paths: 404

Autenticação apenas por token estático (Bearer ou ``?token=``).
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from api.connectors.ghost import verify_static_token
from api.routes.responses import error_response, json_response
from api.routes.subscribers.state import get_relay
from app.observability import reset_correlation_id, set_correlation_id
from app.services.event_log_reader import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, EventLogReader
from config.logging import mask_email
from utils.errors import AuthError, NotFoundError, RelayError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter()

EVENTS_SUFFIX = "/events"
STATS_SUFFIX = "/stats"


def parse_limit(raw: str | None) -> int:
    """Converte ``limit`` da query string (default 50, teto 1000).

    Raises:
        ValidationError: Se não for inteiro positivo
    """
    if raw is None or raw == "":
        return DEFAULT_PAGE_SIZE
    try:
        limit = int(raw)
    except ValueError:
        limit = 0
    if limit < 1:
        raise ValidationError("Invalid limit. Must be a positive integer")
    return min(limit, MAX_PAGE_SIZE)


async def _read_events(reader: EventLogReader, request: Request) -> JSONResponse:
    email = request.query_params.get("email")
    try:
        if email:
            return json_response(await reader.latest_for(email))
        limit = parse_limit(request.query_params.get("limit"))
        return json_response(await reader.recent(limit))
    except RelayError:
        raise
    except Exception:
        logger.exception(
            "event_log_read_failed",
            extra={"operation": "events", "email": mask_email(email) if email else None},
        )
        return error_response("Failed to retrieve events", status.HTTP_500_INTERNAL_SERVER_ERROR)


async def _read_stats(reader: EventLogReader) -> JSONResponse:
    try:
        return json_response(await reader.stats())
    except RelayError:
        raise
    except Exception:
        logger.exception("event_log_read_failed", extra={"operation": "stats"})
        return error_response("Failed to retrieve stats", status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get("/{path:path}", response_model=None)
async def query_event_log(request: Request, path: str = "") -> JSONResponse:
    """Roteia GETs por sufixo do path."""
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        relay = get_relay(request)
        secret = relay.ghost.auth_token
        if secret and not verify_static_token(
            dict(request.headers), dict(request.query_params), secret
        ):
            raise AuthError()

        route_path = "/" + path.rstrip("/")
        if route_path.endswith(EVENTS_SUFFIX):
            return await _read_events(relay.event_log_reader, request)
        if route_path.endswith(STATS_SUFFIX):
            return await _read_stats(relay.event_log_reader)
        raise NotFoundError("Not found")

    except RelayError as exc:
        logger.warning(
            "event_log_request_rejected",
            extra={"status_code": exc.status_code, "error_type": type(exc).__name__},
        )
        return error_response(exc.message, exc.status_code, exc.details)

    finally:
        reset_correlation_id(token)
