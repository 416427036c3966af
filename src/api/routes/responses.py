"""Respostas JSON compartilhadas pelas rotas.

Toda resposta (sucesso, erro e preflight) carrega os headers CORS.
Corpo de erro: ``{error, timestamp, details?}``.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from fastapi import Response, status
from fastapi.responses import JSONResponse

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Max-Age": "86400",
}

INTERNAL_ERROR_MESSAGE = "Internal server error"


def utc_timestamp() -> str:
    """Timestamp ISO-8601 em UTC com sufixo ``Z``."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def json_response(data: Any, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(content=data, status_code=status_code, headers=CORS_HEADERS)


def error_response(
    message: str,
    status_code: int = status.HTTP_400_BAD_REQUEST,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    """Resposta de erro padrão; ``details`` só aparece quando não vazio."""
    body: dict[str, Any] = {"error": message, "timestamp": utc_timestamp()}
    if details:
        body["details"] = details
    return json_response(body, status_code)


def preflight_response() -> Response:
    """Resposta de preflight CORS (204, sem corpo)."""
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers=CORS_HEADERS)
