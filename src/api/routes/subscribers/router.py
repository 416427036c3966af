"""Router de subscribers — máquina de estados sobre método e path.

- OPTIONS (qualquer path): preflight CORS, 204
- GET: consultas ao log de eventos (events.py)
- POST: pipeline de sincronização (webhook.py)
- PUT/PATCH/DELETE: 405
"""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from api.routes.responses import error_response, preflight_response
from api.routes.subscribers.events import router as events_router
from api.routes.subscribers.webhook import router as webhook_router
from utils.errors import MethodNotAllowedError

router = APIRouter()


@router.options("/{path:path}", response_model=None)
async def preflight(path: str = "") -> Response:
    """Preflight CORS, sem autenticação."""
    return preflight_response()


router.include_router(events_router)
router.include_router(webhook_router)


@router.api_route("/{path:path}", methods=["PUT", "PATCH", "DELETE"], response_model=None)
async def method_not_allowed(path: str = "") -> Response:
    exc = MethodNotAllowedError()
    return error_response(exc.message, status.HTTP_405_METHOD_NOT_ALLOWED)
