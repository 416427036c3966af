"""Entrypoint do relay Ghost → SparkLoop.

Este módulo é o ponto de entrada principal do serviço.
Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import create_api_router
from api.routes.responses import error_response
from app.bootstrap import get_relay_dependencies, initialize_app, validate_runtime_settings
from config.logging import get_logger
from utils.errors import MethodNotAllowedError, NotFoundError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi.responses import JSONResponse

    from app.bootstrap.dependencies import RelayDependencies

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Monta o grafo de dependências (se não injetado)

    Shutdown:
    - Fecha o cliente Redis, se criado
    """
    logger.info("app_starting")
    if getattr(app.state, "relay", None) is None:
        validate_runtime_settings()
        app.state.relay = get_relay_dependencies()

    yield

    logger.info("app_shutting_down")
    await _close_redis_client()


async def _close_redis_client() -> None:
    from app.bootstrap.clients import create_async_redis_client

    if create_async_redis_client.cache_info().currsize == 0:
        return
    try:
        await create_async_redis_client().aclose()
    except Exception as exc:
        logger.warning("redis_client_close_failed", extra={"error_type": type(exc).__name__})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Renderiza erros do próprio framework no corpo de erro padrão."""
    if exc.status_code == 404:
        message = NotFoundError("Not found").message
    elif exc.status_code == 405:
        message = MethodNotAllowedError().message
    else:
        message = str(exc.detail)
    return error_response(message, exc.status_code)


def create_app(relay: RelayDependencies | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        relay: Dependências pré-montadas (testes); default via bootstrap

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="Ghost SparkLoop Relay",
        description="Sincroniza members do Ghost com subscribers do SparkLoop",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    fastapi_app.state.relay = relay

    fastapi_app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Registra todas as rotas
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured")

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting ghost-sparkloop-relay in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
