"""Agregador de rotas.

Este módulo cria o router principal da API. A ordem importa: o health
check é registrado antes das rotas catch-all de subscribers.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.subscribers.router import router as subscribers_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health check na raiz
    api_router.include_router(health_router, tags=["health"])

    # Subscribers: qualquer outro path
    api_router.include_router(subscribers_router, tags=["subscribers"])

    return api_router
