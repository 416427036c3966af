"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (sync de subscribers, consultas, health)
- Autenticação e rate limit na borda
- Delegação para normalizers/use_cases
- Respostas JSON com headers CORS

Estrutura:
- routes/subscribers/: POST de sync, GET de events/stats, preflight
- routes/health/: liveness probe
- responses.py: corpo de erro e headers CORS compartilhados

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
