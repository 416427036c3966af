"""Acesso ao grafo de dependências a partir do request."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request

if TYPE_CHECKING:
    from app.bootstrap.dependencies import RelayDependencies


def get_relay(request: Request) -> RelayDependencies:
    """Dependências em ``app.state.relay`` ou o singleton do bootstrap."""
    relay = getattr(request.app.state, "relay", None)
    if relay is None:
        from app.bootstrap import get_relay_dependencies

        relay = get_relay_dependencies()
    return relay
