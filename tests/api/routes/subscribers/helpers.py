"""Helpers de request/dependências para os testes de rotas."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

from starlette.requests import Request

from app.bootstrap.dependencies import RelayDependencies
from app.infra.stores import MemoryEventLogStore
from app.services import (
    AuditRecorder,
    EventLogReader,
    Notifier,
    SlidingWindowRateLimiter,
    SubscriberSynchronizer,
)
from app.use_cases.subscribers import SyncSubscriberUseCase
from config.settings import GhostSettings
from tests.fakes.fake_sparkloop import FakeSparkLoopClient


def build_relay(
    *,
    client: FakeSparkLoopClient | None = None,
    store: MemoryEventLogStore | None = None,
    auth_token: str = "",
    rate_limiter: SlidingWindowRateLimiter | None = None,
    with_store: bool = True,
) -> RelayDependencies:
    event_store = (store or MemoryEventLogStore()) if with_store else None
    use_case = SyncSubscriberUseCase(
        synchronizer=SubscriberSynchronizer(client or FakeSparkLoopClient()),
        audit_recorder=AuditRecorder(event_store),
        notifier=Notifier(),
    )
    return RelayDependencies(
        ghost=GhostSettings(auth_token=auth_token),
        use_case=use_case,
        event_log_reader=EventLogReader(event_store),
        rate_limiter=rate_limiter,
    )


def build_request(
    relay: RelayDependencies,
    *,
    method: str,
    path: str = "/",
    query_string: str = "",
    body: bytes = b"",
    headers: dict[str, str] | None = None,
) -> Request:
    header_items = headers or {}
    raw_headers = [(k.lower().encode("utf-8"), v.encode("utf-8")) for k, v in header_items.items()]
    scope: dict[str, Any] = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "path": path,
        "raw_path": path.encode("utf-8"),
        "query_string": query_string.encode("utf-8"),
        "headers": raw_headers,
        "app": SimpleNamespace(state=SimpleNamespace(relay=relay)),
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)
