"""Testes do preflight, 405 e respostas compartilhadas."""

from __future__ import annotations

import json

import pytest

from api.routes.responses import CORS_HEADERS, error_response, utc_timestamp
from api.routes.subscribers.router import method_not_allowed, preflight


@pytest.mark.asyncio
async def test_preflight_returns_204_with_cors_headers() -> None:
    response = await preflight("anything")

    assert response.status_code == 204
    assert response.body == b""
    assert response.headers["access-control-allow-methods"] == "POST, OPTIONS"
    assert response.headers["access-control-max-age"] == "86400"


@pytest.mark.asyncio
async def test_other_methods_return_405() -> None:
    response = await method_not_allowed("x")
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 405
    assert payload["error"] == "Method not allowed. Only GET and POST requests are supported."


def test_error_response_includes_details_only_when_present() -> None:
    plain = json.loads(error_response("bad", 400).body)
    detailed = json.loads(error_response("bad", 400, {"field": "email"}).body)

    assert set(plain) == {"error", "timestamp"}
    assert detailed["details"] == {"field": "email"}


def test_error_response_sets_all_cors_headers() -> None:
    response = error_response("bad")
    for name, value in CORS_HEADERS.items():
        assert response.headers[name] == value


def test_utc_timestamp_is_iso_with_z_suffix() -> None:
    assert utc_timestamp().endswith("Z")
