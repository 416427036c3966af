"""Testes do parse_webhook_request (autenticação + JSON)."""

from __future__ import annotations

import pytest

from api.connectors.ghost.webhook import (
    InvalidJsonError,
    InvalidSignatureError,
    parse_webhook_request,
)
from utils.errors import AuthError, ValidationError


def test_returns_payload_and_result_without_secret() -> None:
    payload, result = parse_webhook_request(b'{"email": "a@b.com"}', {}, None)

    assert payload == {"email": "a@b.com"}
    assert result.skipped is True


def test_invalid_json_raises_validation_error() -> None:
    with pytest.raises(InvalidJsonError) as exc_info:
        parse_webhook_request(b"{not json", {}, None)

    assert isinstance(exc_info.value, ValidationError)
    assert exc_info.value.message == "Invalid JSON in request body"
    assert exc_info.value.status_code == 400


def test_empty_body_is_invalid_json() -> None:
    with pytest.raises(InvalidJsonError):
        parse_webhook_request(b"", {}, None)


def test_auth_is_checked_before_json() -> None:
    with pytest.raises(InvalidSignatureError) as exc_info:
        parse_webhook_request(b"{not json", {}, "secret")

    assert isinstance(exc_info.value, AuthError)
    assert exc_info.value.message == "Unauthorized"
    assert exc_info.value.status_code == 401


def test_token_query_param_authenticates() -> None:
    payload, result = parse_webhook_request(
        b'{"email": "a@b.com"}', {}, "secret", {"token": "secret"}
    )

    assert payload["email"] == "a@b.com"
    assert result.mode == "token"


def test_non_object_json_is_returned_as_is() -> None:
    payload, _ = parse_webhook_request(b"[1, 2]", {}, None)
    assert payload == [1, 2]
