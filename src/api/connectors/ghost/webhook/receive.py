"""Parse e validação inicial do request inbound (sem PII)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from config.settings.ghost import GHOST_SIGNATURE_HEADER
from utils.errors import AuthError, ValidationError

from ..signature import SignatureResult, authenticate_request

if TYPE_CHECKING:
    from collections.abc import Mapping


class InvalidSignatureError(AuthError):
    """Assinatura ou token inválido."""

    def __init__(self, reason: str) -> None:
        super().__init__("Unauthorized")
        self.reason = reason


class InvalidJsonError(ValidationError):
    """Corpo do request não é JSON válido."""

    def __init__(self) -> None:
        super().__init__("Invalid JSON in request body")


def parse_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
    query_params: Mapping[str, str] | None = None,
    *,
    signature_header: str = GHOST_SIGNATURE_HEADER,
) -> tuple[object, SignatureResult]:
    """Autentica e parseia JSON do request.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos
        secret: Secret compartilhado (None = sem autenticação)
        query_params: Query string (token estático)
        signature_header: Nome do header de assinatura

    Raises:
        InvalidSignatureError: Se autenticação falhar
        InvalidJsonError: Se o corpo não for JSON

    Returns:
        (payload decodificado, SignatureResult). O payload pode não ser
        um objeto; o normalizer decide o que fazer com ele.
    """
    signature_result = authenticate_request(
        headers,
        raw_body,
        secret,
        query_params,
        signature_header=signature_header,
    )
    if not signature_result.valid:
        raise InvalidSignatureError(signature_result.error or "invalid_signature")

    try:
        payload = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError() from exc

    return payload, signature_result
