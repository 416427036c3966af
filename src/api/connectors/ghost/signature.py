"""Autenticação de requests inbound: assinatura Ghost ou token estático.

Modos, na ordem:
1. Webhook assinado (header ``x-ghost-signature`` presente):
   ``sha256=<hex>, t=<timestamp>``; HMAC-SHA256 de ``body + timestamp``
   com o secret compartilhado.
2. Token estático: ``Authorization: Bearer <secret>`` ou ``?token=<secret>``.

Sem secret configurado a verificação é pulada (``skipped=True``).
O timestamp não é checado contra o relógio (sem proteção contra replay).
"""

from __future__ import annotations

import hashlib
import hmac
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from config.settings.ghost import GHOST_SIGNATURE_HEADER

from .headers import get_header

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

_HASH_PREFIX = "sha256="
_TIMESTAMP_PREFIX = "t="
_BEARER_PREFIX = "Bearer "


@dataclass(frozen=True, slots=True)
class SignatureResult:
    """Resultado da autenticação.

    Attributes:
        valid: True se autenticado (ou verificação pulada)
        skipped: True se não havia secret configurado
        mode: "signature", "token" ou "none"
        error: Motivo da falha (sem dados sensíveis)
    """

    valid: bool
    skipped: bool = False
    mode: str = "none"
    error: str | None = None


def parse_signature_header(signature: str) -> tuple[str, str] | None:
    """Extrai (hash, timestamp) de ``sha256=<hex>, t=<ts>``.

    Returns:
        Tupla (hash, timestamp) ou None se algum sub-campo faltar.
    """
    parts = [part.strip() for part in signature.split(",")]
    hash_part = next((p for p in parts if p.startswith(_HASH_PREFIX)), None)
    timestamp_part = next((p for p in parts if p.startswith(_TIMESTAMP_PREFIX)), None)
    if not hash_part or not timestamp_part:
        return None
    return hash_part[len(_HASH_PREFIX):], timestamp_part[len(_TIMESTAMP_PREFIX):]


def verify_ghost_signature(raw_body: bytes, signature: str, secret: str) -> bool:
    """Valida assinatura HMAC-SHA256 do Ghost.

    Args:
        raw_body: Corpo bruto da requisição (bytes exatos recebidos)
        signature: Valor do header x-ghost-signature
        secret: Secret compartilhado

    Returns:
        True se o hex calculado for idêntico ao recebido
    """
    parsed = parse_signature_header(signature)
    if parsed is None:
        logger.warning("ghost_signature_malformed")
        return False

    expected_hash, timestamp = parsed
    payload = raw_body + timestamp.encode("utf-8")
    computed = hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()
    # bytes: compare_digest rejeita str com caracteres não-ASCII
    return hmac.compare_digest(computed.encode("ascii"), expected_hash.encode("utf-8"))


def verify_static_token(
    headers: Mapping[str, str],
    query_params: Mapping[str, str] | None,
    secret: str,
) -> bool:
    """Aceita Bearer token ou query param ``token`` iguais ao secret."""
    auth_header = get_header(headers, "authorization")
    if auth_header is not None:
        bearer = auth_header.replace(_BEARER_PREFIX, "", 1)
        if hmac.compare_digest(bearer.encode("utf-8"), secret.encode("utf-8")):
            return True
    token_param = (query_params or {}).get("token")
    if token_param is not None:
        return hmac.compare_digest(token_param.encode("utf-8"), secret.encode("utf-8"))
    return False


def authenticate_request(
    headers: Mapping[str, str],
    raw_body: bytes,
    secret: str | None,
    query_params: Mapping[str, str] | None = None,
    *,
    signature_header: str = GHOST_SIGNATURE_HEADER,
    allow_signature: bool = True,
) -> SignatureResult:
    """Autentica request nos dois modos suportados.

    Com header de assinatura presente, somente o modo assinado é
    avaliado (sem fallback para token).

    Args:
        headers: Headers recebidos
        raw_body: Corpo bruto
        secret: Secret configurado (None/vazio = pula verificação)
        query_params: Query string da URL
        signature_header: Nome do header de assinatura
        allow_signature: False em GETs (apenas token estático)
    """
    if not secret:
        return SignatureResult(valid=True, skipped=True)

    signature = get_header(headers, signature_header) if allow_signature else None
    if signature:
        if verify_ghost_signature(raw_body, signature, secret):
            return SignatureResult(valid=True, mode="signature")
        return SignatureResult(valid=False, mode="signature", error="invalid_signature")

    if verify_static_token(headers, query_params, secret):
        return SignatureResult(valid=True, mode="token")
    return SignatureResult(valid=False, mode="token", error="invalid_token")
