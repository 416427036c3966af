"""Conector Ghost — autenticação e parsing dos webhooks de members."""

from .signature import (
    SignatureResult,
    authenticate_request,
    parse_signature_header,
    verify_ghost_signature,
    verify_static_token,
)

__all__ = [
    "SignatureResult",
    "authenticate_request",
    "parse_signature_header",
    "verify_ghost_signature",
    "verify_static_token",
]
