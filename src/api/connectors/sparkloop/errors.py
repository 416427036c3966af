"""Erros e helpers de parsing para a API do SparkLoop."""

from __future__ import annotations

from typing import Any

UNKNOWN_ERROR = "Unknown error"


def extract_error_detail(response_body: dict[str, Any]) -> str:
    """Extrai a mensagem de erro do corpo JSON do SparkLoop.

    A API responde ``{"error": "..."}`` (às vezes ``{"error": {...}}`` ou
    ``{"errors": [...]}``); qualquer outro formato vira "Unknown error".
    """
    error = response_body.get("error")
    if isinstance(error, str) and error:
        return error
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message:
            return message
    errors = response_body.get("errors")
    if isinstance(errors, list) and errors:
        return "; ".join(str(item) for item in errors)
    return UNKNOWN_ERROR

