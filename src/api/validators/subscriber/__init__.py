"""Validadores do evento canônico de subscriber (email e status)."""

from __future__ import annotations

import re

from app.domain import VALID_STATUSES, SubscriberStatus
from utils.errors import ValidationError

# local@dominio.tld: sem espaços nem "@" extras, ao menos um ponto no domínio
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_valid_email(email: object) -> bool:
    """Retorna True se ``email`` tem formato ``local@domain.tld``."""
    return isinstance(email, str) and EMAIL_PATTERN.fullmatch(email) is not None


def validate_email(email: object) -> str:
    """Valida formato do email.

    Raises:
        ValidationError: "Invalid email format"
    """
    if not is_valid_email(email):
        raise ValidationError("Invalid email format")
    return email  # type: ignore[return-value]


def validate_status(status: object) -> SubscriberStatus:
    """Valida status contra o conjunto canônico.

    Raises:
        ValidationError: Lista os status válidos na mensagem
    """
    if isinstance(status, str) and status in VALID_STATUSES:
        return SubscriberStatus(status)
    raise ValidationError(f"Invalid status. Must be one of: {', '.join(VALID_STATUSES)}")


__all__ = [
    "EMAIL_PATTERN",
    "is_valid_email",
    "validate_email",
    "validate_status",
]
