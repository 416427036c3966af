"""Lookup case-insensitive de headers em mappings simples."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


def get_header(headers: Mapping[str, str], name: str) -> str | None:
    """Retorna o header ``name`` ignorando caixa (None se ausente)."""
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return None
