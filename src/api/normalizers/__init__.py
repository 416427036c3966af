"""Normalizers — conversão de payloads externos para o evento canônico.

Estrutura:
- ghost/: webhooks de members do Ghost e chamadas diretas

Extractor classifica o formato; normalizer deriva status e valida.
"""

from .ghost import classify_payload, normalize, normalize_shape

__all__ = [
    "classify_payload",
    "normalize",
    "normalize_shape",
]
