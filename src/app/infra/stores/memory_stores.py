"""Stores em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

import json
from typing import Any

from app.protocols.event_log_store import EventLogStoreProtocol, KeyListing


class MemoryEventLogStore(EventLogStoreProtocol):
    """Log de eventos em memória — apenas para dev/test.

    Valores são guardados serializados para que o chamador nunca
    compartilhe referências mutáveis com o store.
    """

    def __init__(self, max_records: int = 10000) -> None:
        self._store: dict[str, str] = {}
        self._max_records = max_records

    async def put(self, key: str, value: dict[str, Any]) -> None:
        """Grava valor (sobrescreve chave existente)."""
        self._store[key] = json.dumps(value, default=str)
        # Limita tamanho para evitar memory leak em dev
        if len(self._store) > self._max_records:
            oldest = min(self._store)
            del self._store[oldest]

    async def get(self, key: str) -> dict[str, Any] | None:
        """Retorna valor desserializado ou None."""
        raw = self._store.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    async def list_keys(
        self,
        prefix: str,
        limit: int | None = None,
        *,
        newest_first: bool = False,
    ) -> KeyListing:
        """Lista chaves por prefixo em ordem lexicográfica."""
        keys = sorted(k for k in self._store if k.startswith(prefix))
        if newest_first:
            keys.reverse()
        if limit is None or len(keys) <= limit:
            return KeyListing(keys=keys, list_complete=True)
        return KeyListing(keys=keys[:limit], list_complete=False)
