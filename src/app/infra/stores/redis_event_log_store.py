"""Redis Event Log Store — log de eventos em Redis.

Valores são gravados como JSON (SET/GET). Listagem por prefixo usa
SCAN com MATCH, nunca KEYS, para não bloquear o servidor.

Contrato de Keys:
    As chaves seguem ``event_<ms>_<email>`` / ``latest_<email>``; o email
    aparece sanitizado na chave e por isso keys nunca são logadas.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from app.protocols.event_log_store import EventLogStoreProtocol, KeyListing
from utils.errors import RedisConnectionError

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)

SCAN_BATCH_SIZE = 500


class RedisEventLogStore(EventLogStoreProtocol):
    """Log de eventos usando Redis assíncrono (Upstash compatível).

    Args:
        async_redis_client: Cliente redis.asyncio
        ttl_seconds: TTL opcional das entradas (None = sem expiração)
    """

    def __init__(
        self,
        async_redis_client: AsyncRedis[bytes],
        ttl_seconds: int | None = None,
    ) -> None:
        self._redis = async_redis_client
        self._ttl_seconds = ttl_seconds

    async def put(self, key: str, value: dict[str, Any]) -> None:
        """Grava valor JSON na chave."""
        data = json.dumps(value, default=str)
        try:
            await self._redis.set(key, data, ex=self._ttl_seconds)
        except Exception as exc:
            raise RedisConnectionError("Falha ao gravar evento no Redis") from exc

    async def get(self, key: str) -> dict[str, Any] | None:
        """Lê e desserializa valor da chave."""
        try:
            raw = await self._redis.get(key)
        except Exception as exc:
            raise RedisConnectionError("Falha ao ler evento do Redis") from exc
        if raw is None:
            return None
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        return json.loads(raw)

    async def list_keys(
        self,
        prefix: str,
        limit: int | None = None,
        *,
        newest_first: bool = False,
    ) -> KeyListing:
        """Lista chaves por prefixo via SCAN (ordenadas localmente)."""
        found: list[str] = []
        try:
            async for raw_key in self._redis.scan_iter(
                match=f"{prefix}*", count=SCAN_BATCH_SIZE
            ):
                key = raw_key.decode("utf-8") if isinstance(raw_key, bytes) else raw_key
                found.append(key)
        except Exception as exc:
            raise RedisConnectionError("Falha ao listar eventos no Redis") from exc

        found.sort(reverse=newest_first)
        logger.debug("event_log_keys_scanned", extra={"count": len(found)})
        if limit is None or len(found) <= limit:
            return KeyListing(keys=found, list_complete=True)
        return KeyListing(keys=found[:limit], list_complete=False)
