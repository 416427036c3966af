"""Firestore Event Log Store — log de eventos em Firestore.

Uma collection, um documento por chave. O campo ``key`` replica o ID
para permitir range query por prefixo ordenada.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from app.protocols.event_log_store import EventLogStoreProtocol, KeyListing
from utils.errors import FirestoreUnavailableError

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

logger = logging.getLogger(__name__)

# Collection padrão do log de eventos
EVENT_LOG_COLLECTION = "subscriber_logs"

# Maior code point usual, fecha o range do prefixo
_PREFIX_UPPER_BOUND = "\uf8ff"


class FirestoreEventLogStore(EventLogStoreProtocol):
    """Log de eventos usando Firestore.

    O SDK Python do Firestore é síncrono; as chamadas rodam em
    ``asyncio.to_thread`` para não bloquear o event loop.

    Args:
        firestore_client: Cliente Firestore
        collection_name: Nome da collection (default: subscriber_logs)
    """

    def __init__(
        self,
        firestore_client: FirestoreClient,
        collection_name: str = EVENT_LOG_COLLECTION,
    ) -> None:
        self._db = firestore_client
        self._collection = collection_name

    @staticmethod
    def _doc_id(key: str) -> str:
        # "/" é separador de path no Firestore
        return key.replace("/", "%2F")

    def _put_sync(self, key: str, value: dict[str, Any]) -> None:
        self._db.collection(self._collection).document(self._doc_id(key)).set(
            {"key": key, "value": value}
        )

    def _get_sync(self, key: str) -> dict[str, Any] | None:
        snapshot = self._db.collection(self._collection).document(self._doc_id(key)).get()
        if not getattr(snapshot, "exists", False):
            return None
        data = snapshot.to_dict() or {}
        value = data.get("value")
        return value if isinstance(value, dict) else None

    def _list_sync(self, prefix: str, limit: int | None, newest_first: bool) -> list[str]:
        from google.cloud.firestore_v1.base_query import FieldFilter

        query = (
            self._db.collection(self._collection)
            .where(filter=FieldFilter("key", ">=", prefix))
            .where(filter=FieldFilter("key", "<", prefix + _PREFIX_UPPER_BOUND))
            .order_by("key", direction="DESCENDING" if newest_first else "ASCENDING")
        )
        if limit is not None:
            # Um a mais para saber se a listagem está completa
            query = query.limit(limit + 1)
        return [snapshot.get("key") for snapshot in query.stream()]

    async def put(self, key: str, value: dict[str, Any]) -> None:
        try:
            await asyncio.to_thread(self._put_sync, key, value)
        except Exception as exc:
            raise FirestoreUnavailableError("Falha ao gravar evento no Firestore") from exc

    async def get(self, key: str) -> dict[str, Any] | None:
        try:
            return await asyncio.to_thread(self._get_sync, key)
        except Exception as exc:
            raise FirestoreUnavailableError("Falha ao ler evento do Firestore") from exc

    async def list_keys(
        self,
        prefix: str,
        limit: int | None = None,
        *,
        newest_first: bool = False,
    ) -> KeyListing:
        try:
            keys = await asyncio.to_thread(self._list_sync, prefix, limit, newest_first)
        except Exception as exc:
            raise FirestoreUnavailableError("Falha ao listar eventos no Firestore") from exc

        if limit is None or len(keys) <= limit:
            return KeyListing(keys=keys, list_complete=True)
        return KeyListing(keys=keys[:limit], list_complete=False)
