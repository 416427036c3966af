"""Cliente HTTP base para chamadas externas (SparkLoop e chat webhooks).

Uma tentativa por chamada: falhas de conexão/timeout viram ``HttpError``;
respostas HTTP (inclusive 4xx/5xx) são sempre devolvidas ao chamador.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClient:
    """Cliente HTTP simples sobre httpx.AsyncClient.

    Args:
        config: Timeout das chamadas
        transport: Transport httpx opcional (ex: MockTransport em testes)
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def request(
        self,
        method: str,
        url: str,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                return await client.request(
                    method,
                    url,
                    json=json,
                    headers=headers,
                    timeout=self._config.timeout_seconds,
                )
        except (httpx.TimeoutException, httpx.TransportError) as exc:
            logger.warning(
                "http_connection_error",
                extra={"method": method, "error_type": type(exc).__name__},
            )
            raise HttpError("http_connection_error") from exc

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return await self.request("POST", url, json=json, headers=headers)

    async def put(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return await self.request("PUT", url, json=json, headers=headers)
