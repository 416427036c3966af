"""Cliente HTTP especializado para a API de subscribers do SparkLoop.

Estende HttpClient genérico com:
- Header X-Api-Key e User-Agent
- Endpoints update-by-id (PUT) e create (POST)
- Decodificação do corpo JSON; respostas não-2xx são devolvidas ao
  chamador, que decide o fallback (404 → create)
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from api.connectors.sparkloop.errors import extract_error_detail
from app.infra.http import HttpClient, HttpClientConfig, HttpError
from app.protocols.sparkloop_client import UpstreamResponse

if TYPE_CHECKING:
    import httpx

    from config.settings import SparkLoopSettings

logger: logging.Logger = logging.getLogger(__name__)


class SparkLoopHttpClient(HttpClient):
    """Cliente da API v2 do SparkLoop.

    Args:
        api_key: Chave da API (validada antes de cada chamada)
        subscribers_endpoint: URL da collection ``/v2/subscribers``
        user_agent: User-Agent das chamadas
        config: Configuração HTTP base
        transport: Transport httpx opcional (testes)
    """

    def __init__(
        self,
        api_key: str,
        subscribers_endpoint: str,
        user_agent: str,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(config, transport=transport)
        self._api_key = api_key
        self._endpoint = subscribers_endpoint.rstrip("/")
        self._user_agent = user_agent

    @property
    def configured(self) -> bool:
        return bool(self._api_key and self._api_key.strip())

    def _headers(self) -> dict[str, str]:
        if not self.configured:
            raise ValueError("SparkLoop API key not configured")
        return {
            "X-Api-Key": self._api_key,
            "Content-Type": "application/json",
            "User-Agent": self._user_agent,
        }

    async def update_subscriber(
        self, identifier: str, payload: dict[str, Any]
    ) -> UpstreamResponse:
        """PUT /subscribers/{identifier} (identifier é o email, url-encoded)."""
        url = f"{self._endpoint}/{quote(identifier, safe='')}"
        response = await self.put(url, json=payload, headers=self._headers())
        return _decode(response, "update")

    async def create_subscriber(self, payload: dict[str, Any]) -> UpstreamResponse:
        """POST /subscribers."""
        response = await self.post(self._endpoint, json=payload, headers=self._headers())
        return _decode(response, "create")


def _decode(response: httpx.Response, operation: str) -> UpstreamResponse:
    try:
        body = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.error(
            "sparkloop_response_invalid_json",
            extra={"operation": operation, "status_code": response.status_code},
        )
        raise HttpError("Response JSON inválido", status_code=response.status_code) from exc

    if not isinstance(body, dict):
        body = {"data": body}
    error_detail = None if response.is_success else extract_error_detail(body)
    return UpstreamResponse(
        status_code=response.status_code,
        body=body,
        error_detail=error_detail,
    )


def create_sparkloop_http_client(
    settings: SparkLoopSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> SparkLoopHttpClient:
    """Factory para criar cliente SparkLoop com config do ambiente."""
    # Import local para evitar dependência circular
    from config.settings import get_sparkloop_settings

    sparkloop = settings or get_sparkloop_settings()
    config = HttpClientConfig(timeout_seconds=sparkloop.request_timeout_seconds)
    return SparkLoopHttpClient(
        api_key=sparkloop.api_key,
        subscribers_endpoint=sparkloop.subscribers_endpoint,
        user_agent=sparkloop.user_agent,
        config=config,
        transport=transport,
    )
