"""Exceções de domínio do relay e falhas recuperáveis de infraestrutura.

Cada ``RelayError`` carrega o status HTTP que a camada de rotas deve
responder, além da mensagem exposta ao cliente e detalhes opcionais.
"""

from __future__ import annotations

from typing import Any


class RelayError(Exception):
    """Base para erros traduzidos diretamente em resposta HTTP."""

    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(RelayError):
    """JSON malformado, email ausente/inválido ou status fora do conjunto."""

    status_code = 400


class AuthError(RelayError):
    """Assinatura ou token ausente/inválido."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized", details: dict[str, Any] | None = None) -> None:
        super().__init__(message, details)


class NotFoundError(RelayError):
    """Rota GET desconhecida ou email sem eventos registrados."""

    status_code = 404


class MethodNotAllowedError(RelayError):
    """Método HTTP não suportado."""

    status_code = 405

    def __init__(
        self,
        message: str = "Method not allowed. Only GET and POST requests are supported.",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)


class RateLimitError(RelayError):
    """Origem excedeu o limite da janela deslizante."""

    status_code = 429

    def __init__(
        self,
        message: str = "Rate limit exceeded. Please try again later.",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)


class UpstreamError(RelayError):
    """Falha na sincronização com a API do SparkLoop.

    ``remote_detail`` preserva o erro remoto para o corpo 502.
    """

    status_code = 502

    def __init__(self, remote_detail: str, remote_status: int | None = None) -> None:
        super().__init__(
            "Failed to update subscriber in SparkLoop",
            {"sparkloop_error": remote_detail},
        )
        self.remote_detail = remote_detail
        self.remote_status = remote_status

    def __str__(self) -> str:
        return self.remote_detail


class StorageNotConfiguredError(RelayError):
    """Consulta ao log de eventos sem backend configurado."""

    status_code = 500

    def __init__(
        self,
        message: str = "Event log storage not configured",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class RedisConnectionError(InfrastructureError):
    """Falha de conexão/timeout ao acessar Redis."""


class FirestoreUnavailableError(InfrastructureError):
    """Falha de indisponibilidade ao acessar Firestore."""
