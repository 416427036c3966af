"""Settings do rate limiter de borda (janela deslizante por origem)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class RateLimitSettings:
    """Configurações de rate limit.

    Attributes:
        enabled: Liga/desliga o limiter
        max_requests: Máximo de requests por origem dentro da janela
        window_ms: Tamanho da janela deslizante em milissegundos
    """

    enabled: bool = True
    max_requests: int = 10
    window_ms: int = 60_000

    def validate(self) -> list[str]:
        """Valida configurações de rate limit."""
        errors: list[str] = []
        if self.max_requests <= 0:
            errors.append("RATE_LIMIT_REQUESTS deve ser > 0")
        if self.window_ms <= 0:
            errors.append("RATE_LIMIT_WINDOW_MS deve ser > 0")
        return errors


def _load_from_env() -> RateLimitSettings:
    """Carrega RateLimitSettings de variáveis de ambiente."""
    return RateLimitSettings(
        enabled=os.getenv("RATE_LIMIT_ENABLED", "true").lower() in ("true", "1", "yes"),
        max_requests=int(os.getenv("RATE_LIMIT_REQUESTS", "10")),
        window_ms=int(os.getenv("RATE_LIMIT_WINDOW_MS", "60000")),
    )


@lru_cache(maxsize=1)
def get_rate_limit_settings() -> RateLimitSettings:
    """Retorna instância cacheada de RateLimitSettings."""
    return _load_from_env()
