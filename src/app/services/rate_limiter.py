"""Rate limiter de janela deslizante por endereço de origem.

O estado (endereço → timestamps) é um objeto explícito injetado, não
um global de módulo. Em memória do processo: sem persistência nem
coordenação entre instâncias; é um guard leve de borda, não uma
fronteira de segurança.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

DEFAULT_LIMIT = 10
DEFAULT_WINDOW_MS = 60_000
UNKNOWN_SOURCE = "unknown"

# Tamanho da tabela a partir do qual origens expiradas são varridas
SWEEP_THRESHOLD = 1000

# Headers de endereço do cliente, em ordem de preferência
CLIENT_ADDRESS_HEADERS = ("cf-connecting-ip", "x-forwarded-for")


@dataclass
class RateWindowState:
    """Tabela endereço → timestamps (ms) das requests aceitas."""

    windows: dict[str, list[float]] = field(default_factory=dict)
    last_sweep_ms: float = 0.0

    def __len__(self) -> int:
        return len(self.windows)


def _now_ms() -> float:
    return time.time() * 1000


def sweep_expired(state: RateWindowState, window_start: float) -> int:
    """Remove origens sem nenhum timestamp dentro da janela.

    Returns:
        Quantidade de origens removidas.
    """
    expired = [
        key for key, stamps in state.windows.items() if not stamps or stamps[-1] <= window_start
    ]
    for key in expired:
        del state.windows[key]
    return len(expired)


def is_rate_limited(
    state: RateWindowState,
    source_key: str,
    limit: int = DEFAULT_LIMIT,
    window_ms: int = DEFAULT_WINDOW_MS,
    now_ms: float | None = None,
) -> bool:
    """Verifica e registra uma request na janela deslizante.

    Descarta timestamps fora de ``(now - window_ms, now]``; se ainda há
    espaço, registra ``now`` e libera. Requests rejeitadas não entram
    na janela.

    Com a tabela acima de ``SWEEP_THRESHOLD`` origens, no máximo uma vez
    por janela, remove as origens já expiradas (o endereço vem de header
    controlado pelo cliente).

    Returns:
        True se a origem excedeu o limite.
    """
    now = _now_ms() if now_ms is None else now_ms
    window_start = now - window_ms
    if len(state.windows) >= SWEEP_THRESHOLD and now - state.last_sweep_ms >= window_ms:
        state.last_sweep_ms = now
        sweep_expired(state, window_start)

    recent = [ts for ts in state.windows.get(source_key, []) if ts > window_start]

    if len(recent) >= limit:
        state.windows[source_key] = recent
        return True

    recent.append(now)
    state.windows[source_key] = recent
    return False


def client_address(headers: Mapping[str, str]) -> str:
    """Melhor endereço disponível nos headers, senão ``"unknown"``."""
    lowered = {key.lower(): value for key, value in headers.items()}
    for name in CLIENT_ADDRESS_HEADERS:
        value = lowered.get(name)
        if value:
            return value
    return UNKNOWN_SOURCE


class SlidingWindowRateLimiter:
    """Fachada com limite/janela fixos e relógio injetável.

    Args:
        limit: Máximo de requests por origem na janela
        window_ms: Janela em milissegundos
        state: Estado compartilhado (novo se None)
        clock: Função que retorna o tempo atual em ms
    """

    def __init__(
        self,
        limit: int = DEFAULT_LIMIT,
        window_ms: int = DEFAULT_WINDOW_MS,
        state: RateWindowState | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.limit = limit
        self.window_ms = window_ms
        self.state = state if state is not None else RateWindowState()
        self._clock = clock or _now_ms

    def is_limited(self, source_key: str) -> bool:
        return is_rate_limited(
            self.state,
            source_key,
            limit=self.limit,
            window_ms=self.window_ms,
            now_ms=self._clock(),
        )
