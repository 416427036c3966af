"""Settings dos canais de notificação (Discord e Slack).

Cada canal é ativado apenas quando a URL do webhook está configurada.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class NotificationSettings:
    """Configurações de notificação.

    Attributes:
        discord_webhook_url: URL do webhook Discord (vazio = desativado)
        slack_webhook_url: URL do webhook Slack (vazio = desativado)
        request_timeout_seconds: Timeout por POST de notificação
    """

    discord_webhook_url: str = ""
    slack_webhook_url: str = ""
    request_timeout_seconds: float = 10.0

    def validate(self) -> list[str]:
        """Valida URLs configuradas."""
        errors: list[str] = []
        for name, url in (
            ("DISCORD_WEBHOOK_URL", self.discord_webhook_url),
            ("SLACK_WEBHOOK_URL", self.slack_webhook_url),
        ):
            if url and not url.startswith(("https://", "http://")):
                errors.append(f"{name} deve ser uma URL http(s)")
        if self.request_timeout_seconds <= 0:
            errors.append("NOTIFICATION_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _load_from_env() -> NotificationSettings:
    """Carrega NotificationSettings de variáveis de ambiente."""
    return NotificationSettings(
        discord_webhook_url=os.getenv("DISCORD_WEBHOOK_URL", ""),
        slack_webhook_url=os.getenv("SLACK_WEBHOOK_URL", ""),
        request_timeout_seconds=float(os.getenv("NOTIFICATION_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_notification_settings() -> NotificationSettings:
    """Retorna instância cacheada de NotificationSettings."""
    return _load_from_env()
