"""Configuração do pytest para o relay Ghost → SparkLoop."""

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


def _settings_getters() -> list:
    from app.bootstrap import get_relay_dependencies
    from config import settings

    return [
        settings.get_base_settings,
        settings.get_event_log_settings,
        settings.get_firestore_settings,
        settings.get_ghost_settings,
        settings.get_notification_settings,
        settings.get_rate_limit_settings,
        settings.get_sparkloop_settings,
        get_relay_dependencies,
    ]


@pytest.fixture
def fresh_settings() -> Iterator[None]:
    """Limpa os caches de settings antes e depois do teste (uso com monkeypatch)."""
    for getter in _settings_getters():
        getter.cache_clear()
    yield
    for getter in _settings_getters():
        getter.cache_clear()
