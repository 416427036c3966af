"""Settings do Firestore.

Configurações para Google Cloud Firestore (backend do log de eventos).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class FirestoreSettings:
    """Configurações do Firestore.

    Attributes:
        project_id: ID do projeto GCP (usa GCP_PROJECT se não definido)
        collection_event_log: Collection para o log de eventos de subscribers
    """

    project_id: str = ""
    collection_event_log: str = "subscriber_logs"

    def validate(self, gcp_project: str) -> list[str]:
        """Valida configurações do Firestore.

        Args:
            gcp_project: Projeto GCP padrão para fallback.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []
        effective_project = self.project_id or gcp_project

        if not effective_project:
            errors.append(
                "FIRESTORE_PROJECT_ID ou GCP_PROJECT deve estar configurado"
            )

        return errors


def _load_firestore_from_env() -> FirestoreSettings:
    """Carrega FirestoreSettings de variáveis de ambiente."""
    return FirestoreSettings(
        project_id=os.getenv("FIRESTORE_PROJECT_ID", ""),
        collection_event_log=os.getenv(
            "FIRESTORE_COLLECTION_EVENT_LOG", "subscriber_logs"
        ),
    )


@lru_cache(maxsize=1)
def get_firestore_settings() -> FirestoreSettings:
    """Retorna instância cacheada de FirestoreSettings."""
    return _load_firestore_from_env()
