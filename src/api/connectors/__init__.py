"""Connectors — adapters de borda para APIs externas.

Estrutura:
- ghost/: autenticação e parsing dos webhooks do Ghost
- sparkloop/: API de subscribers do SparkLoop (upstream)
- chat/: webhooks de chat (Discord, Slack) para notificações

Cada destino tem seu próprio connector, garantindo isolamento de falhas.
"""

__all__: list[str] = []
