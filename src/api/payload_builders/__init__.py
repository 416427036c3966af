"""Payload builders — construção de payloads para APIs externas.

Estrutura:
- chat/: notificações de novo subscriber (Discord embed, Slack Block Kit)

O payload do SparkLoop é montado pelo synchronizer (app/services).
"""

__all__: list[str] = []
