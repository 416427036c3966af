"""Validators — validação de payloads de entrada.

Estrutura:
- subscriber/: email e status do evento canônico
"""

__all__: list[str] = []
