"""App — coração do sistema: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: evento canônico de subscriber e registro de auditoria
- use_cases/: casos de uso (sync + side effects best-effort)
- services/: rate limit, sync upstream, auditoria, notificação
- infra/: implementações concretas de IO (HTTP, stores)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs estruturados

Padrão: app executa; api adapta; config configura; utils apoia.
"""
