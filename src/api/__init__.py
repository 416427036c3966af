"""API — camada de borda e adapters de canais.

Responsabilidades:
- Receber requests externos (webhooks do Ghost, chamadas diretas)
- Validar assinaturas e payloads
- Normalizar dados para modelos internos
- Construir payloads para APIs externas
- Aplicar validações de email e status

Subpastas:
- connectors/: adapters HTTP por canal
- normalizers/: conversão de payloads externos → modelos internos
- payload_builders/: construção de payloads para APIs externas
- validators/: validação de payloads e limites
- routes/: endpoints HTTP (sync, consultas, health)

NÃO PODE conter: persistência, orquestração de use cases.
"""
