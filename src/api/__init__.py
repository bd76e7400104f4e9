"""API — camada de borda do relay.

Responsabilidades:
- Receber o relay webhook do provedor e os pedidos de provisionamento
- Validar e extrair os payloads de entrada
- Construir payloads para a API do provedor

Subpastas:
- connectors/: cliente HTTP e parse de webhook do SparkPost
- normalizers/: extração do email bruto do relay webhook
- payload_builders/: corpos JSON para transmissions/relay-webhooks/inbound-domains
- validators/: corpos dos endpoints de provisionamento
- routes/: endpoints HTTP (relay, provisionamento, health)

NÃO PODE conter: acesso à fila, regras de entrega, orquestração de use cases.
"""
