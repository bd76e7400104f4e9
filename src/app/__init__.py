"""App — núcleo do relay: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (settings, clientes, wiring, lifecycle)
- coordinators/: worker de entrega (fila → provedor)
- use_cases/: ingestão, entrega e provisionamento
- domain/: RelayMessage e reescrita do remetente
- infra/: implementações concretas de IO (HTTP, fila Redis/memória)
- protocols/: contratos/interfaces
- observability/: correlation_id dos logs

Padrão: app executa; api adapta; utils apoia.
"""
