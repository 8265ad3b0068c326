"""App — wiring e infraestrutura do BotKit.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- infra/stores/: stores de conversa (memória, Redis)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs estruturados

Padrão: api fala com a Bot API; conversations governa; app conecta.
"""
