"""Connectors — adapters de borda para APIs externas.

Estrutura:
- botapi/: Bot API (métodos via POST, JSON ou multipart)
"""

__all__: list[str] = []
