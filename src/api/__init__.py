"""API — cliente da Bot API.

Subpastas:
- connectors/botapi/: transporte, envelope, ErrorMapper e wrappers por método
- payload_builders/botapi/: normalização de parâmetros e anexos (attach://)
- hydration/: shapes estáticos e hidratação de respostas
- types/: tipos de domínio (Message, Update, Sticker, ...)

NÃO PODE conter: estado de conversas, stores ou wiring de aplicação.
"""
