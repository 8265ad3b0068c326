"""Payload builders — construção de corpos de requisição.

Estrutura:
- botapi/: ParameterBag, InputFile e AttachmentResolver
"""

__all__: list[str] = []
