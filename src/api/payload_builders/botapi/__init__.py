"""Construção de corpos de requisição para a Bot API.

- params: normalização do ParameterBag e RequestContext
- input_file: payload binário (InputFile)
- attachments: AttachmentResolver (attach://<nome>)
"""

from api.payload_builders.botapi.attachments import (
    ATTACH_SCHEME,
    Attachment,
    AttachmentResolver,
    ResolvedRequest,
    attach_token,
)
from api.payload_builders.botapi.input_file import InputFile
from api.payload_builders.botapi.params import (
    RequestContext,
    normalize_parameters,
    to_json,
)

__all__ = [
    "ATTACH_SCHEME",
    "Attachment",
    "AttachmentResolver",
    "InputFile",
    "RequestContext",
    "ResolvedRequest",
    "attach_token",
    "normalize_parameters",
    "to_json",
]
