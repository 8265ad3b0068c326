"""Parser de multipart/form-data para asserts sobre requisições enviadas."""

from __future__ import annotations

from dataclasses import dataclass, field
from email.parser import BytesParser
from email.policy import HTTP
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


@dataclass
class FormPart:
    filename: str
    content: bytes
    content_type: str


@dataclass
class FormData:
    fields: dict[str, str] = field(default_factory=dict)
    files: dict[str, FormPart] = field(default_factory=dict)


def parse_form_data(request: httpx.Request) -> FormData:
    content_type = request.headers["content-type"]
    assert content_type.startswith("multipart/form-data")
    raw = f"Content-Type: {content_type}\r\n\r\n".encode() + request.content
    message = BytesParser(policy=HTTP).parsebytes(raw)

    form = FormData()
    for part in message.iter_parts():
        name = part.get_param("name", header="content-disposition")
        payload = part.get_payload(decode=True) or b""
        filename = part.get_filename()
        if filename is None:
            form.fields[name] = payload.decode()
        else:
            form.files[name] = FormPart(
                filename=filename,
                content=payload,
                content_type=part.get_content_type(),
            )
    return form
