"""InputMedia — variantes de mídia para editMessageMedia e sendMediaGroup.

União discriminada pelo campo `type`. `media` e `thumbnail` aceitam
InputFile aninhado (ex: vídeo com thumbnail), resolvido em attach://.
"""

from __future__ import annotations

from dataclasses import dataclass

from api.hydration.shapes import (
    BOOL,
    INT,
    STR,
    array_of,
    enum_of,
    optional,
    register_object,
    register_union,
    required,
)
from api.payload_builders.botapi.input_file import InputFile
from api.types.common import MESSAGE_ENTITY, MessageEntity
from api.types.enums import InputMediaType, ParseMode


@dataclass(frozen=True, slots=True, kw_only=True)
class InputMediaPhoto:
    media: InputFile | str
    type: InputMediaType = InputMediaType.PHOTO
    caption: str | None = None
    parse_mode: ParseMode | None = None
    caption_entities: list[MessageEntity] | None = None
    has_spoiler: bool | None = None


INPUT_MEDIA_PHOTO = register_object(
    InputMediaPhoto,
    required("type", enum_of(InputMediaType)),
    required("media", STR),
    optional("caption", STR),
    optional("parse_mode", enum_of(ParseMode)),
    optional("caption_entities", array_of(MESSAGE_ENTITY)),
    optional("has_spoiler", BOOL),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class InputMediaVideo:
    media: InputFile | str
    type: InputMediaType = InputMediaType.VIDEO
    thumbnail: InputFile | str | None = None
    caption: str | None = None
    parse_mode: ParseMode | None = None
    width: int | None = None
    height: int | None = None
    duration: int | None = None
    supports_streaming: bool | None = None


INPUT_MEDIA_VIDEO = register_object(
    InputMediaVideo,
    required("type", enum_of(InputMediaType)),
    required("media", STR),
    optional("thumbnail", STR),
    optional("caption", STR),
    optional("parse_mode", enum_of(ParseMode)),
    optional("width", INT),
    optional("height", INT),
    optional("duration", INT),
    optional("supports_streaming", BOOL),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class InputMediaDocument:
    media: InputFile | str
    type: InputMediaType = InputMediaType.DOCUMENT
    thumbnail: InputFile | str | None = None
    caption: str | None = None
    parse_mode: ParseMode | None = None
    disable_content_type_detection: bool | None = None


INPUT_MEDIA_DOCUMENT = register_object(
    InputMediaDocument,
    required("type", enum_of(InputMediaType)),
    required("media", STR),
    optional("thumbnail", STR),
    optional("caption", STR),
    optional("parse_mode", enum_of(ParseMode)),
    optional("disable_content_type_detection", BOOL),
)

INPUT_MEDIA = register_union(
    "InputMedia",
    "type",
    {
        InputMediaType.PHOTO.value: INPUT_MEDIA_PHOTO,
        InputMediaType.VIDEO.value: INPUT_MEDIA_VIDEO,
        InputMediaType.DOCUMENT.value: INPUT_MEDIA_DOCUMENT,
    },
)

InputMedia = InputMediaPhoto | InputMediaVideo | InputMediaDocument
