"""Wrappers por método da Bot API.

Funções simples que recebem o BotApiClient explicitamente, montam o
ParameterBag (None = não enviado) e declaram o shape do resultado.
"""

from api.connectors.botapi.endpoints.messages import (
    edit_message_media,
    get_chat_member,
    get_file,
    send_message,
    send_photo,
)
from api.connectors.botapi.endpoints.stickers import (
    add_sticker_to_set,
    create_new_sticker_set,
    delete_sticker_from_set,
    get_sticker_set,
    send_sticker,
    set_sticker_emoji_list,
    set_sticker_position_in_set,
    upload_sticker_file,
)
from api.connectors.botapi.endpoints.updates import (
    delete_webhook,
    get_updates,
    get_webhook_info,
    set_webhook,
)

__all__ = [
    "add_sticker_to_set",
    "create_new_sticker_set",
    "delete_sticker_from_set",
    "delete_webhook",
    "edit_message_media",
    "get_chat_member",
    "get_file",
    "get_sticker_set",
    "get_updates",
    "get_webhook_info",
    "send_message",
    "send_photo",
    "send_sticker",
    "set_sticker_emoji_list",
    "set_sticker_position_in_set",
    "set_webhook",
    "upload_sticker_file",
]
