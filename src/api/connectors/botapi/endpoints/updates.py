"""Wrappers de recebimento de updates e webhook."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.hydration.shapes import BOOL, array_of
from api.types.common import UPDATE, WEBHOOK_INFO

if TYPE_CHECKING:
    from api.connectors.botapi.client import BotApiClient
    from api.payload_builders.botapi.input_file import InputFile
    from api.types.common import Update, WebhookInfo

_UPDATES = array_of(UPDATE)


def get_updates(
    client: BotApiClient,
    *,
    offset: int | None = None,
    limit: int | None = None,
    timeout: int | None = None,
    allowed_updates: list[str] | None = None,
) -> list[Update] | None:
    """Long polling de updates.

    O timeout HTTP é estendido pelo timeout do long polling.
    """
    http_timeout = None
    if timeout:
        http_timeout = float(timeout) + 10.0
    return client.invoke(
        "getUpdates",
        {
            "offset": offset,
            "limit": limit,
            "timeout": timeout,
            "allowed_updates": allowed_updates,
        },
        _UPDATES,
        timeout=http_timeout,
    )


def set_webhook(
    client: BotApiClient,
    url: str,
    *,
    certificate: InputFile | None = None,
    ip_address: str | None = None,
    max_connections: int | None = None,
    allowed_updates: list[str] | None = None,
    drop_pending_updates: bool | None = None,
    secret_token: str | None = None,
) -> bool | None:
    return client.invoke_with_attachments(
        "setWebhook",
        {
            "url": url,
            "certificate": certificate,
            "ip_address": ip_address,
            "max_connections": max_connections,
            "allowed_updates": allowed_updates,
            "drop_pending_updates": drop_pending_updates,
            "secret_token": secret_token,
        },
        BOOL,
    )


def delete_webhook(client: BotApiClient, *, drop_pending_updates: bool | None = None) -> bool | None:
    return client.invoke("deleteWebhook", {"drop_pending_updates": drop_pending_updates}, BOOL)


def get_webhook_info(client: BotApiClient) -> WebhookInfo | None:
    return client.invoke("getWebhookInfo", {}, WEBHOOK_INFO)
