"""Connector da Bot API.

- http_base: HttpClient síncrono com retry
- http_client: transporte da Bot API (JSON/multipart, download)
- envelope: ApiEnvelope (pydantic)
- api_errors: ApiErrorMapper
- client: BotApiClient (fachada do pipeline)
- endpoints: wrappers por método
"""

from api.connectors.botapi.api_errors import ApiErrorMapper
from api.connectors.botapi.client import BotApiClient
from api.connectors.botapi.envelope import ApiEnvelope, parse_envelope
from api.connectors.botapi.http_base import HttpClient, HttpClientConfig
from api.connectors.botapi.http_client import BotApiHttpClient

__all__ = [
    "ApiEnvelope",
    "ApiErrorMapper",
    "BotApiClient",
    "BotApiHttpClient",
    "HttpClient",
    "HttpClientConfig",
    "parse_envelope",
]
