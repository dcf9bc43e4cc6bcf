"""Conectores de saída — envio ao incoming webhook do Synology Chat."""

from synology_chat.api.connectors.http_base import HttpClient, HttpClientConfig, HttpError
from synology_chat.api.connectors.sender import (
    SynologyChatClient,
    coerce_message,
    create_synology_chat_client,
)

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "SynologyChatClient",
    "coerce_message",
    "create_synology_chat_client",
]
