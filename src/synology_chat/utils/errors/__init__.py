"""Exceções compartilhadas."""

from .exceptions import (
    BodyNormalizationError,
    ConfigurationError,
    MalformedBodyError,
    MissingWebhookUrlError,
    SendMessageError,
    SendTimeoutError,
    SynologyChatError,
    UnsupportedContentTypeError,
)

__all__ = [
    "BodyNormalizationError",
    "ConfigurationError",
    "MalformedBodyError",
    "MissingWebhookUrlError",
    "SendMessageError",
    "SendTimeoutError",
    "SynologyChatError",
    "UnsupportedContentTypeError",
]
