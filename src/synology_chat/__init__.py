"""Adapter de webhooks do Synology Chat para FastAPI.

Recebe o outgoing webhook (JSON ou form), normaliza e valida a mensagem,
despacha para o handler registrado e envia mensagens ao incoming webhook.

Uso:
    from fastapi import FastAPI
    from synology_chat import register_synology_chat

    app = FastAPI()
    chat = register_synology_chat(app, on_message=lambda message: "OK")
"""

from synology_chat.api.connectors import SynologyChatClient
from synology_chat.api.normalizers import normalize_body
from synology_chat.api.schemas import SchemaProfile
from synology_chat.api.validators import (
    InvalidMessageError,
    MessageValidationError,
    ValidationResult,
    Violation,
    ViolationKind,
    compile_validator,
    validate_message,
)
from synology_chat.app.bootstrap import SynologyChatOptions, register_synology_chat
from synology_chat.utils.errors import (
    ConfigurationError,
    MalformedBodyError,
    MissingWebhookUrlError,
    SendMessageError,
    SendTimeoutError,
    SynologyChatError,
    UnsupportedContentTypeError,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "InvalidMessageError",
    "MalformedBodyError",
    "MessageValidationError",
    "MissingWebhookUrlError",
    "SchemaProfile",
    "SendMessageError",
    "SendTimeoutError",
    "SynologyChatClient",
    "SynologyChatError",
    "SynologyChatOptions",
    "UnsupportedContentTypeError",
    "ValidationResult",
    "Violation",
    "ViolationKind",
    "compile_validator",
    "normalize_body",
    "register_synology_chat",
    "validate_message",
]
