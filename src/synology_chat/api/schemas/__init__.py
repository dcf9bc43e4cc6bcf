"""Schemas de mensagem (perfis inbound/outbound)."""

from synology_chat.api.schemas.message import (
    ACTION_TYPES,
    BUTTON_STYLES,
    InboundMessage,
    OutboundMessage,
    SchemaProfile,
    message_model_for,
)

__all__ = [
    "ACTION_TYPES",
    "BUTTON_STYLES",
    "InboundMessage",
    "OutboundMessage",
    "SchemaProfile",
    "message_model_for",
]
