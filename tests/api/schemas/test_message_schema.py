"""Testes dos modelos de mensagem (perfis e enumerações)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from synology_chat.api.schemas.message import (
    ACTION_TYPES,
    BUTTON_STYLES,
    InboundAttachment,
    InboundMessage,
    OutboundAttachment,
    OutboundMessage,
    SchemaProfile,
    accepts_bare_string,
    message_model_for,
)


def test_enumerations_match_platform_values() -> None:
    assert ACTION_TYPES == ("button",)
    assert BUTTON_STYLES == ("green", "grey", "red", "orange", "blue", "teal")


def test_message_model_for_profile() -> None:
    assert message_model_for(SchemaProfile.INBOUND) is InboundMessage
    assert message_model_for("outbound") is OutboundMessage


def test_only_outbound_accepts_bare_string() -> None:
    assert accepts_bare_string(SchemaProfile.OUTBOUND) is True
    assert accepts_bare_string(SchemaProfile.INBOUND) is False


def test_inbound_message_keeps_platform_fields() -> None:
    message = InboundMessage.model_validate(
        {"text": "hi", "token": "abc", "user": {"user_id": 1}}
    )

    assert message.text == "hi"
    assert message.model_extra == {"token": "abc", "user": {"user_id": 1}}


def test_attachment_is_interactive_only_with_buttons() -> None:
    plain = InboundAttachment.model_validate({"text": "a"})
    interactive = InboundAttachment.model_validate(
        {
            "text": "a",
            "actions": [{"type": "button", "name": "n", "text": "t", "value": "v"}],
        }
    )

    assert plain.is_interactive is False
    assert interactive.is_interactive is True


def test_outbound_attachment_requires_callback_id_for_buttons() -> None:
    with pytest.raises(ValidationError) as exc_info:
        OutboundAttachment.model_validate(
            {
                "text": "a",
                "actions": [{"type": "button", "name": "n", "text": "t", "value": "v"}],
            }
        )

    assert exc_info.value.errors()[0]["type"] == "callback_id_required"


def test_outbound_attachment_accepts_empty_callback_id() -> None:
    attachment = OutboundAttachment.model_validate(
        {
            "text": "a",
            "callback_id": "",
            "actions": [{"type": "button", "name": "n", "text": "t", "value": "v"}],
        }
    )

    assert attachment.callback_id == ""


def test_outbound_message_parses_file_url(button_message: dict[str, object]) -> None:
    message = OutboundMessage.model_validate(
        {**button_message, "file_url": "https://example.com/report.pdf"}
    )

    assert str(message.file_url) == "https://example.com/report.pdf"
    assert message.attachments is not None
    assert message.attachments[0].callback_id == "monthly_report"
