"""Testes da normalização do body inbound (JSON, form e payload=)."""

from __future__ import annotations

import json
from urllib.parse import urlencode

import pytest

from synology_chat.api.normalizers import normalize_body
from synology_chat.api.normalizers.body import is_json_media_type, parse_content_type
from synology_chat.utils.errors import (
    BodyNormalizationError,
    MalformedBodyError,
    UnsupportedContentTypeError,
)

FORM = "application/x-www-form-urlencoded"
JSON = "application/json"


@pytest.fixture
def callback_message() -> dict[str, object]:
    return {
        "text": "Button clicked",
        "actions": [{"type": "button", "name": "approve", "value": "yes", "text": "OK"}],
        "callback_id": "approval_flow",
        "post_id": "123456",
        "user": {"user_id": 42, "username": "test_user"},
    }


class TestJsonBodies:
    def test_json_object_is_the_message(self) -> None:
        body = b'{"text": "Hello from Synology Chat"}'

        assert normalize_body(body, JSON) == {"text": "Hello from Synology Chat"}

    def test_json_with_charset_parameter(self) -> None:
        body = json.dumps({"text": "Olá"}).encode("utf-8")

        assert normalize_body(body, "application/json; charset=utf-8") == {"text": "Olá"}

    def test_structured_json_suffix_is_accepted(self) -> None:
        assert normalize_body(b'{"text": "x"}', "application/vnd.chat+json") == {"text": "x"}

    def test_non_object_json_passes_through(self) -> None:
        assert normalize_body(b"[1, 2]", JSON) == [1, 2]

    def test_invalid_json_is_malformed(self) -> None:
        with pytest.raises(MalformedBodyError, match="invalid_json"):
            normalize_body(b"{not json", JSON)

    def test_empty_json_body_is_malformed(self) -> None:
        with pytest.raises(MalformedBodyError, match="empty_body"):
            normalize_body(b"   ", JSON)


class TestFormBodies:
    def test_plain_form_becomes_string_fields(self) -> None:
        body = b"text=hello+world&user_id=42&token=abc"

        assert normalize_body(body, FORM) == {
            "text": "hello world",
            "user_id": "42",
            "token": "abc",
        }

    def test_repeated_key_keeps_last_value(self) -> None:
        assert normalize_body(b"text=first&text=second", FORM) == {"text": "second"}

    def test_blank_values_are_kept(self) -> None:
        assert normalize_body(b"text=hi&token=", FORM) == {"text": "hi", "token": ""}

    def test_payload_field_is_decoded_and_other_fields_dropped(
        self, callback_message: dict[str, object]
    ) -> None:
        body = urlencode(
            {"payload": json.dumps(callback_message), "token": "ignored"}
        ).encode()

        assert normalize_body(body, FORM) == callback_message

    def test_payload_and_json_encodings_are_equivalent(
        self, callback_message: dict[str, object]
    ) -> None:
        form_body = urlencode({"payload": json.dumps(callback_message)}).encode()
        json_body = json.dumps(callback_message).encode()

        assert normalize_body(form_body, FORM) == normalize_body(json_body, JSON)

    def test_invalid_payload_json_is_malformed(self) -> None:
        with pytest.raises(MalformedBodyError, match="invalid_json"):
            normalize_body(b"payload=%7Bbroken", FORM)

    def test_empty_payload_is_malformed(self) -> None:
        with pytest.raises(MalformedBodyError):
            normalize_body(b"payload=", FORM)

    def test_empty_form_is_malformed(self) -> None:
        with pytest.raises(MalformedBodyError, match="empty_body"):
            normalize_body(b"", FORM)

    def test_undecodable_body_is_malformed(self) -> None:
        with pytest.raises(MalformedBodyError, match="invalid_encoding"):
            normalize_body(b"text=\xff\xfe", FORM)


class TestContentType:
    @pytest.mark.parametrize("content_type", [None, "", "text/plain", "multipart/form-data"])
    def test_unsupported_content_types(self, content_type: str | None) -> None:
        with pytest.raises(UnsupportedContentTypeError):
            normalize_body(b'{"text": "x"}', content_type)

    def test_normalization_errors_are_value_errors(self) -> None:
        assert issubclass(MalformedBodyError, BodyNormalizationError)
        assert issubclass(UnsupportedContentTypeError, ValueError)

    def test_parse_content_type(self) -> None:
        assert parse_content_type('Application/JSON; charset="ISO-8859-1"') == (
            "application/json",
            "iso-8859-1",
        )
        assert parse_content_type(None) == ("", "utf-8")

    def test_is_json_media_type(self) -> None:
        assert is_json_media_type("application/json")
        assert is_json_media_type("application/problem+json")
        assert not is_json_media_type(FORM)

    def test_form_charset_is_honored(self) -> None:
        body = "text=Olá".encode("latin-1")

        assert normalize_body(body, f"{FORM}; charset=latin-1") == {"text": "Olá"}
