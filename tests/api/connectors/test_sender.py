"""Testes do envio de mensagens para o incoming webhook."""

from __future__ import annotations

import json
from urllib.parse import parse_qs

import httpx
import pytest

from synology_chat.api.connectors import (
    SynologyChatClient,
    coerce_message,
    create_synology_chat_client,
)
from synology_chat.api.connectors.http_base import HttpClientConfig
from synology_chat.api.schemas.message import OutboundMessage
from synology_chat.api.validators import InvalidMessageError
from synology_chat.config.settings import SynologyChatSettings
from synology_chat.utils.errors import (
    MissingWebhookUrlError,
    SendMessageError,
    SendTimeoutError,
)

WEBHOOK_URL = "https://nas.example.com/webapi/entry.cgi?api=SYNO.Chat.External&token=secret"


class _Recorder:
    """Transport fake que registra requests e devolve resposta fixa."""

    def __init__(
        self,
        status_code: int = 200,
        *,
        error: Exception | None = None,
        **response_kwargs: object,
    ) -> None:
        self.requests: list[httpx.Request] = []
        self._status_code = status_code
        self._error = error
        self._response_kwargs = response_kwargs or {"json": {"success": True}}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        return httpx.Response(self._status_code, **self._response_kwargs)  # type: ignore[arg-type]

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def _client(recorder: _Recorder, **kwargs: object) -> SynologyChatClient:
    config = HttpClientConfig(timeout_seconds=5.0, transport=recorder.transport)
    return SynologyChatClient(WEBHOOK_URL, config=config, **kwargs)  # type: ignore[arg-type]


def _json_payload(request: httpx.Request) -> object:
    return json.loads(request.content)


def _form_payload(request: httpx.Request) -> dict[str, object]:
    fields = parse_qs(request.content.decode("utf-8"))
    return json.loads(fields["payload"][0])


@pytest.mark.asyncio
async def test_send_string_posts_json_body() -> None:
    recorder = _Recorder()

    result = await _client(recorder).send_message("Hello world")

    assert result == {"success": True}
    request = recorder.requests[0]
    assert request.method == "POST"
    assert str(request.url) == WEBHOOK_URL
    assert request.headers["content-type"] == "application/json"
    assert _json_payload(request) == {"text": "Hello world"}


@pytest.mark.asyncio
async def test_send_object_preserves_attachments(button_message: dict[str, object]) -> None:
    recorder = _Recorder()

    await _client(recorder).send_message(button_message)

    assert _json_payload(recorder.requests[0]) == button_message


@pytest.mark.asyncio
async def test_send_keeps_non_ascii_text() -> None:
    recorder = _Recorder()

    await _client(recorder).send_message("📊 Relatório")

    assert _json_payload(recorder.requests[0]) == {"text": "📊 Relatório"}


@pytest.mark.asyncio
async def test_send_form_body_format() -> None:
    recorder = _Recorder()

    await _client(recorder, body_format="form").send_message({"text": "hi", "user_ids": [1]})

    request = recorder.requests[0]
    assert request.headers["content-type"] == "application/x-www-form-urlencoded"
    assert _form_payload(request) == {"text": "hi", "user_ids": [1]}


@pytest.mark.asyncio
async def test_send_pydantic_model() -> None:
    recorder = _Recorder()
    message = OutboundMessage.model_validate({"text": "from model"})

    await _client(recorder).send_message(message)

    assert _json_payload(recorder.requests[0]) == {"text": "from model"}


@pytest.mark.asyncio
async def test_call_override_url_wins() -> None:
    recorder = _Recorder()
    override = "https://other.example.com/hook?token=x"

    await _client(recorder).send_message("hi", webhook_url=override)

    assert str(recorder.requests[0].url) == override


@pytest.mark.asyncio
async def test_missing_url_fails_before_network() -> None:
    recorder = _Recorder()
    client = SynologyChatClient(
        config=HttpClientConfig(transport=recorder.transport),
    )

    with pytest.raises(MissingWebhookUrlError, match="No webhook URL provided"):
        await client.send_message("hi")

    assert recorder.requests == []


@pytest.mark.asyncio
async def test_invalid_message_fails_before_network() -> None:
    recorder = _Recorder()
    message = {
        "text": "Hello",
        "attachments": [
            {
                "text": "Attachment",
                "callback_id": "cb",
                "actions": [
                    {"type": "not_a_valid_type", "name": "a", "text": "b", "value": "c"}
                ],
            }
        ],
    }

    with pytest.raises(InvalidMessageError, match="Invalid message format") as exc_info:
        await _client(recorder).send_message(message)

    assert exc_info.value.violations[0].path == "/attachments/0/actions/0/type"
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_validation_can_be_disabled() -> None:
    recorder = _Recorder()

    await _client(recorder, validate=False).send_message({"text": "hi", "custom": 1})

    assert _json_payload(recorder.requests[0]) == {"text": "hi", "custom": 1}


@pytest.mark.asyncio
async def test_non_success_status_raises_with_details() -> None:
    recorder = _Recorder(400, text="Bad Request")

    with pytest.raises(SendMessageError) as exc_info:
        await _client(recorder).send_message("hi")

    error = exc_info.value
    assert error.status_code == 400
    assert error.response_text == "Bad Request"
    assert "400 Bad Request" in str(error)


@pytest.mark.asyncio
async def test_non_json_success_returns_raw_text() -> None:
    recorder = _Recorder(text="OK")

    result = await _client(recorder).send_message("hi")

    assert result == {"success": True, "raw": "OK"}


@pytest.mark.asyncio
async def test_platform_rejection_is_returned() -> None:
    body = {"success": False, "error": {"code": 404, "errors": "invalid token"}}
    recorder = _Recorder(json=body)

    result = await _client(recorder).send_message("hi")

    assert result == body


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [[], True, [{"success": True}]])
async def test_non_object_json_success_is_returned_parsed(body: object) -> None:
    recorder = _Recorder(json=body)

    result = await _client(recorder).send_message("hi")

    assert result == body


@pytest.mark.asyncio
async def test_empty_success_body_returns_raw_text() -> None:
    recorder = _Recorder(200, content=b"")

    result = await _client(recorder).send_message("hi")

    assert result == {"success": True, "raw": ""}


@pytest.mark.asyncio
async def test_timeout_raises_send_timeout() -> None:
    recorder = _Recorder(error=httpx.ReadTimeout("read timed out"))

    with pytest.raises(SendTimeoutError):
        await _client(recorder).send_message("hi")


@pytest.mark.asyncio
async def test_connection_error_raises_send_error() -> None:
    recorder = _Recorder(error=httpx.ConnectError("connection refused"))

    with pytest.raises(SendMessageError) as exc_info:
        await _client(recorder).send_message("hi")

    assert not isinstance(exc_info.value, SendTimeoutError)
    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_client_is_stateless_between_calls() -> None:
    recorder = _Recorder()
    client = _client(recorder)

    await client.send_message("first")
    await client.send_message("second")

    assert [_json_payload(r)["text"] for r in recorder.requests] == ["first", "second"]


def test_coerce_message_does_not_mutate_input() -> None:
    message = {"text": "hi"}

    coerced = coerce_message(message)
    coerced["extra"] = True

    assert message == {"text": "hi"}
    assert coerce_message("hi") == {"text": "hi"}


def test_invalid_body_format_is_rejected() -> None:
    with pytest.raises(ValueError):
        SynologyChatClient(WEBHOOK_URL, body_format="xml")  # type: ignore[arg-type]


def test_factory_uses_settings() -> None:
    settings = SynologyChatSettings(
        webhook_url=WEBHOOK_URL,
        request_timeout_seconds=3.0,
        body_format="form",
        validate_outbound=False,
    )

    client = create_synology_chat_client(settings=settings)

    assert client.webhook_url == WEBHOOK_URL
    assert client.timeout_seconds == 3.0
    assert client.body_format == "form"
    assert client.validate is False


def test_factory_override_url(chat_settings: SynologyChatSettings) -> None:
    client = create_synology_chat_client(settings=chat_settings, webhook_url="https://x.test/h")

    assert client.resolve_webhook_url() == "https://x.test/h"
    assert client.resolve_webhook_url("https://y.test/h") == "https://y.test/h"


def test_default_body_format_is_json() -> None:
    assert SynologyChatClient(WEBHOOK_URL).body_format == "json"
    assert SynologyChatSettings().body_format == "json"
