"""Mapeamento de HandlerOutcome para resposta HTTP."""

from __future__ import annotations

from typing import assert_never

from fastapi import status
from starlette.responses import JSONResponse, PlainTextResponse, Response

from synology_chat.app.dispatch.outcomes import (
    EmptyOutcome,
    FailedOutcome,
    HandlerOutcome,
    JsonOutcome,
    TextOutcome,
    TimedOutOutcome,
)

HANDLER_TIMEOUT_ERROR = "handler_timeout"


def render_outcome(outcome: HandlerOutcome) -> Response:
    """Converte o outcome do handler na resposta do webhook.

    - JsonOutcome -> 200 JSON
    - TextOutcome -> 200 texto puro, sem envelope JSON
    - EmptyOutcome -> 200 {"success": true}
    - FailedOutcome -> 500 {"success": false, "error": <mensagem>}
    - TimedOutOutcome -> 504 {"success": false, "error": "handler_timeout"}
    """
    match outcome:
        case JsonOutcome(body=body):
            return JSONResponse(body, status_code=status.HTTP_200_OK)
        case TextOutcome(text=text):
            return PlainTextResponse(text, status_code=status.HTTP_200_OK)
        case EmptyOutcome():
            return JSONResponse({"success": True}, status_code=status.HTTP_200_OK)
        case FailedOutcome(error=error):
            return JSONResponse(
                {"success": False, "error": error},
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        case TimedOutOutcome():
            return JSONResponse(
                {"success": False, "error": HANDLER_TIMEOUT_ERROR},
                status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            )
        case _:
            assert_never(outcome)
