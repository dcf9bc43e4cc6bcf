"""Dispatch adapter — handler do usuário e mapeamento da resposta.

Uso:
    outcome = await dispatch_message(handler, message, timeout_seconds=30.0)
    response = render_outcome(outcome)
"""

from synology_chat.app.dispatch.adapter import MessageHandler, dispatch_message
from synology_chat.app.dispatch.outcomes import (
    EmptyOutcome,
    FailedOutcome,
    HandlerOutcome,
    JsonOutcome,
    TextOutcome,
    TimedOutOutcome,
    classify_result,
)
from synology_chat.app.dispatch.responses import HANDLER_TIMEOUT_ERROR, render_outcome

__all__ = [
    "HANDLER_TIMEOUT_ERROR",
    "EmptyOutcome",
    "FailedOutcome",
    "HandlerOutcome",
    "JsonOutcome",
    "MessageHandler",
    "TextOutcome",
    "TimedOutOutcome",
    "classify_result",
    "dispatch_message",
    "render_outcome",
]
