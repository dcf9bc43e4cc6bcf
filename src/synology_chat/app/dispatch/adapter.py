"""Dispatch da mensagem canônica validada para o handler do usuário.

O handler recebe exatamente a mensagem normalizada e validada. Pode ser
síncrono (executado no threadpool) ou assíncrono; o adapter sempre espera
a conclusão antes de responder. Exceções nunca escapam: viram
FailedOutcome e são logadas com o detalhe do erro.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Protocol

from starlette.concurrency import run_in_threadpool

from synology_chat.app.dispatch.outcomes import (
    EmptyOutcome,
    FailedOutcome,
    HandlerOutcome,
    TimedOutOutcome,
    classify_result,
)

logger = logging.getLogger(__name__)


class MessageHandler(Protocol):
    """Callable que processa a mensagem recebida.

    Pode retornar dict/BaseModel (JSON), str (texto puro), None, ou um
    awaitable que resolva em um desses.
    """

    def __call__(self, message: dict[str, Any]) -> Any: ...


async def dispatch_message(
    handler: MessageHandler | None,
    message: dict[str, Any],
    *,
    timeout_seconds: float | None = None,
) -> HandlerOutcome:
    """Invoca o handler e classifica o resultado.

    Args:
        handler: Handler registrado (None = resposta padrão de sucesso).
        message: Mensagem canônica pós-normalização e pós-validação.
        timeout_seconds: Prazo do handler (None = sem prazo).

    Returns:
        HandlerOutcome correspondente ao resultado.
    """
    if handler is None:
        return EmptyOutcome()

    deadline = asyncio.timeout(timeout_seconds)
    try:
        async with deadline:
            result = await _invoke(handler, message)
        return classify_result(result)
    except Exception as exc:
        if isinstance(exc, TimeoutError) and deadline.expired():
            logger.error(
                "synology_chat_handler_timeout",
                extra={"timeout_seconds": timeout_seconds},
            )
            return TimedOutOutcome(timeout_seconds or 0.0)

        error = str(exc) or type(exc).__name__
        logger.exception(
            "synology_chat_handler_failed",
            extra={"error": error, "error_type": type(exc).__name__},
        )
        return FailedOutcome(error)


async def _invoke(handler: MessageHandler, message: dict[str, Any]) -> Any:
    if inspect.iscoroutinefunction(handler):
        return await handler(message)

    result = await run_in_threadpool(handler, message)
    if inspect.isawaitable(result):
        return await result
    return result
