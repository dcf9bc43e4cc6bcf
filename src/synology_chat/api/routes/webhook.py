"""Endpoint do outgoing webhook do Synology Chat.

Endpoint:
- POST {path} (padrão /synology-chat): recebimento de mensagens e
  callbacks de botão

Fluxo:
1. Lê o body bruto e normaliza (JSON, form com `payload` ou form plano)
2. Valida no perfil inbound (schema aberto)
3. Despacha para o handler registrado e mapeia o resultado

Respostas:
- 400: body malformado ou mensagem fora do schema (handler não é chamado)
- 415: Content-Type não suportado
- 500: handler levantou exceção ({"success": false, "error": ...})
- 504: handler excedeu o prazo
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response, status
from starlette.responses import JSONResponse

from synology_chat.api.normalizers import normalize_body
from synology_chat.api.validators import SchemaProfile, compile_validator
from synology_chat.app.dispatch import dispatch_message, render_outcome
from synology_chat.app.observability import (
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from synology_chat.config.settings import DEFAULT_WEBHOOK_PATH
from synology_chat.utils.errors import MalformedBodyError, UnsupportedContentTypeError

if TYPE_CHECKING:
    from synology_chat.app.dispatch import MessageHandler

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "x-correlation-id"

_validate_inbound = compile_validator(SchemaProfile.INBOUND)


async def handle_webhook_request(
    request: Request,
    *,
    on_message: MessageHandler | None = None,
    handler_timeout_seconds: float | None = None,
) -> Response:
    """Processa um request do webhook: normaliza, valida e despacha.

    Args:
        request: Request Starlette recebido.
        on_message: Handler registrado (None = {"success": true}).
        handler_timeout_seconds: Prazo do handler (None = sem prazo).

    Returns:
        Response HTTP conforme o resultado do pipeline.
    """
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        raw_body = await request.body()

        try:
            message = normalize_body(raw_body, request.headers.get("content-type"))
        except UnsupportedContentTypeError as exc:
            logger.warning(
                "synology_chat_content_type_unsupported",
                extra={"correlation_id": get_correlation_id(), "error": str(exc)},
            )
            return JSONResponse(
                {"success": False, "error": "unsupported_content_type"},
                status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            )
        except MalformedBodyError as exc:
            logger.warning(
                "synology_chat_body_malformed",
                extra={"correlation_id": get_correlation_id(), "error": str(exc)},
            )
            return JSONResponse(
                {"success": False, "error": "invalid_body"},
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        result = _validate_inbound(message)
        if not result.valid:
            logger.warning(
                "synology_chat_message_invalid",
                extra={
                    "correlation_id": get_correlation_id(),
                    "violation_count": len(result.violations),
                    "violation_paths": [violation.path for violation in result.violations],
                },
            )
            return JSONResponse(
                {
                    "success": False,
                    "error": "invalid_message",
                    "violations": [violation.to_dict() for violation in result.violations],
                },
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        logger.info(
            "synology_chat_webhook_received",
            extra={
                "correlation_id": get_correlation_id(),
                "payload_size": len(raw_body),
                "has_handler": on_message is not None,
            },
        )

        outcome = await dispatch_message(
            on_message,
            message,
            timeout_seconds=handler_timeout_seconds,
        )
        return render_outcome(outcome)

    finally:
        reset_correlation_id(token)


def create_webhook_router(
    *,
    path: str = DEFAULT_WEBHOOK_PATH,
    on_message: MessageHandler | None = None,
    handler_timeout_seconds: float | None = None,
) -> APIRouter:
    """Cria router com a rota POST do webhook.

    Args:
        path: Caminho da rota.
        on_message: Handler da mensagem validada.
        handler_timeout_seconds: Prazo do handler (None = sem prazo).

    Returns:
        APIRouter pronto para app.include_router().
    """
    router = APIRouter()

    async def receive_webhook(request: Request) -> Response:
        return await handle_webhook_request(
            request,
            on_message=on_message,
            handler_timeout_seconds=handler_timeout_seconds,
        )

    router.add_api_route(
        path,
        receive_webhook,
        methods=["POST"],
        response_model=None,
        name="synology_chat_webhook",
    )
    return router
