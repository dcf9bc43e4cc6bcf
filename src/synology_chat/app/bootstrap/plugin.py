"""Registro do adapter Synology Chat em uma aplicação FastAPI.

Registra a rota POST do webhook e expõe o cliente de envio em
`app.state.synology_chat`.

Uso:
    app = FastAPI()
    chat = register_synology_chat(
        app,
        path="/synology-chat",
        on_message=handle_message,
        webhook_url="https://nas.example.com/webapi/entry.cgi?...",
    )
    await chat.send_message("Hello from FastAPI")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from synology_chat.api.connectors import create_synology_chat_client
from synology_chat.api.routes import create_webhook_router
from synology_chat.config.settings import DEFAULT_WEBHOOK_PATH, get_synology_chat_settings
from synology_chat.utils.errors import ConfigurationError

if TYPE_CHECKING:
    import httpx
    from fastapi import FastAPI

    from synology_chat.api.connectors import SynologyChatClient
    from synology_chat.app.dispatch import MessageHandler
    from synology_chat.config.settings import SynologyChatSettings

logger = logging.getLogger(__name__)

# Atributo de app.state com o cliente de envio
STATE_ATTRIBUTE = "synology_chat"


@dataclass(frozen=True)
class SynologyChatOptions:
    """Opções de registro do adapter.

    Attributes:
        path: Caminho da rota POST
        on_message: Handler da mensagem recebida (ausente = {"success": true})
        required: Exige on_message no registro
        webhook_url: URL padrão do incoming webhook para envio
    """

    path: str = DEFAULT_WEBHOOK_PATH
    on_message: MessageHandler | None = None
    required: bool = False
    webhook_url: str | None = None

    def validate(self) -> None:
        """Falha no registro, antes de qualquer request.

        Raises:
            ConfigurationError: required=True sem handler, ou path inválido.
            TypeError: on_message não é callable.
        """
        if self.on_message is None:
            if self.required:
                raise ConfigurationError(
                    "on_message callback is required when required option is true"
                )
        elif not callable(self.on_message):
            raise TypeError("on_message must be callable")

        if not self.path.startswith("/"):
            raise ConfigurationError(f"path must start with '/': {self.path!r}")


def register_synology_chat(
    app: FastAPI,
    *,
    path: str | None = None,
    on_message: MessageHandler | None = None,
    required: bool = False,
    webhook_url: str | None = None,
    settings: SynologyChatSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> SynologyChatClient:
    """Registra a rota do webhook e o cliente de envio.

    Args:
        app: Aplicação FastAPI.
        path: Caminho da rota (padrão: settings, depois /synology-chat).
        on_message: Handler da mensagem validada.
        required: Se True, on_message é obrigatório.
        webhook_url: URL padrão de envio (padrão: settings).
        settings: SynologyChatSettings; se None, carrega do ambiente.
        transport: Transport httpx alternativo (testes).

    Returns:
        Cliente de envio, também disponível em app.state.synology_chat.

    Raises:
        ConfigurationError: Configuração inválida (falha no registro).
    """
    chat_settings = settings or get_synology_chat_settings()
    options = SynologyChatOptions(
        path=path or chat_settings.webhook_path,
        on_message=on_message,
        required=required,
        webhook_url=webhook_url or chat_settings.webhook_url or None,
    )
    options.validate()

    client = create_synology_chat_client(
        settings=chat_settings,
        webhook_url=options.webhook_url,
        transport=transport,
    )
    app.include_router(
        create_webhook_router(
            path=options.path,
            on_message=options.on_message,
            handler_timeout_seconds=chat_settings.handler_timeout_seconds,
        )
    )
    setattr(app.state, STATE_ATTRIBUTE, client)

    logger.info(
        "synology_chat_registered",
        extra={
            "path": options.path,
            "has_handler": options.on_message is not None,
            "has_webhook_url": options.webhook_url is not None,
        },
    )
    return client
