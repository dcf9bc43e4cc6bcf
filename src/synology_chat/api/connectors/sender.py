"""Envio de mensagens para o incoming webhook do Synology Chat.

Fluxo por chamada (sem estado entre chamadas, sem retry):
1. Resolve destino: override da chamada > URL configurada; sem destino
   falha com erro de configuração antes de qualquer I/O.
2. String pura vira {"text": ...}; valida no perfil outbound (opcional).
3. Serializa (JSON, ou form `payload=<json>` quando configurado) e faz
   um único POST.
4. Não-2xx: SendMessageError com status e texto da resposta.
5. 2xx: JSON da resposta, ou {"success": True, "raw": <texto>} quando a
   resposta não é JSON.

Logging sem PII: a URL do webhook carrega token, só o host é logado.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit

from pydantic import BaseModel

from synology_chat.api.connectors.http_base import HttpClient, HttpClientConfig, HttpError
from synology_chat.api.schemas.message import SchemaProfile
from synology_chat.api.validators import InvalidMessageError, compile_validator
from synology_chat.utils.errors import (
    MissingWebhookUrlError,
    SendMessageError,
    SendTimeoutError,
)

if TYPE_CHECKING:
    import httpx

    from synology_chat.config.settings import BodyFormat, SynologyChatSettings

logger = logging.getLogger(__name__)

# Campo de form esperado pelo incoming webhook
FORM_PAYLOAD_FIELD = "payload"

OutboundMessageInput = str | Mapping[str, Any] | BaseModel


def coerce_message(message: OutboundMessageInput) -> Any:
    """Converte a entrada do chamador no objeto a serializar.

    String pura é açúcar para {"text": <string>}. Mapeamentos são copiados
    (a entrada nunca é alterada).
    """
    if isinstance(message, str):
        return {"text": message}
    if isinstance(message, BaseModel):
        return message.model_dump(mode="json", exclude_none=True)
    if isinstance(message, Mapping):
        return dict(message)
    return message


class SynologyChatClient(HttpClient):
    """Cliente de envio para o incoming webhook do Synology Chat."""

    def __init__(
        self,
        webhook_url: str | None = None,
        *,
        config: HttpClientConfig | None = None,
        validate: bool = True,
        body_format: BodyFormat = "json",
    ) -> None:
        """Inicializa o cliente.

        Args:
            webhook_url: URL padrão do incoming webhook (opcional).
            config: Configuração HTTP base (timeout, transport).
            validate: Valida a mensagem no perfil outbound antes de enviar.
            body_format: "json" (padrão) ou "form" (payload=<json>).
        """
        super().__init__(config)
        if body_format not in ("form", "json"):
            raise ValueError(f"body_format inválido: {body_format}")
        self.webhook_url = webhook_url or None
        self.validate = validate
        self.body_format = body_format
        self._validator = compile_validator(SchemaProfile.OUTBOUND)

    def resolve_webhook_url(self, webhook_url: str | None = None) -> str:
        """Override da chamada tem precedência sobre a URL configurada.

        Raises:
            MissingWebhookUrlError: Nenhum destino disponível.
        """
        target_url = webhook_url or self.webhook_url
        if not target_url:
            raise MissingWebhookUrlError(
                "No webhook URL provided. Set it in the plugin options "
                "or pass it to send_message()"
            )
        return target_url

    async def send_message(
        self,
        message: OutboundMessageInput,
        webhook_url: str | None = None,
    ) -> Any:
        """Envia uma mensagem ao Synology Chat.

        Args:
            message: String ou objeto com text, attachments, etc.
            webhook_url: URL que substitui a padrão nesta chamada.

        Returns:
            Resposta JSON do Synology Chat, ou {"success": True, "raw": texto}
            quando a resposta não é JSON.

        Raises:
            MissingWebhookUrlError: Sem URL de destino.
            InvalidMessageError: Mensagem fora do schema outbound.
            SendTimeoutError: Envio excedeu o timeout.
            SendMessageError: Falha de transporte ou status não-2xx.
        """
        target_url = self.resolve_webhook_url(webhook_url)
        payload = coerce_message(message)

        if self.validate:
            result = self._validator(payload)
            if not result.valid:
                logger.warning(
                    "synology_chat_message_invalid",
                    extra={"violation_count": len(result.violations)},
                )
                raise InvalidMessageError(result.violations)

        response = await self._transmit(target_url, payload)
        return self._process_response(response, target_url)

    async def _transmit(self, url: str, payload: Any) -> httpx.Response:
        """Serializa e executa um único POST."""
        try:
            if self.body_format == "form":
                return await self.post(
                    url,
                    data={FORM_PAYLOAD_FIELD: json.dumps(payload, ensure_ascii=False)},
                )
            return await self.post(url, json=payload)
        except HttpError as exc:
            if exc.is_timeout:
                raise SendTimeoutError(
                    "Timed out sending message to Synology Chat "
                    f"after {self.timeout_seconds}s"
                ) from exc
            raise SendMessageError(
                f"Failed to send message to Synology Chat: {exc}"
            ) from exc

    def _process_response(self, response: httpx.Response, url: str) -> Any:
        """Mapeia a resposta HTTP para o resultado do envio."""
        host = urlsplit(url).hostname or ""
        text = response.text

        if not response.is_success:
            logger.warning(
                "synology_chat_send_failed",
                extra={"host": host, "status_code": response.status_code},
            )
            raise SendMessageError(
                f"Failed to send message to Synology Chat: {response.status_code} {text}",
                status_code=response.status_code,
                response_text=text,
            )

        logger.info(
            "synology_chat_message_sent",
            extra={"host": host, "status_code": response.status_code},
        )

        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            # Alguns endpoints Synology respondem sem JSON
            return {"success": True, "raw": text}

        if isinstance(data, dict) and data.get("success") is False:
            logger.warning(
                "synology_chat_send_rejected",
                extra={"host": host, "error": data.get("error")},
            )
        return data


def create_synology_chat_client(
    settings: SynologyChatSettings | None = None,
    webhook_url: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> SynologyChatClient:
    """Factory do cliente com config padrão das settings.

    Args:
        settings: SynologyChatSettings opcional. Se None, carrega do ambiente.
        webhook_url: Sobrescreve a URL das settings.
        transport: Transport httpx alternativo (testes).
    """
    from synology_chat.config.settings import get_synology_chat_settings

    chat = settings or get_synology_chat_settings()
    config = HttpClientConfig(
        timeout_seconds=chat.request_timeout_seconds,
        transport=transport,
    )
    return SynologyChatClient(
        webhook_url=webhook_url or chat.webhook_url or None,
        config=config,
        validate=chat.validate_outbound,
        body_format=chat.body_format,
    )
