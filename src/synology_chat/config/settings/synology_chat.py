"""Settings específicas do Synology Chat.

Configurações do webhook de entrada (rota) e do incoming webhook
de saída (envio de mensagens).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

DEFAULT_WEBHOOK_PATH: str = "/synology-chat"

BodyFormat = Literal["form", "json"]


@dataclass(frozen=True)
class SynologyChatSettings:
    """Configurações do canal Synology Chat.

    Attributes:
        webhook_url: URL do incoming webhook para envio (vazio = sem default)
        webhook_path: Rota POST que recebe o outgoing webhook
        request_timeout_seconds: Timeout do envio HTTP
        handler_timeout_seconds: Prazo do handler inbound (None = sem prazo)
        body_format: Codificação do envio (json ou form = payload=<json>)
        validate_outbound: Valida mensagens antes do envio
    """

    webhook_url: str = ""
    webhook_path: str = DEFAULT_WEBHOOK_PATH

    request_timeout_seconds: float = 30.0
    handler_timeout_seconds: float | None = 30.0

    body_format: BodyFormat = "json"
    validate_outbound: bool = True

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.webhook_path.startswith("/"):
            errors.append("SYNOLOGY_CHAT_PATH deve começar com '/'")

        if self.webhook_url and not self.webhook_url.startswith(("http://", "https://")):
            errors.append("SYNOLOGY_CHAT_WEBHOOK_URL deve ser http(s)")

        if self.request_timeout_seconds <= 0:
            errors.append("SYNOLOGY_CHAT_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.handler_timeout_seconds is not None and self.handler_timeout_seconds <= 0:
            errors.append("SYNOLOGY_CHAT_HANDLER_TIMEOUT_SECONDS deve ser > 0")

        if self.body_format not in ("form", "json"):
            errors.append("SYNOLOGY_CHAT_BODY_FORMAT deve ser 'form' ou 'json'")

        return errors


def _parse_optional_seconds(raw: str) -> float | None:
    """'0', 'none' ou vazio desativam o prazo."""
    if raw.strip().lower() in ("", "0", "none", "off"):
        return None
    return float(raw)


def _load_from_env() -> SynologyChatSettings:
    """Carrega SynologyChatSettings a partir de variáveis de ambiente."""
    return SynologyChatSettings(
        webhook_url=os.getenv("SYNOLOGY_CHAT_WEBHOOK_URL", ""),
        webhook_path=os.getenv("SYNOLOGY_CHAT_PATH", DEFAULT_WEBHOOK_PATH),
        request_timeout_seconds=float(
            os.getenv("SYNOLOGY_CHAT_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        handler_timeout_seconds=_parse_optional_seconds(
            os.getenv("SYNOLOGY_CHAT_HANDLER_TIMEOUT_SECONDS", "30")
        ),
        body_format=os.getenv("SYNOLOGY_CHAT_BODY_FORMAT", "json").lower(),  # type: ignore[arg-type]
        validate_outbound=os.getenv("SYNOLOGY_CHAT_VALIDATE_OUTBOUND", "true").lower()
        in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_synology_chat_settings() -> SynologyChatSettings:
    """Retorna instância cacheada de SynologyChatSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
