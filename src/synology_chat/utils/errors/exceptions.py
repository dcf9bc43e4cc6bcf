"""Exceções de domínio do adapter.

Todas derivam de SynologyChatError para que o chamador possa capturar
qualquer falha do adapter com um único except.
"""

from __future__ import annotations


class SynologyChatError(Exception):
    """Base para falhas do adapter Synology Chat."""


class ConfigurationError(SynologyChatError):
    """Configuração inválida detectada antes de qualquer processamento."""


class MissingWebhookUrlError(ConfigurationError):
    """Envio sem URL de destino (nem default nem override)."""


class BodyNormalizationError(SynologyChatError, ValueError):
    """Erro de cliente ao converter o body bruto em mensagem canônica."""


class MalformedBodyError(BodyNormalizationError):
    """Body (ou campo `payload` do form) não é JSON/form válido."""


class UnsupportedContentTypeError(BodyNormalizationError):
    """Content-Type ausente ou não suportado pela rota."""


class SendMessageError(SynologyChatError):
    """Falha de transporte no envio; carrega status e texto da resposta."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_text: str = "",
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text


class SendTimeoutError(SendMessageError):
    """Envio excedeu o prazo configurado."""
