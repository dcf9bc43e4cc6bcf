"""Erros de validação de mensagem."""

from __future__ import annotations

from typing import TYPE_CHECKING

from synology_chat.utils.errors import SynologyChatError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from synology_chat.api.validators.violations import Violation


class MessageValidationError(SynologyChatError, ValueError):
    """Mensagem estruturalmente inválida; carrega as violações."""

    default_message = "Message failed schema validation"

    def __init__(self, violations: Iterable[Violation], message: str | None = None) -> None:
        self.violations = tuple(violations)
        summary = "; ".join(
            f"{violation.path or '/'}: {violation.detail}" for violation in self.violations
        )
        text = message or self.default_message
        super().__init__(f"{text}: {summary}" if summary else text)


class InvalidMessageError(MessageValidationError):
    """Mensagem rejeitada antes do envio."""

    default_message = "Invalid message format"
