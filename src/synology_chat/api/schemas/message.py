"""Contrato estrutural de mensagens Synology Chat.

Fonte única de verdade para "o que é uma mensagem válida", usada nos dois
sentidos com perfis de rigor diferentes:

- INBOUND: dados recebidos da plataforma. Objeto precisa de `text`;
  propriedades desconhecidas são toleradas em todos os níveis (a plataforma
  anexa blocos como `user` e `token` aos callbacks de botão).
- OUTBOUND: dados que enviamos. Aceita string ou objeto; objeto fechado em
  todos os níveis, `file_url` precisa ser URL, tipos escalares estritos e
  `callback_id` obrigatório em attachment com actions.

As classes outbound herdam o shape das inbound e sobrescrevem apenas o que
o rigor muda.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal, Self, get_args

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    model_validator,
)
from pydantic_core import PydanticCustomError

ActionType = Literal["button"]
ButtonStyle = Literal["green", "grey", "red", "orange", "blue", "teal"]

ACTION_TYPES: tuple[str, ...] = get_args(ActionType)
BUTTON_STYLES: tuple[str, ...] = get_args(ButtonStyle)

# Tipo de erro emitido quando attachment com botões não tem callback_id
CALLBACK_ID_REQUIRED = "callback_id_required"
CALLBACK_ID_REQUIRED_MESSAGE = "callback_id is required when the attachment has button actions"

# Actions que disparam callback e por isso exigem correlação
INTERACTIVE_ACTION_TYPES = frozenset({"button"})


class SchemaProfile(StrEnum):
    """Perfis de validação do schema de mensagem."""

    INBOUND = "inbound"
    OUTBOUND = "outbound"


class InboundAction(BaseModel):
    """Botão interativo recebido da plataforma."""

    model_config = ConfigDict(extra="allow")

    type: ActionType = Field(..., description="Tipo da action (apenas 'button').")
    name: StrictStr = Field(..., description="Identificador estável da action.")
    text: StrictStr = Field(..., description="Rótulo exibido no botão.")
    value: StrictStr = Field(..., description="Valor devolvido ao handler no clique.")
    style: ButtonStyle | None = Field(default=None, description="Cor do botão.")


class OutboundAction(InboundAction):
    """Botão interativo enviado (objeto fechado)."""

    model_config = ConfigDict(extra="forbid")


class InboundAttachment(BaseModel):
    """Bloco secundário de conteúdo, opcionalmente com actions."""

    model_config = ConfigDict(extra="allow")

    text: StrictStr
    callback_id: StrictStr | None = None
    actions: list[InboundAction] | None = None

    @property
    def is_interactive(self) -> bool:
        """True se alguma action do attachment dispara callback."""
        return any(action.type in INTERACTIVE_ACTION_TYPES for action in self.actions or [])


class OutboundAttachment(InboundAttachment):
    """Attachment enviado: fechado e com callback_id quando interativo."""

    model_config = ConfigDict(extra="forbid")

    actions: list[OutboundAction] | None = None  # type: ignore[assignment]

    @model_validator(mode="after")
    def _require_callback_id(self) -> Self:
        if self.is_interactive and self.callback_id is None:
            raise PydanticCustomError(
                CALLBACK_ID_REQUIRED,
                CALLBACK_ID_REQUIRED_MESSAGE,
            )
        return self


class InboundMessage(BaseModel):
    """Mensagem canônica recebida (schema aberto)."""

    model_config = ConfigDict(extra="allow")

    text: StrictStr
    file_url: StrictStr | None = None
    user_ids: list[int] | None = None
    attachments: list[InboundAttachment] | None = None


class OutboundMessage(InboundMessage):
    """Mensagem enviada (schema fechado, URL e inteiros estritos)."""

    model_config = ConfigDict(extra="forbid")

    file_url: AnyUrl | None = None  # type: ignore[assignment]
    user_ids: list[StrictInt] | None = None  # type: ignore[assignment]
    attachments: list[OutboundAttachment] | None = None  # type: ignore[assignment]


_MESSAGE_MODELS: dict[SchemaProfile, type[InboundMessage]] = {
    SchemaProfile.INBOUND: InboundMessage,
    SchemaProfile.OUTBOUND: OutboundMessage,
}


def message_model_for(profile: SchemaProfile | str) -> type[InboundMessage]:
    """Retorna a classe raiz de mensagem para o perfil."""
    return _MESSAGE_MODELS[SchemaProfile(profile)]


def accepts_bare_string(profile: SchemaProfile | str) -> bool:
    """Somente o perfil outbound aceita string pura como mensagem."""
    return SchemaProfile(profile) is SchemaProfile.OUTBOUND


__all__ = [
    "ACTION_TYPES",
    "BUTTON_STYLES",
    "CALLBACK_ID_REQUIRED",
    "CALLBACK_ID_REQUIRED_MESSAGE",
    "ActionType",
    "ButtonStyle",
    "InboundAction",
    "InboundAttachment",
    "InboundMessage",
    "OutboundAction",
    "OutboundAttachment",
    "OutboundMessage",
    "SchemaProfile",
    "accepts_bare_string",
    "message_model_for",
]
