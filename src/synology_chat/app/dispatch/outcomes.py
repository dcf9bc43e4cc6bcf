"""Resultado do handler modelado como união etiquetada.

A inspeção de tipo do valor retornado acontece uma única vez, em
classify_result(); daí em diante cada ramo é tratado por tipo de outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel


@dataclass(frozen=True, slots=True)
class JsonOutcome:
    """Handler retornou objeto: serializado como JSON."""

    body: Any


@dataclass(frozen=True, slots=True)
class TextOutcome:
    """Handler retornou string: devolvida como texto puro."""

    text: str


@dataclass(frozen=True, slots=True)
class EmptyOutcome:
    """Handler não retornou nada (ou não há handler)."""


@dataclass(frozen=True, slots=True)
class FailedOutcome:
    """Handler levantou exceção."""

    error: str


@dataclass(frozen=True, slots=True)
class TimedOutOutcome:
    """Handler excedeu o prazo."""

    timeout_seconds: float


HandlerOutcome = JsonOutcome | TextOutcome | EmptyOutcome | FailedOutcome | TimedOutOutcome


def classify_result(result: Any) -> HandlerOutcome:
    """Classifica o valor retornado pelo handler.

    - None ou "" -> EmptyOutcome
    - str -> TextOutcome
    - BaseModel -> JsonOutcome do model_dump
    - qualquer outro valor -> JsonOutcome já codificado para JSON

    Raises:
        TypeError: Valor não serializável em JSON.
    """
    if result is None:
        return EmptyOutcome()
    if isinstance(result, str):
        return TextOutcome(result) if result else EmptyOutcome()
    if isinstance(result, BaseModel):
        return JsonOutcome(result.model_dump(mode="json", exclude_none=True))
    try:
        return JsonOutcome(jsonable_encoder(result))
    except (TypeError, ValueError) as exc:
        raise TypeError(
            f"handler result is not JSON serializable: {type(result).__name__}"
        ) from exc
