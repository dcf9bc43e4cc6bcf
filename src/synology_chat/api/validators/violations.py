"""Violações estruturadas reportadas pelo validador."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from synology_chat.api.validators.errors import MessageValidationError

if TYPE_CHECKING:
    from collections.abc import Sequence


class ViolationKind(StrEnum):
    """Categoria da violação."""

    MISSING_REQUIRED_PROPERTY = "missing-required-property"
    WRONG_TYPE = "wrong-type"
    VALUE_NOT_IN_ENUMERATION = "value-not-in-enumeration"
    UNEXPECTED_PROPERTY = "unexpected-property"
    INVALID_FORMAT = "invalid-format"


@dataclass(frozen=True, slots=True)
class Violation:
    """Uma falha de validação localizada na mensagem.

    Attributes:
        path: JSON pointer do valor ("" = raiz, ex: /attachments/0/actions/1/style).
            Para propriedades ausentes ou inesperadas aponta para o objeto dono.
        kind: Categoria da violação.
        detail: Descrição legível.
        property: Nome da propriedade ausente/inesperada, quando aplicável.
    """

    path: str
    kind: ViolationKind
    detail: str
    property: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"path": self.path, "kind": str(self.kind), "detail": self.detail}
        if self.property is not None:
            data["property"] = self.property
        return data


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Resultado de validação: válido se e somente se não houver violações."""

    violations: tuple[Violation, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.violations

    def at(self, path: str) -> list[Violation]:
        """Violações reportadas exatamente em `path`."""
        return [violation for violation in self.violations if violation.path == path]

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "violations": [violation.to_dict() for violation in self.violations],
        }

    def raise_for_violations(self) -> None:
        """Levanta MessageValidationError se houver violações."""
        if self.violations:
            raise MessageValidationError(self.violations)


def to_json_pointer(location: Sequence[str | int]) -> str:
    """Converte loc do pydantic em JSON pointer (RFC 6901)."""
    parts = (str(part).replace("~", "~0").replace("/", "~1") for part in location)
    return "".join(f"/{part}" for part in parts)
