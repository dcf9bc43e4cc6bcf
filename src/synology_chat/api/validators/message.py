"""Validação de mensagens contra o schema (perfis inbound/outbound).

Converte os erros do pydantic em violações com JSON pointer e categoria,
permitindo que rota, sender e testes apontem exatamente qual campo
aninhado falhou. Função pura: sem I/O e sem estado.

Uso:
    result = validate_message({"text": "oi"}, SchemaProfile.OUTBOUND)
    if not result.valid:
        ...

    validate_outbound = compile_validator(SchemaProfile.OUTBOUND)
    validate_outbound("Hello world").valid  # True
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from synology_chat.api.schemas.message import (
    CALLBACK_ID_REQUIRED,
    CALLBACK_ID_REQUIRED_MESSAGE,
    SchemaProfile,
    accepts_bare_string,
    message_model_for,
)
from synology_chat.api.validators.violations import (
    ValidationResult,
    Violation,
    ViolationKind,
    to_json_pointer,
)

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails

_ENUMERATION_ERRORS = frozenset({"literal_error", "enum"})
_FORMAT_ERRORS = frozenset({"url_parsing", "url_scheme", "url_syntax_violation", "url_too_long"})


def validate_message(
    candidate: Any,
    profile: SchemaProfile | str = SchemaProfile.OUTBOUND,
) -> ValidationResult:
    """Valida `candidate` e retorna todas as violações encontradas.

    Args:
        candidate: Mensagem (dict ou, no perfil outbound, string).
        profile: Perfil de rigor do schema.

    Returns:
        ValidationResult (valid = sem violações).
    """
    profile = SchemaProfile(profile)
    if isinstance(candidate, str) and accepts_bare_string(profile):
        return ValidationResult()

    violations: list[Violation] = []
    try:
        message_model_for(profile).model_validate(candidate)
    except ValidationError as exc:
        violations.extend(_to_violation(error) for error in exc.errors(include_url=False))

    if profile is SchemaProfile.OUTBOUND:
        # Checado no dado bruto: o validator "after" só roda com o attachment válido
        reported = {(v.path, v.kind, v.property) for v in violations}
        violations.extend(
            violation
            for violation in _missing_callback_ids(candidate)
            if (violation.path, violation.kind, violation.property) not in reported
        )

    return ValidationResult(tuple(violations))


class MessageValidator:
    """Predicado reutilizável ligado a um perfil."""

    def __init__(self, profile: SchemaProfile | str) -> None:
        self.profile = SchemaProfile(profile)

    def __call__(self, candidate: Any) -> ValidationResult:
        return validate_message(candidate, self.profile)

    def __repr__(self) -> str:
        return f"MessageValidator(profile={self.profile.value!r})"


def compile_validator(profile: SchemaProfile | str) -> MessageValidator:
    """Compila o schema do perfil em um validador reutilizável."""
    return MessageValidator(profile)


def _to_violation(error: ErrorDetails) -> Violation:
    error_type = error["type"]
    location = tuple(error["loc"])
    detail = error["msg"]

    if error_type == "missing":
        return Violation(
            path=to_json_pointer(location[:-1]),
            kind=ViolationKind.MISSING_REQUIRED_PROPERTY,
            detail=f"missing required property '{location[-1]}'",
            property=str(location[-1]),
        )
    if error_type == CALLBACK_ID_REQUIRED:
        return Violation(
            path=to_json_pointer(location),
            kind=ViolationKind.MISSING_REQUIRED_PROPERTY,
            detail=detail,
            property="callback_id",
        )
    if error_type == "extra_forbidden":
        return Violation(
            path=to_json_pointer(location[:-1]),
            kind=ViolationKind.UNEXPECTED_PROPERTY,
            detail=f"unexpected property '{location[-1]}'",
            property=str(location[-1]),
        )
    if error_type in _ENUMERATION_ERRORS:
        kind = ViolationKind.VALUE_NOT_IN_ENUMERATION
    elif error_type in _FORMAT_ERRORS:
        kind = ViolationKind.INVALID_FORMAT
    else:
        kind = ViolationKind.WRONG_TYPE
    return Violation(path=to_json_pointer(location), kind=kind, detail=detail)


def _missing_callback_ids(candidate: Any) -> list[Violation]:
    """Attachments com actions e sem callback_id, independente de outros erros."""
    if not isinstance(candidate, Mapping):
        return []
    attachments = candidate.get("attachments")
    if not isinstance(attachments, list):
        return []

    return [
        Violation(
            path=to_json_pointer(("attachments", index)),
            kind=ViolationKind.MISSING_REQUIRED_PROPERTY,
            detail=CALLBACK_ID_REQUIRED_MESSAGE,
            property="callback_id",
        )
        for index, attachment in enumerate(attachments)
        if isinstance(attachment, Mapping)
        and isinstance(attachment.get("actions"), list)
        and attachment["actions"]
        and attachment.get("callback_id") is None
    ]
