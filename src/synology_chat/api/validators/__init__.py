"""Validação de mensagens Synology Chat.

Uso:
    from synology_chat.api.validators import SchemaProfile, validate_message

    result = validate_message({"text": "hi", "user_ids": [1, "x"]})
    result.violations[0].path  # "/user_ids/1"
"""

from synology_chat.api.schemas.message import SchemaProfile
from synology_chat.api.validators.errors import InvalidMessageError, MessageValidationError
from synology_chat.api.validators.message import (
    MessageValidator,
    compile_validator,
    validate_message,
)
from synology_chat.api.validators.violations import (
    ValidationResult,
    Violation,
    ViolationKind,
)

__all__ = [
    "InvalidMessageError",
    "MessageValidationError",
    "MessageValidator",
    "SchemaProfile",
    "ValidationResult",
    "Violation",
    "ViolationKind",
    "compile_validator",
    "validate_message",
]
