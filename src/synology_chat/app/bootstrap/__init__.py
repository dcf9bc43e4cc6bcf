"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging, valida settings e registra o
adapter Synology Chat.

Uso:
    from synology_chat.app.bootstrap import initialize_app, register_synology_chat

    initialize_app()
    register_synology_chat(app, on_message=handler)
"""

from __future__ import annotations

import logging

from synology_chat.app.bootstrap.plugin import (
    STATE_ATTRIBUTE,
    SynologyChatOptions,
    register_synology_chat,
)
from synology_chat.app.observability import get_correlation_id
from synology_chat.config.logging import configure_logging
from synology_chat.config.settings import get_base_settings, get_synology_chat_settings

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON estruturado com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` apenas registra alerta.
    """
    base = get_base_settings()
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"synology_chat: {error}" for error in get_synology_chat_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


__all__ = [
    "STATE_ATTRIBUTE",
    "SynologyChatOptions",
    "initialize_app",
    "register_synology_chat",
    "validate_runtime_settings",
]
