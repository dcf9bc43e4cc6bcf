"""Configuração de logging estruturado.

Uso:
    from synology_chat.config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="synology_chat")
    logger = get_logger(__name__)
    logger.info("synology_chat_webhook_received", extra={"payload_size": 42})

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime
"""

from synology_chat.config.logging.config import configure_logging, get_logger
from synology_chat.config.logging.filters import CorrelationIdFilter
from synology_chat.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
