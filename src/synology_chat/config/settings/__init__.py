"""Agregador de settings.

Re-exporta settings e funções de cada módulo.
"""

from __future__ import annotations

from synology_chat.config.settings.core import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from synology_chat.config.settings.synology_chat import (
    DEFAULT_WEBHOOK_PATH,
    BodyFormat,
    SynologyChatSettings,
    get_synology_chat_settings,
)

__all__ = [
    "DEFAULT_WEBHOOK_PATH",
    "BaseSettings",
    "BodyFormat",
    "Environment",
    "SynologyChatSettings",
    "get_base_settings",
    "get_synology_chat_settings",
]
