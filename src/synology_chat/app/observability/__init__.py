"""Observabilidade — correlation_id propagado para os logs.

Uso:
    from synology_chat.app.observability import get_correlation_id, set_correlation_id
"""

from synology_chat.app.observability.correlation import (
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

__all__ = [
    "get_correlation_id",
    "reset_correlation_id",
    "set_correlation_id",
]
