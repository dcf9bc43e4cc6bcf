"""Configuração do pytest para o adapter Synology Chat."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from synology_chat.config.settings import SynologyChatSettings  # noqa: E402


@pytest.fixture
def chat_settings() -> SynologyChatSettings:
    """Settings isoladas do ambiente (sem URL de envio padrão)."""
    return SynologyChatSettings(
        webhook_url="",
        request_timeout_seconds=5.0,
        handler_timeout_seconds=5.0,
    )


@pytest.fixture
def button_message() -> dict[str, object]:
    """Mensagem outbound completa com attachment interativo."""
    return {
        "text": "📊 Monthly Report",
        "attachments": [
            {
                "text": "Sales have increased by 20% compared to last month.",
                "callback_id": "monthly_report",
                "actions": [
                    {
                        "type": "button",
                        "name": "view_report",
                        "text": "View Full Report",
                        "value": "view_full_report",
                        "style": "blue",
                    },
                    {
                        "type": "button",
                        "name": "export_data",
                        "text": "Export Data",
                        "value": "export_report_data",
                        "style": "green",
                    },
                ],
            }
        ],
    }
