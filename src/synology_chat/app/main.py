"""Entrypoint ASGI do adapter Synology Chat.

Uso (produção):
    uvicorn synology_chat.app.main:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    python -m synology_chat.app.main
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from synology_chat.app.bootstrap import (
    initialize_app,
    register_synology_chat,
    validate_runtime_settings,
)
from synology_chat.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from synology_chat.app.dispatch import MessageHandler

# Inicializar logging ANTES de qualquer log do módulo
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Valida settings no startup e registra início/fim do serviço."""
    logger.info("app_starting", extra={"service": "synology_chat"})
    validate_runtime_settings()
    yield
    logger.info("app_shutting_down", extra={"service": "synology_chat"})


def create_app(on_message: MessageHandler | None = None) -> FastAPI:
    """Cria a aplicação FastAPI com o webhook registrado.

    Args:
        on_message: Handler das mensagens recebidas (opcional).

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="synology-chat-adapter",
        description="Adapter de webhooks do Synology Chat",
        version="0.1.0",
        lifespan=lifespan,
    )

    @fastapi_app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    register_synology_chat(fastapi_app, on_message=on_message)

    logger.info("app_configured", extra={"service": "synology_chat"})
    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting synology_chat in development mode")
    uvicorn.run(
        "synology_chat.app.main:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
