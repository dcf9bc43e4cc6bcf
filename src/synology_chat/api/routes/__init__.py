"""Rotas HTTP do adapter.

Uso:
    from synology_chat.api.routes import create_webhook_router

    app = FastAPI()
    app.include_router(create_webhook_router(path="/synology-chat", on_message=handler))
"""

from synology_chat.api.routes.webhook import create_webhook_router, handle_webhook_request

__all__ = ["create_webhook_router", "handle_webhook_request"]
