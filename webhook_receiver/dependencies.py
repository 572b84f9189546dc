"""Centralized FastAPI dependencies for use with Depends()."""

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine

from webhook_receiver.schemas.webhooks import WebhookHeaders


def get_db_engine(request: Request) -> AsyncEngine:
    """Return the connection pool created by the application lifespan.

    Raises:
        RuntimeError: If the lifespan has not initialized the engine.
    """
    engine = getattr(request.app.state, "db_engine", None)
    if engine is None:
        msg = "Database engine not initialized. Run the application lifespan first."
        raise RuntimeError(msg)
    return engine


def get_webhook_headers(request: Request) -> WebhookHeaders:
    """Extract the GitHub delivery headers of the current request."""
    return WebhookHeaders.from_headers(request.headers)


__all__ = [
    "get_db_engine",
    "get_webhook_headers",
]
