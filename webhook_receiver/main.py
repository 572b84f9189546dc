"""FastAPI application with lifespan context manager and error handlers."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, Response, status

from webhook_receiver.config import settings
from webhook_receiver.db.engine import create_db_engine, dispose_db_engine
from webhook_receiver.errors import PayloadTooLargeError, WebhookProcessingError
from webhook_receiver.logging_config import configure_logging
from webhook_receiver.routers import health, webhooks

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: create and dispose the SQLite pool."""
    configure_logging(json_logs=not settings.debug, log_level=settings.log_level)
    app.state.db_engine = create_db_engine(settings.db_path, pool_size=settings.db_pool_size)
    logger.info("db_pool_created", db_path=settings.db_path)

    yield
    await dispose_db_engine(app.state.db_engine)
    app.state.db_engine = None


# Documentation routes are disabled: every non-health path is a webhook target.
app = FastAPI(
    title=settings.app_name,
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


@app.exception_handler(PayloadTooLargeError)
async def payload_too_large_handler(request: Request, exc: PayloadTooLargeError) -> Response:
    """Reject an oversized delivery with an empty 413."""
    logger.warning("payload_too_large", path=request.url.path, limit=exc.limit, size=exc.size)
    return Response(status_code=413)


@app.exception_handler(WebhookProcessingError)
async def webhook_processing_error_handler(
    request: Request, exc: WebhookProcessingError
) -> Response:
    """Log the underlying cause and return an empty 500 without detail."""
    cause = exc.__cause__ or exc
    logger.error(
        "webhook_processing_failed",
        path=request.url.path,
        reason=str(exc),
        exc_info=cause,
    )
    return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    """Return an empty 500 response for any unhandled exception."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        exc_info=exc,
    )
    return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


app.include_router(health.router)
app.include_router(webhooks.router)
