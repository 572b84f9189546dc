"""GitHub webhook dispatcher.

Every path that is not a health check lands here, whatever the HTTP method,
and is routed on the ``X-GitHub-Event`` header:

- ``ping``: acknowledged with an empty 200, the body is never read.
- ``push``: size-checked, parsed, and printed to stdout.
- anything else: 501 with the offending event name.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncEngine
from starlette.requests import ClientDisconnect

from webhook_receiver.config import settings
from webhook_receiver.dependencies import get_db_engine, get_webhook_headers
from webhook_receiver.errors import WebhookProcessingError
from webhook_receiver.routing import AnyMethodRoute
from webhook_receiver.schemas.push import PushEvent
from webhook_receiver.schemas.webhooks import EventKind, UnknownEvent, WebhookHeaders
from webhook_receiver.services.body_reader import read_limited_body

logger = structlog.get_logger()

router = APIRouter(tags=["webhooks"], route_class=AnyMethodRoute)


@router.api_route("/{path:path}")
async def dispatch_webhook(
    request: Request,
    headers: Annotated[WebhookHeaders, Depends(get_webhook_headers)],
    engine: Annotated[AsyncEngine, Depends(get_db_engine)],
) -> Response:
    """Route a delivery to its handler based on the event name header."""
    logger.info("webhook_received", path=request.url.path, headers=headers.model_dump())

    match headers.event_kind:
        case EventKind.PING:
            return Response(status_code=status.HTTP_200_OK)
        case EventKind.PUSH:
            return await handle_push(request, headers, engine)
        case UnknownEvent(name=name):
            logger.info("webhook_event_not_supported", event_name=name)
            return JSONResponse(
                status_code=status.HTTP_501_NOT_IMPLEMENTED,
                content={"error": "not supported", "event": name},
            )


async def handle_push(
    request: Request,
    headers: WebhookHeaders,
    engine: AsyncEngine,  # noqa: ARG001
) -> Response:
    """Read, validate and print a push payload.

    Raises:
        PayloadTooLargeError: If the body is, or is advertised to be, too large.
        WebhookProcessingError: If the body cannot be read or decoded.
    """
    try:
        body = await read_limited_body(request, settings.max_push_body_bytes)
    except ClientDisconnect as exc:
        raise WebhookProcessingError("Failed to read push payload body") from exc

    try:
        payload = PushEvent.model_validate_json(body)
    except ValidationError as exc:
        raise WebhookProcessingError("Invalid push payload") from exc

    print(payload.render(), flush=True)

    logger.info(
        "push_event_processed",
        ref=payload.ref,
        commits=len(payload.commits),
        delivery=headers.delivery,
    )
    return Response(status_code=status.HTTP_200_OK)
