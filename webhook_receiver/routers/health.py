"""Health check endpoints.

Answered before any webhook header or body parsing, for every HTTP method.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from webhook_receiver.config import settings
from webhook_receiver.routing import AnyMethodRoute

router = APIRouter(tags=["health"], route_class=AnyMethodRoute)


async def status_check() -> JSONResponse:
    """Report that the process is up. Does not touch the database."""
    return JSONResponse({"status": "ok"})


for _path in settings.health_check_paths:
    router.add_api_route(_path, status_check)
