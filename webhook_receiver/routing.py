"""Route class for endpoints that answer every HTTP method."""

from fastapi.routing import APIRoute
from starlette.routing import Match
from starlette.types import Receive, Scope, Send


class AnyMethodRoute(APIRoute):
    """An ``APIRoute`` that serves every HTTP method, extension methods included.

    Starlette answers a method outside ``route.methods`` with a 405. These
    routes match on path alone, so TRACE, PROPFIND or REPORT reach the
    endpoint like GET and POST do.
    """

    def matches(self, scope: Scope) -> tuple[Match, Scope]:
        match, child_scope = super().matches(scope)
        if match is Match.PARTIAL:
            match = Match.FULL
        return match, child_scope

    async def handle(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.app(scope, receive, send)
