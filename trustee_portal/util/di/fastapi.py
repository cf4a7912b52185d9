"""Custom Dishka FastAPI integration using Scope.UOW."""

from dishka import AsyncContainer
from starlette.requests import Request
from starlette.types import ASGIApp, Receive, Scope, Send
from starlette.websockets import WebSocket

from trustee_portal.util.di.scope import Scope as PortalScope


class ContainerMiddleware:
    """ASGI middleware that opens a Scope.UOW container for each request.

    A variant of dishka.integrations.starlette.ContainerMiddleware that enters
    our Scope.UOW instead of dishka.Scope.REQUEST.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] not in ("http", "websocket"):
            return await self.app(scope, receive, send)

        request: Request | WebSocket
        context: dict[type[Request | WebSocket], Request | WebSocket]

        if scope["type"] == "http":
            request = Request(scope, receive=receive, send=send)
            context = {Request: request}
        else:
            request = WebSocket(scope, receive, send)
            context = {WebSocket: request}

        async with request.app.state.dishka_container(
            context,
            scope=PortalScope.UOW,
        ) as request_container:
            request.state.dishka_container = request_container
            return await self.app(scope, receive, send)


def setup_dishka(container: AsyncContainer, app) -> None:
    """Attach the container to the app and install the per-request middleware."""
    app.add_middleware(ContainerMiddleware)
    app.state.dishka_container = container
