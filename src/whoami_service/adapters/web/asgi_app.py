"""ASGI bridge between Starlette and the request router."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import Response

from whoami_service.application import Router
from whoami_service.domain.models import InboundRequest, RenderedResponse

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, MutableMapping


def request_path(request: Request) -> str:
    """Return the path exactly as received, still percent-encoded and without the query."""
    raw_path = request.scope.get("raw_path")
    if raw_path is None:
        return request.scope["path"]
    return raw_path.split(b"?", 1)[0].decode("latin-1")


def to_inbound_request(request: Request) -> InboundRequest:
    """Translate a Starlette request into the transport-neutral request model."""
    peer_host = request.client.host if request.client and request.client.host else None
    return InboundRequest(
        method=request.method,
        path=request_path(request),
        headers=tuple((name, value) for name, value in request.headers.raw),
        peer_host=peer_host,
    )


def to_starlette_response(rendered: RenderedResponse) -> Response:
    """Translate a rendered response into a Starlette response."""
    headers = dict(rendered.headers)
    headers["content-type"] = rendered.content_type
    return Response(
        content=rendered.body,
        status_code=rendered.status_code,
        headers=headers,
    )


class WhoAmIApp:
    """ASGI app answering every HTTP request through the router."""

    def __init__(self, router: Router) -> None:
        """Initialize with the router used for every request."""
        self.router = router

    async def __call__(
        self,
        scope: dict[str, Any],
        receive: Callable[[], Awaitable[dict[str, Any]]],
        send: Callable[[MutableMapping[str, Any]], Awaitable[None]],
    ) -> None:
        """Handle an ASGI HTTP request."""
        request = Request(scope, receive)
        rendered = self.router.dispatch(to_inbound_request(request))
        response = to_starlette_response(rendered)
        await response(scope, receive, send)


def create_app(router: Router | None = None) -> Starlette:
    """Create the Starlette application.

    The app has no routes of its own; every request, including targets such
    as ``*`` that do not start with a slash, falls through to the router,
    which owns the dispatch table and the 404 fallback.
    """
    app = Starlette()
    app.router.default = WhoAmIApp(router or Router())
    return app
