"""Static request routing for the WhoAmI service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from whoami_service.application.client_info_extractor import extract_client_info
from whoami_service.application.formatters import render_html, render_json, render_text
from whoami_service.domain.models import InboundRequest, RenderedResponse

if TYPE_CHECKING:
    from whoami_service.domain.contracts import (
        ClientInfoExtractorProtocol,
        ResponseRendererProtocol,
    )

logger = logging.getLogger(__name__)

Handler = Callable[[InboundRequest], RenderedResponse]

HEALTH_RESPONSE = RenderedResponse(status_code=200, content_type="text/plain", body=b"OK")
NOT_FOUND_RESPONSE = RenderedResponse(
    status_code=404, content_type="text/plain", body=b"404 Not Found"
)


class Router:
    """Maps ``(method, path)`` to a handler; anything unmatched is a 404.

    Matching is exact: no trailing-slash normalization and ``HEAD`` is not
    treated as ``GET``.
    """

    def __init__(self, extractor: ClientInfoExtractorProtocol = extract_client_info) -> None:
        """Initialize the dispatch table.

        Args:
            extractor: Function deriving client information from a request.
        """
        self._extractor = extractor
        self._routes: dict[tuple[str, str], tuple[Handler, str]] = {
            ("GET", "/"): (self._rendering(render_html), "HTML page"),
            ("GET", "/json"): (self._rendering(render_json), "JSON API"),
            ("GET", "/api"): (self._rendering(render_json), "JSON API (alias)"),
            ("GET", "/text"): (self._rendering(render_text), "Plain text"),
            ("GET", "/health"): (self._health, "Health check"),
        }

    def _rendering(self, renderer: ResponseRendererProtocol) -> Handler:
        """Create a handler that extracts client info and renders it."""

        def handler(request: InboundRequest) -> RenderedResponse:
            return renderer(self._extractor(request))

        return handler

    @staticmethod
    def _health(_request: InboundRequest) -> RenderedResponse:
        return HEALTH_RESPONSE

    @property
    def endpoints(self) -> list[tuple[str, str, str]]:
        """List ``(method, path, description)`` for every route."""
        return [
            (method, path, description)
            for (method, path), (_handler, description) in self._routes.items()
        ]

    def dispatch(self, request: InboundRequest) -> RenderedResponse:
        """Produce the response for a request. Never raises for any request shape."""
        route = self._routes.get((request.method, request.path))
        if route is None:
            logger.debug(f"No route for {request.method} {request.path}")
            return NOT_FOUND_RESPONSE
        handler, _description = route
        return handler(request)
