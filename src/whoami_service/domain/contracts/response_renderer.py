"""Protocol for rendering client information."""

from typing import Protocol

from whoami_service.domain.models.client_info import ClientInfo
from whoami_service.domain.models.rendered_response import RenderedResponse


class ResponseRendererProtocol(Protocol):
    """Protocol for rendering client information into a response body."""

    def __call__(self, client_info: ClientInfo) -> RenderedResponse:
        """Render client information.

        Args:
            client_info: The extracted client information.

        Returns:
            Rendered response with status code, content type and body.
        """
        ...
