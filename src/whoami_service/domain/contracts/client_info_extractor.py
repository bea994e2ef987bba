"""Protocol for extracting client information from requests."""

from typing import Protocol

from whoami_service.domain.models.client_info import ClientInfo
from whoami_service.domain.models.inbound_request import InboundRequest


class ClientInfoExtractorProtocol(Protocol):
    """Protocol for deriving client information from an inbound request."""

    def __call__(self, request: InboundRequest) -> ClientInfo:
        """Extract client information.

        Args:
            request: The inbound request, including the peer address.

        Returns:
            The extracted client information. Never raises.
        """
        ...
