"""Domain models for the WhoAmI service."""

from whoami_service.domain.models.client_info import ClientInfo
from whoami_service.domain.models.inbound_request import InboundRequest
from whoami_service.domain.models.rendered_response import RenderedResponse

__all__ = [
    "ClientInfo",
    "InboundRequest",
    "RenderedResponse",
]
