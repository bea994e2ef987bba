"""Domain layer - core models and interfaces."""

from whoami_service.domain.models import ClientInfo, InboundRequest, RenderedResponse
from whoami_service.domain.ports import ServerAdapter

__all__ = [
    "ClientInfo",
    "InboundRequest",
    "RenderedResponse",
    "ServerAdapter",
]
