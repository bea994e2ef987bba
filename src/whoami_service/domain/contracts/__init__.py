"""Contracts (protocols) shared between layers."""

from whoami_service.domain.contracts.client_info_extractor import ClientInfoExtractorProtocol
from whoami_service.domain.contracts.response_renderer import ResponseRendererProtocol

__all__ = ["ClientInfoExtractorProtocol", "ResponseRendererProtocol"]
