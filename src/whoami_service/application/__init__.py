"""Application layer - extraction, rendering and routing."""

from whoami_service.application.client_info_extractor import extract_client_info
from whoami_service.application.router import Router

__all__ = ["Router", "extract_client_info"]
