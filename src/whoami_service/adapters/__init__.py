"""Adapters layer - external system integrations."""

from whoami_service.adapters.config import AppConfig
from whoami_service.adapters.web import StarletteServerAdapter

__all__ = ["AppConfig", "StarletteServerAdapter"]
