"""Web adapters serving the WhoAmI application."""

from whoami_service.adapters.web.asgi_app import WhoAmIApp, create_app
from whoami_service.adapters.web.starlette_adapter import StarletteServerAdapter

__all__ = ["StarletteServerAdapter", "WhoAmIApp", "create_app"]
