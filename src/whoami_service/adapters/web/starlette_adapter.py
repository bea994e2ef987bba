"""Starlette/uvicorn server adapter."""

from __future__ import annotations

import logging

import uvicorn

from whoami_service.adapters.config import AppConfig
from whoami_service.adapters.web.asgi_app import create_app
from whoami_service.application import Router
from whoami_service.domain.ports import ServerAdapter

logger = logging.getLogger(__name__)


class StarletteServerAdapter(ServerAdapter):
    """Serves the WhoAmI application with uvicorn."""

    def __init__(self, config: AppConfig, router: Router | None = None) -> None:
        """Initialize the server adapter.

        Args:
            config: Application configuration.
            router: Router to serve; a default one is created when omitted.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        self.config = config
        self.router = router or Router()
        self.app = create_app(self.router)
        self._server: uvicorn.Server | None = None

    def log_endpoints(self) -> None:
        """Log the listen address and every served endpoint."""
        logger.info(f"WhoAmI server listening on http://{self.config.host}:{self.config.port}")
        logger.info("Endpoints:")
        for method, path, description in self.router.endpoints:
            logger.info(f"   {method} {path:<8}- {description}")

    async def start(self) -> None:
        """Start the web server and serve until stopped."""
        uvicorn_config = uvicorn.Config(
            self.app,
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level,
        )
        self._server = uvicorn.Server(uvicorn_config)
        self.log_endpoints()
        await self._server.serve()

    async def stop(self) -> None:
        """Ask the web server to exit."""
        if self._server:
            self._server.should_exit = True
