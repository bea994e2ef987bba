"""Main entry point for the WhoAmI service."""

import asyncio
import logging
import sys

from pydantic import ValidationError

from whoami_service.adapters.config import AppConfig
from whoami_service.adapters.web import StarletteServerAdapter

logger = logging.getLogger(__name__)


def _to_logging_level(log_level: str) -> int:
    # uvicorn's "trace" level has no stdlib counterpart
    if log_level == "trace":
        return logging.DEBUG
    return getattr(logging, log_level.upper())


def configure_logging(log_level: str = "info") -> None:
    """Configure root logging on stderr."""
    logging.basicConfig(
        level=_to_logging_level(log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def apply_log_level(log_level: str) -> None:
    """Set the root log level once the configured level is known."""
    logging.getLogger().setLevel(_to_logging_level(log_level))


async def main() -> None:
    """Main application entry point."""
    # Configure before loading settings so config warnings use the same format
    configure_logging()

    try:
        config = AppConfig()
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    apply_log_level(config.log_level)

    server_adapter = StarletteServerAdapter(config)
    try:
        await server_adapter.start()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        await server_adapter.stop()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
