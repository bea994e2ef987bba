"""12-factor configuration adapter using environment variables."""

import logging
import re
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

LISTEN_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
MAX_PORT = 65535
_PORT_PATTERN = re.compile(r"\+?[0-9]+")
LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    port: int = Field(default=DEFAULT_PORT, description="Port to bind the server to")
    log_level: str = Field(default="info", description="Log level for the application and uvicorn")

    @property
    def host(self) -> str:
        """Address to bind to. Always all interfaces."""
        return LISTEN_HOST

    @field_validator("port", mode="before")
    @classmethod
    def validate_port(cls, v: Any) -> int:
        """Fall back to the default port when the value is not a usable port number."""
        if not _PORT_PATTERN.fullmatch(str(v)):
            logger.warning(f"Invalid PORT {v!r}, using default {DEFAULT_PORT}")
            return DEFAULT_PORT
        port = int(str(v))
        if not 0 <= port <= MAX_PORT:
            logger.warning(f"PORT {port} out of range, using default {DEFAULT_PORT}")
            return DEFAULT_PORT
        return port

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one uvicorn understands."""
        if v.lower() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.lower()

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Create a config that ignores the environment's .env file."""
        return cls(_env_file=None, **overrides)
