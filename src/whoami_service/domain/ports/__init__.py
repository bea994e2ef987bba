"""Ports (interfaces) for the ports-and-adapters architecture."""

from whoami_service.domain.ports.server_adapter import ServerAdapter

__all__ = ["ServerAdapter"]
