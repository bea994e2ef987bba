"""Inbound request domain model."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class InboundRequest:
    """Transport-neutral view of one parsed HTTP request.

    ``headers`` keeps the raw ``(name, value)`` byte pairs in arrival order,
    duplicates included. ``peer_host`` is the IP portion of the directly
    connected peer, or ``None`` when the transport does not report one.
    """

    method: str
    path: str
    headers: tuple[tuple[bytes, bytes], ...] = field(default_factory=tuple)
    peer_host: str | None = None
