"""Extraction of client information from inbound requests.

Extraction never fails: absent or malformed inputs fall back to fixed values
so every request can be rendered.
"""

from __future__ import annotations

from whoami_service.domain.models import ClientInfo, InboundRequest

UNKNOWN_USER_AGENT = "Unknown"
UNKNOWN_PEER = "unknown"

_FORWARDED_FOR = "x-forwarded-for"
_REAL_IP = "x-real-ip"
_USER_AGENT = "user-agent"


def decode_header_value(value: bytes) -> str | None:
    """Decode a header value as text, or return ``None`` if it is not text.

    Only visible ASCII and horizontal tab count as text. Values carrying
    control bytes or obs-text are rejected.
    """
    for byte in value:
        if byte != 0x09 and not 0x20 <= byte <= 0x7E:
            return None
    return value.decode("ascii")


def _find_header(request: InboundRequest, name: str) -> str | None:
    """Return the decoded value of the first header called ``name``.

    A first occurrence that is not text hides any later ones.
    """
    for raw_name, raw_value in request.headers:
        if raw_name.decode("latin-1").lower() == name:
            return decode_header_value(raw_value)
    return None


def extract_client_ip(request: InboundRequest) -> str:
    """Extract the client IP, preferring forwarding headers over the peer address.

    X-Forwarded-For may contain a chain ("client, proxy1, proxy2"); the first
    entry is returned trimmed but otherwise unvalidated.
    """
    forwarded_for = _find_header(request, _FORWARDED_FOR)
    if forwarded_for is not None:
        return forwarded_for.split(",")[0].strip()

    real_ip = _find_header(request, _REAL_IP)
    if real_ip is not None:
        return real_ip

    if request.peer_host:
        return request.peer_host
    return UNKNOWN_PEER


def extract_user_agent(request: InboundRequest) -> str:
    """Extract the User-Agent header, or ``"Unknown"``."""
    user_agent = _find_header(request, _USER_AGENT)
    if user_agent is None:
        return UNKNOWN_USER_AGENT
    return user_agent


def collect_headers(request: InboundRequest) -> dict[str, str]:
    """Collect all text-valued headers into a mapping.

    Names are kept as delivered by the transport. A repeated name keeps its
    last value.
    """
    headers: dict[str, str] = {}
    for raw_name, raw_value in request.headers:
        value = decode_header_value(raw_value)
        if value is None:
            continue
        headers[raw_name.decode("latin-1")] = value
    return headers


def extract_client_info(request: InboundRequest) -> ClientInfo:
    """Extract IP, user agent and headers from a request."""
    return ClientInfo(
        ip=extract_client_ip(request),
        user_agent=extract_user_agent(request),
        headers=collect_headers(request),
    )
