"""Plain text rendering of client information."""

from whoami_service.domain.models import ClientInfo, RenderedResponse

TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


def render_text(client_info: ClientInfo) -> RenderedResponse:
    """Render client information as plain text, one header per line."""
    lines = [
        f"Client IP: {client_info.ip}\n",
        f"User-Agent: {client_info.user_agent}\n\n",
        "Request Headers:\n",
    ]
    for name, value in client_info.headers.items():
        lines.append(f"  {name}: {value}\n")

    return RenderedResponse(
        status_code=200,
        content_type=TEXT_CONTENT_TYPE,
        body="".join(lines).encode("utf-8"),
    )
