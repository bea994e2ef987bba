"""HTML rendering of client information."""

import re

from whoami_service.application.formatters.escaping import escape_html
from whoami_service.application.formatters.html_template import (
    HEADERS_MARKER,
    HTML_TEMPLATE,
    IP_ADDRESS_MARKER,
    USER_AGENT_MARKER,
)
from whoami_service.domain.models import ClientInfo, RenderedResponse

HTML_CONTENT_TYPE = "text/html; charset=utf-8"

_MARKER_PATTERN = re.compile(
    r"\{(" + "|".join((IP_ADDRESS_MARKER, USER_AGENT_MARKER, HEADERS_MARKER)) + r")\}"
)


def render_header_items(headers: dict[str, str]) -> str:
    """Build one ``header-item`` fragment per header, names and values escaped."""
    return "".join(
        '<div class="header-item">'
        f'<span class="header-name">{escape_html(name)}</span>'
        f'<span class="header-value">{escape_html(value)}</span>'
        "</div>"
        for name, value in headers.items()
    )


def fill_template(ip_html: str, user_agent_html: str, headers_html: str) -> str:
    """Substitute already-escaped values into the page template.

    All markers are replaced in one pass, so marker text inside a value is
    left as is.
    """
    values = {
        IP_ADDRESS_MARKER: ip_html,
        USER_AGENT_MARKER: user_agent_html,
        HEADERS_MARKER: headers_html,
    }
    return _MARKER_PATTERN.sub(lambda match: values[match.group(1)], HTML_TEMPLATE)


def render_html(client_info: ClientInfo) -> RenderedResponse:
    """Render client information as the WhoAmI HTML page."""
    page = fill_template(
        escape_html(client_info.ip),
        escape_html(client_info.user_agent),
        render_header_items(client_info.headers),
    )
    return RenderedResponse(
        status_code=200,
        content_type=HTML_CONTENT_TYPE,
        body=page.encode("utf-8"),
    )
