"""Renderers turning client information into HTML, JSON and plain text."""

from whoami_service.application.formatters.escaping import escape_html
from whoami_service.application.formatters.html_formatter import render_html
from whoami_service.application.formatters.json_formatter import render_json
from whoami_service.application.formatters.text_formatter import render_text

__all__ = ["escape_html", "render_html", "render_json", "render_text"]
