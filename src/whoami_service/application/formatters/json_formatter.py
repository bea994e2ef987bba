"""JSON rendering of client information."""

import json
import logging

from whoami_service.domain.models import ClientInfo, RenderedResponse

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
EMPTY_JSON_BODY = b"{}"


def render_json(client_info: ClientInfo) -> RenderedResponse:
    """Render client information as a pretty-printed JSON document.

    The document has exactly the keys ``ip``, ``userAgent`` and ``headers``.
    If serialization fails the body degrades to ``{}``.
    """
    try:
        body = json.dumps(
            client_info.model_dump(by_alias=True),
            indent=2,
            ensure_ascii=False,
        ).encode("utf-8")
    except (TypeError, ValueError) as e:
        logger.warning(f"Failed to serialize client info, sending empty object: {e}")
        body = EMPTY_JSON_BODY

    return RenderedResponse(
        status_code=200,
        content_type=JSON_CONTENT_TYPE,
        body=body,
        headers={"Access-Control-Allow-Origin": "*"},
    )
