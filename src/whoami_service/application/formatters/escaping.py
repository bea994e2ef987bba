"""HTML escaping for values inserted into the WhoAmI page."""

_REPLACEMENTS = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def escape_html(value: str) -> str:
    """Escape ``&``, ``<``, ``>``, ``"`` and ``'`` for safe HTML insertion.

    ``&`` must be replaced first so the entities introduced by the later
    replacements are not escaped again.
    """
    for char, entity in _REPLACEMENTS:
        value = value.replace(char, entity)
    return value
