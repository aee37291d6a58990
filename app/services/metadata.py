"""Front-matter header registration for the language index.

The content pipeline parses page headers with a table mapping an internal key
to the header field it searches for (``{"title": "Title", ...}``).  The
language index adds two entries to that table and reads them back from each
page's parsed headers.
"""

from typing import Dict, Mapping, Optional, Union

from app.models.page import PageMetadata

LANGUAGE_HEADER = "Language"
GROUP_ID_HEADER = "pid"

# Older sites tagged translations with ``Id:`` instead of ``pid:``
_LEGACY_GROUP_ID_HEADER = "id"


def register_meta_headers(headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Add the ``language`` and ``group_id`` entries to a host header table.

    Entries already present in *headers* for other keys are left untouched.
    Returns the (possibly newly created) table.
    """
    if headers is None:
        headers = {}
    headers["language"] = LANGUAGE_HEADER
    headers["group_id"] = GROUP_ID_HEADER
    return headers


HeaderValue = Union[str, int, float, bool, None]


def _lookup(raw_meta: Mapping[str, HeaderValue], field: str) -> Optional[str]:
    """Return the header value for *field* as a string, or ``None`` when absent.

    Field names match case-insensitively.  Front-matter parsers hand numbers
    and booleans back as such (``pid: 1``), so scalars are stringified.
    """
    wanted = field.lower()
    for name, value in raw_meta.items():
        if name.lower() == wanted:
            return "" if value is None else str(value).strip()
    return None


def metadata_from_headers(
    raw_meta: Mapping[str, HeaderValue],
    headers: Optional[Mapping[str, str]] = None,
) -> PageMetadata:
    """Build :class:`PageMetadata` from a page's parsed front-matter headers.

    *headers* is the host header table; when omitted the default registration
    is used, and a page with no ``pid`` field at all falls back to ``Id``.
    Missing or ``None`` values become empty strings.
    """
    if headers is None:
        table = register_meta_headers()
        legacy_fallback = True
    else:
        table = headers
        legacy_fallback = False

    language = _lookup(raw_meta, table.get("language", LANGUAGE_HEADER))
    group_id = _lookup(raw_meta, table.get("group_id", GROUP_ID_HEADER))
    if group_id is None and legacy_fallback:
        group_id = _lookup(raw_meta, _LEGACY_GROUP_ID_HEADER)
    return PageMetadata(language=language or "", group_id=group_id or "")
