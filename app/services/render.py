"""Template variables exposed by the language index."""

from typing import Any, MutableMapping, Optional

from app.models.page import PageRecord
from app.services.indexer import LanguageIndexer


def prepare_render_variables(
    variables: MutableMapping[str, Any],
    indexer: LanguageIndexer,
    current: Optional[PageRecord],
) -> MutableMapping[str, Any]:
    """Add ``languages`` and ``page_languages`` to the renderer's variables.

    ``page_languages`` lists every language version of *current*, itself
    included, which is what a language switcher iterates over.  Other keys in
    *variables* are left alone.
    """
    variables["languages"] = indexer.languages()
    variables["page_languages"] = indexer.siblings_of(current.group_id) if current else []
    return variables
