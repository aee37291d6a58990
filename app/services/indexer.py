"""Language index: groups loaded pages by language and by cross-language id.

A fresh :class:`LanguageIndexer` is built for every request.  Pages are
registered one at a time, in discovery order, as the content pipeline loads
them; afterwards the index answers two questions for the renderer: which
languages exist on the site, and which pages are translations of a given page.
"""

import logging
from typing import Dict, List

from app.models.page import PageMetadata, PageRecord

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"


class LanguageIndexer:
    def __init__(self, default_language: str = DEFAULT_LANGUAGE) -> None:
        self.default_language = default_language or DEFAULT_LANGUAGE
        self.pages_by_language: Dict[str, List[PageRecord]] = {}
        self.pages_by_group: Dict[str, List[PageRecord]] = {}

    def set_default_language(self, value: str) -> None:
        """Override the built-in default.  The tag format is not validated."""
        if value:
            self.default_language = value

    def resolve_language(self, meta: PageMetadata) -> str:
        """Return the page's own language, or the default when it has none."""
        return meta.language or self.default_language

    def finalize_metadata(self, meta: PageMetadata) -> PageMetadata:
        """Fill an empty ``language`` header with the default, in place."""
        meta.language = self.resolve_language(meta)
        return meta

    def register_page(self, record: PageRecord) -> PageRecord:
        """Record *record* in both groupings and return the same instance.

        Pages without a ``group_id`` are only grouped by language.
        """
        record.language = self.resolve_language(record.meta)
        record.group_id = record.meta.group_id

        self.pages_by_language.setdefault(record.language, []).append(record)
        if record.group_id:
            self.pages_by_group.setdefault(record.group_id, []).append(record)

        logger.debug(
            "Indexed page %s (language=%s, group_id=%s)",
            record.url,
            record.language,
            record.group_id or "-",
        )
        return record

    def languages(self) -> List[str]:
        """Distinct languages, in the order they were first seen."""
        return list(self.pages_by_language)

    def siblings_of(self, group_id: str) -> List[PageRecord]:
        """All language versions sharing *group_id*, the asking page included."""
        if not group_id:
            return []
        return list(self.pages_by_group.get(group_id, []))

    def pages_in(self, language: str) -> List[PageRecord]:
        return list(self.pages_by_language.get(language, []))
