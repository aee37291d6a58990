"""Per-request page pipeline: load, index, navigate, prepare render variables.

This plays the content pipeline's part around the language index for a single
request.  Every page is turned into one :class:`PageRecord` instance which is
then shared by the page list, both groupings and the navigation context.
"""

import logging
from typing import Iterable, List, NamedTuple, Optional

from app.models.page import PageRecord
from app.models.request import PageInput
from app.services.indexer import LanguageIndexer
from app.services.metadata import metadata_from_headers
from app.services.navigator import NavigationContext
from app.services.normalizer import generate_slug, url_key
from app.services.render import prepare_render_variables

logger = logging.getLogger(__name__)


class PageNavigation(NamedTuple):
    pages: List[PageRecord]
    current: Optional[PageRecord]
    previous: Optional[PageRecord]
    next: Optional[PageRecord]
    languages: List[str]
    page_languages: List[PageRecord]


def _load_pages(pages_in: Iterable[PageInput], indexer: LanguageIndexer) -> List[PageRecord]:
    """Build and register one record per incoming page, in order."""
    records: List[PageRecord] = []
    for position, page in enumerate(pages_in):
        meta = indexer.finalize_metadata(metadata_from_headers(page.meta))
        record = PageRecord(
            id=str(position),
            url=page.url,
            slug=generate_slug(page.url, page.title),
            title=page.title,
            date=page.date,
            raw_content=page.raw_content,
            content=page.content,
            meta=meta,
        )
        records.append(indexer.register_page(record))
    return records


def build_index(pages_in: Iterable[PageInput], default_language: str) -> LanguageIndexer:
    """Index *pages_in* without any navigation step."""
    indexer = LanguageIndexer()
    indexer.set_default_language(default_language)
    _load_pages(pages_in, indexer)
    return indexer


def _find_current(records: List[PageRecord], current_url: Optional[str]) -> Optional[int]:
    if not current_url:
        return None
    wanted = url_key(current_url)
    for index, record in enumerate(records):
        if url_key(record.url) == wanted:
            return index
    return None


def build_navigation(
    pages_in: Iterable[PageInput],
    current_url: Optional[str],
    default_language: str,
) -> PageNavigation:
    """Run the full pipeline for the page at *current_url*."""
    indexer = LanguageIndexer()
    indexer.set_default_language(default_language)
    records = _load_pages(pages_in, indexer)

    # Neighbours in the unfiltered list, as the content pipeline sees them
    position = _find_current(records, current_url)
    current = previous = next_page = None
    if position is not None:
        current = records[position]
        previous = records[position - 1] if position > 0 else None
        next_page = records[position + 1] if position + 1 < len(records) else None
    elif current_url:
        logger.info("No page matches current URL %s", current_url)

    context = NavigationContext(list(records), current, previous, next_page)
    context.apply_language_filter()

    variables = prepare_render_variables({}, indexer, context.current)
    return PageNavigation(
        pages=context.pages,
        current=context.current,
        previous=context.previous,
        next=context.next,
        languages=variables["languages"],
        page_languages=variables["page_languages"],
    )
