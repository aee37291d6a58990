"""Previous/next navigation restricted to the current page's language."""

import logging
from typing import List, NamedTuple, Optional

from app.models.page import PageRecord

logger = logging.getLogger(__name__)


class NavigationResult(NamedTuple):
    pages: List[PageRecord]
    previous: Optional[PageRecord]
    next: Optional[PageRecord]


def _position_of(pages: List[PageRecord], current: PageRecord) -> Optional[int]:
    """Index of *current* in *pages*, compared by identity.

    Two translations can carry identical field values, so ``==`` would pick the
    wrong record.
    """
    for index, page in enumerate(pages):
        if page is current:
            return index
    return None


def filter_to_current_language(
    pages: List[PageRecord],
    current: Optional[PageRecord],
    previous: Optional[PageRecord] = None,
    next_page: Optional[PageRecord] = None,
) -> NavigationResult:
    """Narrow *pages* to the current page's language and recompute its neighbours.

    *previous* and *next_page* are the neighbours the content pipeline found in
    the unfiltered list; they are always replaced.

    *pages* is filtered in place, keeping the original order.  Note the
    neighbour naming: the page that follows *current* in the filtered list is
    returned as ``previous`` and the page that precedes it as ``next``.  This
    is how existing themes receive them, so the pairing is kept even though it
    reads backwards.

    Without a current page (or one without a language) there is nothing to
    filter to: *pages* is returned untouched and both neighbours are ``None``.
    """
    if current is None or not current.language:
        return NavigationResult(pages, None, None)

    target_language = current.language
    pages[:] = [page for page in pages if page.language == target_language]

    position = _position_of(pages, current)
    if position is None:
        logger.debug("Current page %s missing from its own language list", current.url)
        return NavigationResult(pages, None, None)

    after = pages[position + 1] if position + 1 < len(pages) else None
    before = pages[position - 1] if position > 0 else None
    return NavigationResult(pages, after, before)


class NavigationContext:
    """The page list and current/previous/next triple for one request."""

    def __init__(
        self,
        pages: List[PageRecord],
        current: Optional[PageRecord] = None,
        previous: Optional[PageRecord] = None,
        next_page: Optional[PageRecord] = None,
    ) -> None:
        self.pages = pages
        self.current = current
        self.previous = previous
        self.next = next_page

    def apply_language_filter(self) -> "NavigationContext":
        result = filter_to_current_language(self.pages, self.current, self.previous, self.next)
        self.pages, self.previous, self.next = result
        return self
