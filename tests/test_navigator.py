"""Tests for app.services.navigator.

The neighbour naming is inverted on purpose: the page *after* the current one
in the filtered list comes back as ``previous``, the page *before* it as
``next``.
"""

from app.models.page import PageMetadata, PageRecord
from app.services.indexer import LanguageIndexer
from app.services.navigator import NavigationContext, filter_to_current_language


def _register(indexer: LanguageIndexer, url: str, language: str, group_id: str = "") -> PageRecord:
    record = PageRecord(
        id=url,
        url=url,
        slug=url.strip("/") or "index",
        meta=PageMetadata(language=language, group_id=group_id),
    )
    return indexer.register_page(record)


class TestFilterToCurrentLanguage:
    def test_example_site(self):
        indexer = LanguageIndexer("en")
        a = _register(indexer, "/a", "en", "1")
        b = _register(indexer, "/de/a", "de", "1")
        c = _register(indexer, "/c", "en", "2")
        pages = [a, b, c]

        result = filter_to_current_language(pages, c, b, None)

        assert len(result.pages) == 2
        assert result.pages[0] is a
        assert result.pages[1] is c
        # c is last: nothing after it, a before it
        assert result.previous is None
        assert result.next is a

    def test_filters_in_place(self):
        indexer = LanguageIndexer()
        a = _register(indexer, "/a", "en")
        b = _register(indexer, "/b", "de")
        pages = [a, b]

        result = filter_to_current_language(pages, a)

        assert result.pages is pages
        assert pages == [a]

    def test_middle_page_gets_both_neighbours(self):
        indexer = LanguageIndexer()
        first = _register(indexer, "/1", "en")
        _register(indexer, "/de/1", "de")
        middle = _register(indexer, "/2", "en")
        _register(indexer, "/de/2", "de")
        last = _register(indexer, "/3", "en")
        pages = list(indexer.pages_by_language["en"]) + list(indexer.pages_by_language["de"])
        pages.sort(key=lambda p: p.url)

        result = filter_to_current_language(pages, middle)

        assert [p.url for p in result.pages] == ["/1", "/2", "/3"]
        assert result.previous is last
        assert result.next is first

    def test_first_page_has_no_next(self):
        indexer = LanguageIndexer()
        first = _register(indexer, "/1", "en")
        second = _register(indexer, "/2", "en")

        result = filter_to_current_language([first, second], first)

        assert result.previous is second
        assert result.next is None

    def test_only_page_in_language(self):
        indexer = LanguageIndexer()
        a = _register(indexer, "/a", "en")
        b = _register(indexer, "/b", "de")
        c = _register(indexer, "/c", "en")

        result = filter_to_current_language([a, b, c], b, a, c)

        assert len(result.pages) == 1
        assert result.pages[0] is b
        assert result.previous is None
        assert result.next is None

    def test_no_current_page_is_a_no_op(self):
        indexer = LanguageIndexer()
        a = _register(indexer, "/a", "en")
        b = _register(indexer, "/b", "de")
        pages = [a, b]

        result = filter_to_current_language(pages, None, a, b)

        assert result.pages is pages
        assert pages == [a, b]
        assert result.previous is None
        assert result.next is None

    def test_current_without_language_is_a_no_op(self):
        stray = PageRecord(id="x", url="/x", slug="x")
        indexer = LanguageIndexer()
        a = _register(indexer, "/a", "en")

        result = filter_to_current_language([a, stray], stray)

        assert len(result.pages) == 2
        assert result.previous is None
        assert result.next is None


class TestIdentityLookup:
    def test_equal_copy_is_not_mistaken_for_current(self):
        indexer = LanguageIndexer()
        a = _register(indexer, "/a", "en", "home")
        twin = _register(indexer, "/a", "en", "home")
        other = _register(indexer, "/b", "en")
        assert a == twin

        result = filter_to_current_language([a, twin, other], twin)

        # relocated at index 1, not at the equal record at index 0
        assert result.previous is other
        assert result.next is a

    def test_current_missing_from_list_gives_no_neighbours(self):
        indexer = LanguageIndexer()
        a = _register(indexer, "/a", "en")
        b = _register(indexer, "/b", "en")
        lookalike = PageRecord(**b.model_dump())
        assert lookalike == b

        result = filter_to_current_language([a, b], lookalike)

        assert len(result.pages) == 2
        assert result.previous is None
        assert result.next is None


class TestNavigationContext:
    def test_apply_language_filter_rewrites_fields(self):
        indexer = LanguageIndexer()
        a = _register(indexer, "/a", "en")
        b = _register(indexer, "/de/a", "de")
        c = _register(indexer, "/c", "en")
        d = _register(indexer, "/d", "en")

        context = NavigationContext([a, b, c, d], c, b, d).apply_language_filter()

        assert [p.url for p in context.pages] == ["/a", "/c", "/d"]
        assert context.current is c
        assert context.previous is d
        assert context.next is a

    def test_without_current_clears_neighbours(self):
        indexer = LanguageIndexer()
        a = _register(indexer, "/a", "en")
        b = _register(indexer, "/b", "en")

        context = NavigationContext([a, b], None, a, b).apply_language_filter()

        assert context.pages == [a, b]
        assert context.previous is None
        assert context.next is None
