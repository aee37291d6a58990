from typing import Optional

from pydantic import BaseModel, Field


class PageMetadata(BaseModel):
    """The two front-matter headers the language index understands.

    ``language`` comes from the ``Language:`` header, ``group_id`` from
    ``pid:`` (or the legacy ``id:``).  Both are empty strings when absent.
    """

    language: str = ""
    group_id: str = ""


class PageRecord(BaseModel):
    """One loaded content page.

    ``language`` and ``group_id`` are written by
    :meth:`~app.services.indexer.LanguageIndexer.register_page`.  Records are
    tracked by identity: the same instance travels from the page list into
    both groupings and back into the navigator.
    """

    id: str
    url: str
    slug: str
    title: str = ""
    date: Optional[str] = None
    raw_content: str = ""
    content: str = ""
    meta: PageMetadata = Field(default_factory=PageMetadata)
    language: str = ""  # effective language, never empty once registered
    group_id: str = ""  # empty means "ungrouped"
