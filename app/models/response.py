from typing import Dict, List, Optional

from pydantic import BaseModel

from app.models.page import PageRecord


class NavigationResponse(BaseModel):
    current_url: Optional[str] = None
    pages: List[PageRecord]
    previous: Optional[PageRecord] = None
    """The page *after* the current one in the filtered list.

    The previous/next names are inverted with respect to list order; the
    pairing is kept as-is for themes that already rely on it.
    """
    next: Optional[PageRecord] = None
    """The page *before* the current one in the filtered list."""
    languages: List[str]
    page_languages: List[PageRecord]


class IndexResponse(BaseModel):
    default_language: str
    languages: List[str]
    pages_by_language: Dict[str, List[str]]
    pages_by_group: Dict[str, List[str]]
