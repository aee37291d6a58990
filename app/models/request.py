from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field


class PageInput(BaseModel):
    """A page as handed over by the content pipeline, headers already parsed."""

    url: str = Field(min_length=1)
    title: str = ""
    date: Optional[str] = None
    raw_content: str = ""
    content: str = ""
    meta: Dict[str, Union[str, int, float, bool, None]] = Field(
        default_factory=dict,
        description="Parsed front-matter headers keyed by field name, e.g. {\"Language\": \"de\", \"pid\": \"home\"}.",
    )


class NavigationRequest(BaseModel):
    pages: List[PageInput] = Field(
        default_factory=list,
        max_length=5000,
        description="Every page of the site in discovery order.",
    )
    current_url: Optional[str] = None
    """URL of the page being served.

    When it matches no page (or is omitted) there is no language to filter to:
    the page list is returned unchanged and both neighbours are empty.
    """


class IndexRequest(BaseModel):
    pages: List[PageInput] = Field(default_factory=list, max_length=5000)
