import logging

from fastapi import APIRouter, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.models.request import IndexRequest, NavigationRequest
from app.models.response import IndexResponse, NavigationResponse
from app.services.pipeline import build_index, build_navigation

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()


@router.post(
    "/navigate",
    response_model=NavigationResponse,
    summary="Same-language navigation and language switcher for one page",
    description=(
        "Indexes *pages* by their `Language` and `pid` headers, keeps only the "
        "pages sharing the language of `current_url`, and returns the "
        "recomputed previous/next pages together with the `languages` and "
        "`page_languages` template variables.\n\n"
        "**Note:** `previous` is the page *after* the current one in list "
        "order and `next` the page *before* it."
    ),
)
@limiter.limit("30/minute")
async def navigate(request: Request, body: NavigationRequest) -> NavigationResponse:
    logger.info(
        "Navigation request received",
        extra={"current_url": body.current_url, "pages": len(body.pages)},
    )

    result = build_navigation(body.pages, body.current_url, request.app.state.default_language)

    return NavigationResponse(
        current_url=result.current.url if result.current else None,
        pages=result.pages,
        previous=result.previous,
        next=result.next,
        languages=result.languages,
        page_languages=result.page_languages,
    )


@router.post(
    "/index",
    response_model=IndexResponse,
    summary="Group pages by language and by cross-language id",
)
@limiter.limit("30/minute")
async def index_pages(request: Request, body: IndexRequest) -> IndexResponse:
    logger.info("Index request received", extra={"pages": len(body.pages)})

    indexer = build_index(body.pages, request.app.state.default_language)

    return IndexResponse(
        default_language=indexer.default_language,
        languages=indexer.languages(),
        pages_by_language={
            lang: [p.url for p in pages] for lang, pages in indexer.pages_by_language.items()
        },
        pages_by_group={
            group_id: [p.url for p in pages] for group_id, pages in indexer.pages_by_group.items()
        },
    )
