import logging
import logging.config

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.config import get_settings, resolve_default_language
from app.routers.navigate import limiter, router as navigate_router

settings = get_settings()

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
            },
        },
        "root": {"level": settings.LOG_LEVEL, "handlers": ["console"]},
    }
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Polyglot Pages – Multi-language Navigation API",
    description=(
        "Groups content pages by language and translation id, and returns "
        "same-language previous/next navigation plus language-switcher data."
    ),
    version="0.2.0",
)

# Resolved once; every request builds its own index from this value
app.state.default_language = resolve_default_language(settings)
logger.info("Default language: %s", app.state.default_language)

# Rate-limiting state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})


app.include_router(navigate_router)


@app.get("/", summary="Health check")
async def root() -> dict:
    return {"message": "Hello from Polyglot Pages"}
