"""URL helpers: slug generation and URL comparison keys."""

import re
import unicodedata
from urllib.parse import urlparse


def generate_slug(url: str, title: str = "") -> str:
    """Generate a clean slug from the URL path, falling back to the page title.

    The slug is lowercased, ASCII-only, and uses hyphens as separators.  Only
    the last path segment is used.
    """
    parsed = urlparse(url)
    path = parsed.path.strip("/")

    # Remove file extension from path segment
    path = re.sub(r"\.[^/]+$", "", path)

    segments = [s for s in path.split("/") if s]
    if segments:
        slug_base = segments[-1]
    elif title:
        slug_base = title
    else:
        slug_base = parsed.netloc

    # Normalise unicode, keep only ASCII
    slug = unicodedata.normalize("NFKD", slug_base)
    slug = slug.encode("ascii", "ignore").decode("ascii")

    slug = re.sub(r"[^a-z0-9]+", "-", slug.lower())
    slug = slug.strip("-")

    return slug or "index"


def url_key(url: str) -> str:
    """Comparison key for page URLs: no fragment, no trailing slash."""
    parsed = urlparse(url.strip())._replace(fragment="")
    return parsed.geturl().rstrip("/")
