"""Document loading: local files, URLs fetched over HTTP, or raw HTML strings.

Pages are parsed as delivered. Scripts are not executed, so callers that need
script-generated markup must render it first and pass the resulting HTML in.
"""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from uncss.errors import DocumentLoadError
from uncss.model.document import Document

__all__ = ["fetch_text", "is_url", "load_document", "looks_like_html"]

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def looks_like_html(source: str) -> bool:
    return source.lstrip().startswith("<")


def fetch_text(
    url: str, timeout: float = DEFAULT_TIMEOUT, client: httpx.Client | None = None
) -> str:
    """GET *url* and return the body text.

    Raises :class:`httpx.HTTPError` on transport failures and non-2xx statuses.
    """
    owned = client is None
    if client is None:
        client = httpx.Client(follow_redirects=True)
    try:
        response = client.get(url, timeout=timeout)
        response.raise_for_status()
        return response.text
    finally:
        if owned:
            client.close()


def load_document(
    source: str,
    timeout: float = DEFAULT_TIMEOUT,
    client: httpx.Client | None = None,
    parser: str = "html.parser",
) -> Document:
    """Load *source* (a URL, an HTML string, or a file path) into a Document."""
    if looks_like_html(source):
        return Document.from_html(source, parser=parser)

    if is_url(source):
        try:
            html = fetch_text(source, timeout=timeout, client=client)
        except httpx.HTTPError as exc:
            raise DocumentLoadError(
                f"Could not fetch {source}: {exc}", source=source, cause=exc
            ) from exc
    else:
        try:
            html = Path(source).read_text(encoding="utf-8")
        except OSError as exc:
            raise DocumentLoadError(
                f"Could not read {source}: {exc}", source=source, cause=exc
            ) from exc

    logger.info("Loaded document %s (%d bytes)", source, len(html))
    return Document.from_html(html, source=source, parser=parser)
