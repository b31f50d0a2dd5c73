"""Stylesheet discovery: find, resolve, de-duplicate and read linked stylesheets."""

from __future__ import annotations

import logging
import os.path
from collections.abc import Iterable
from pathlib import Path
from urllib.parse import urljoin

import httpx

from uncss.errors import StylesheetLoadError
from uncss.html.loader import DEFAULT_TIMEOUT, fetch_text, is_url
from uncss.model.document import Document

__all__ = [
    "extract_stylesheet_references",
    "read_stylesheet",
    "resolve_reference",
    "unique_last",
]

logger = logging.getLogger(__name__)


def extract_stylesheet_references(document: Document) -> list[str]:
    """Return the ``href`` of every ``<link rel="stylesheet">`` in document order."""
    return [
        link["href"]
        for link in document.soup.select('link[rel~="stylesheet" i][href]')
    ]


def resolve_reference(base: str, ref: str, csspath: str = "") -> str:
    """Resolve stylesheet reference *ref* found in the document at *base*.

    Absolute URLs are returned unchanged. Against an http(s) base, ``/x.css``
    resolves to the base's host and ``x.css`` to the base's directory. Against
    a file base, *ref* is joined to the file's directory and *csspath*.
    """
    if is_url(ref):
        return ref
    if is_url(base):
        return urljoin(base, ref)
    return os.path.normpath(
        os.path.join(os.path.dirname(base), csspath, ref.lstrip("/"))
    )


def unique_last(locations: Iterable[str]) -> list[str]:
    """Drop duplicates, keeping each location at the position of its last occurrence."""
    items = list(locations)
    return [loc for i, loc in enumerate(items) if loc not in items[i + 1:]]


def read_stylesheet(
    location: str, timeout: float = DEFAULT_TIMEOUT, client: httpx.Client | None = None
) -> str:
    """Return the text of the stylesheet at *location* (URL or file path)."""
    if is_url(location):
        try:
            text = fetch_text(location, timeout=timeout, client=client)
        except httpx.HTTPError as exc:
            raise StylesheetLoadError(
                f"Could not fetch {location}: {exc}", location=location, cause=exc
            ) from exc
    else:
        try:
            text = Path(location).read_text(encoding="utf-8")
        except OSError as exc:
            raise StylesheetLoadError(
                f"Could not read {location}: {exc}", location=location, cause=exc
            ) from exc
    logger.info("Read stylesheet %s (%d bytes)", location, len(text))
    return text
