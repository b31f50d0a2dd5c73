"""Document model: a parsed HTML page the filter matches selectors against."""

from __future__ import annotations

from dataclasses import dataclass

from bs4 import BeautifulSoup


@dataclass(frozen=True, eq=False)
class Document:
    """A parsed HTML tree together with the location it was loaded from.

    The filter only ever reads ``soup``; callers should not mutate it while a
    filter run is in progress.
    """

    source: str
    soup: BeautifulSoup

    @classmethod
    def from_html(
        cls, html: str, source: str = "<string>", parser: str = "html.parser"
    ) -> Document:
        return cls(source=source, soup=BeautifulSoup(html, parser))

    def __repr__(self) -> str:
        return f"Document(source={self.source!r})"
