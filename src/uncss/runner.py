"""Top-level sequencing: HTML sources in, pruned CSS text out."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import httpx

from uncss.config import UncssConfig
from uncss.css.parser import parse_css
from uncss.css.serializer import stringify_css
from uncss.filter.rule_filter import FilterResult, RuleFilter
from uncss.html.loader import load_document
from uncss.html.stylesheets import (
    extract_stylesheet_references,
    read_stylesheet,
    resolve_reference,
    unique_last,
)
from uncss.model.document import Document

logger = logging.getLogger(__name__)


class Uncss:
    """Load pages and stylesheets, filter the rules, and render the result.

    Steps:
        1. Load every source (file path, URL, or HTML string) into a Document.
        2. Use ``config.stylesheets`` or discover ``<link>``-ed stylesheets,
           resolved against each page and de-duplicated.
        3. Read the stylesheets and append ``config.raw``.
        4. Parse, filter, and serialize.
    """

    def __init__(
        self, config: UncssConfig | None = None, client: httpx.Client | None = None
    ) -> None:
        self.config = config or UncssConfig()
        self._client = client

    def process(self, sources: str | Sequence[str]) -> str:
        """Return the pruned CSS for *sources*, or "" if there is no CSS at all."""
        result = self.analyze(sources)
        if result is None:
            return ""
        return stringify_css(result.rules)

    def analyze(self, sources: str | Sequence[str]) -> FilterResult | None:
        """Run the pipeline and return the filter result (None when there is no CSS)."""
        documents = self.load_documents(sources)
        css = self.collect_css(documents)
        if not css.strip():
            logger.info("No stylesheets found; nothing to filter")
            return None
        rules = parse_css(css)
        result = RuleFilter(documents, self.config.ignore).run(rules)
        logger.info(
            "Removed %d selectors using %d document(s)",
            len(result.removed_selectors),
            len(documents),
        )
        return result

    def load_documents(self, sources: str | Sequence[str]) -> list[Document]:
        if isinstance(sources, str):
            sources = [sources]
        merged = list(sources) + [u for u in self.config.urls if u not in sources]
        return [
            load_document(
                source,
                timeout=self.config.timeout,
                client=self._client,
                parser=self.config.html_parser,
            )
            for source in merged
        ]

    def stylesheet_locations(self, documents: Sequence[Document]) -> list[str]:
        if self.config.stylesheets:
            return list(self.config.stylesheets)
        locations = [
            resolve_reference(document.source, ref, self.config.csspath)
            for document in documents
            for ref in extract_stylesheet_references(document)
        ]
        return unique_last(locations)

    def collect_css(self, documents: Sequence[Document]) -> str:
        sheets = [
            read_stylesheet(location, timeout=self.config.timeout, client=self._client)
            for location in self.stylesheet_locations(documents)
        ]
        if self.config.raw:
            sheets.append(self.config.raw)
        return " \n".join(sheets)


def uncss(sources: str | Sequence[str], config: UncssConfig | None = None) -> str:
    """Convenience wrapper around :meth:`Uncss.process`."""
    return Uncss(config).process(sources)
