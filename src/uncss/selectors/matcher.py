"""Selector matcher: does a normalized selector match anything in a document?"""

from __future__ import annotations

from collections.abc import Sequence

import soupsieve

from uncss.errors import SelectorError
from uncss.model.document import Document

__all__ = ["SelectorMatcher", "compile_selector", "matches"]


def compile_selector(selector: str) -> soupsieve.SoupSieve:
    """Compile *selector* with soupsieve, raising :class:`SelectorError` on failure."""
    try:
        return soupsieve.compile(selector)
    except soupsieve.SelectorSyntaxError as exc:
        raise SelectorError(str(exc), selector=selector, cause=exc) from exc


def matches(document: Document, selector: str) -> bool:
    """Return True if at least one element of *document* matches *selector*."""
    return compile_selector(selector).select_one(document.soup) is not None


class SelectorMatcher:
    """Match selectors against a fixed set of documents, memoizing results.

    One instance serves one filter run. Compiled selectors and per-selector
    answers are cached, since the same selector commonly repeats across rules
    and media blocks.
    """

    def __init__(self, documents: Sequence[Document]) -> None:
        self._documents = tuple(documents)
        self._compiled: dict[str, soupsieve.SoupSieve] = {}
        self._results: dict[str, bool] = {}

    @property
    def documents(self) -> tuple[Document, ...]:
        return self._documents

    def matches_any(self, selector: str) -> bool:
        """Return True if *selector* matches in any document.

        Stops at the first document with a match. Raises
        :class:`SelectorError` if the selector cannot be compiled.
        """
        cached = self._results.get(selector)
        if cached is not None:
            return cached
        compiled = self._compile(selector)
        found = any(
            compiled.select_one(document.soup) is not None
            for document in self._documents
        )
        self._results[selector] = found
        return found

    def _compile(self, selector: str) -> soupsieve.SoupSieve:
        compiled = self._compiled.get(selector)
        if compiled is None:
            compiled = compile_selector(selector)
            self._compiled[selector] = compiled
        return compiled
