"""Error hierarchy for uncss."""
from __future__ import annotations


class UncssError(Exception):
    """Base error for all uncss errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class RuleTreeError(UncssError):
    """The rule tree handed to the filter contains a node of unexpected shape."""


class DocumentLoadError(UncssError):
    """An HTML document could not be read or fetched."""

    def __init__(
        self, message: str, *, source: str = "", cause: Exception | None = None
    ) -> None:
        super().__init__(message, cause=cause)
        self.source = source


class StylesheetLoadError(UncssError):
    """A stylesheet could not be read or fetched."""

    def __init__(
        self, message: str, *, location: str = "", cause: Exception | None = None
    ) -> None:
        super().__init__(message, cause=cause)
        self.location = location


class SelectorError(UncssError):
    """A selector could not be compiled by the matching engine."""

    def __init__(
        self, message: str, *, selector: str = "", cause: Exception | None = None
    ) -> None:
        super().__init__(message, cause=cause)
        self.selector = selector
