"""Ignore-list evaluation: selectors the caller wants kept no matter what."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Union

__all__ = ["IgnoreEntry", "is_ignored", "parse_ignore_entry"]

IgnoreEntry = Union[str, re.Pattern[str]]

_REGEX_LITERAL = re.compile(r"^/(?P<body>.+)/(?P<flags>[imsx]*)$", re.DOTALL)
_FLAGS = {"i": re.IGNORECASE, "m": re.MULTILINE, "s": re.DOTALL, "x": re.VERBOSE}


def is_ignored(selector: str, ignore: Iterable[IgnoreEntry]) -> bool:
    """Return True if *selector* equals a literal entry or a pattern is found in it."""
    for entry in ignore:
        if isinstance(entry, str):
            if entry == selector:
                return True
        elif entry.search(selector):
            return True
    return False


def parse_ignore_entry(raw: str) -> IgnoreEntry:
    """Turn ``/regex/flags`` into a compiled pattern; return anything else unchanged."""
    match = _REGEX_LITERAL.match(raw)
    if match is None:
        return raw
    flags = 0
    for letter in match.group("flags"):
        flags |= _FLAGS[letter]
    return re.compile(match.group("body"), flags)
