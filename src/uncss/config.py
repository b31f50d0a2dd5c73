from __future__ import annotations

from dataclasses import dataclass

from uncss.filter.ignore import IgnoreEntry


@dataclass(frozen=True)
class UncssConfig:
    ignore: tuple[IgnoreEntry, ...] = ()
    stylesheets: tuple[str, ...] = ()  # empty: discover from <link> tags
    csspath: str = ""  # extra path between an HTML file and its stylesheet refs
    raw: str | None = None  # CSS appended after the stylesheets
    urls: tuple[str, ...] = ()  # extra pages merged into the input list
    timeout: float = 10.0  # seconds, for HTTP fetches
    html_parser: str = "html.parser"
