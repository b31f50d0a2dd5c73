"""Rule tree model: the node types a parsed stylesheet is made of."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

VENDOR_PREFIXES = ("-webkit-", "-moz-", "-ms-", "-o-")


def strip_vendor_prefix(name: str) -> str:
    """Return *name* without a leading vendor prefix such as ``-webkit-``."""
    for prefix in VENDOR_PREFIXES:
        if name.startswith(prefix):
            return name[len(prefix):]
    return name


@dataclass(frozen=True)
class StyleRule:
    """An ordinary rule: a selector list sharing one declaration block.

    ``selectors`` holds the comma-separated selectors exactly as written.
    ``declarations`` is the text between the braces, passed through untouched.
    """

    selectors: tuple[str, ...]
    declarations: str


@dataclass(frozen=True)
class ConditionalGroup:
    """A grouping at-rule such as ``@media`` or ``@supports``."""

    keyword: str  # "media", "supports", ...
    condition: str  # prelude text, never rewritten
    rules: tuple[RuleNode, ...]


@dataclass(frozen=True)
class NamedAtRule:
    """An at-rule kept or dropped as a unit depending on name references.

    Attributes:
        keyword: The at-keyword without ``@`` (``keyframes``, ``-webkit-keyframes``,
            ``font-face``, ``counter-style``).
        prelude: Text between the keyword and the block.
        name: Declared identifier, or None when it cannot be determined.
        body: Block contents, passed through untouched.
    """

    keyword: str
    prelude: str
    name: str | None
    body: str

    @property
    def kind(self) -> str:
        return strip_vendor_prefix(self.keyword.lower())

    @property
    def header(self) -> str:
        if self.prelude:
            return f"@{self.keyword} {self.prelude}"
        return f"@{self.keyword}"


@dataclass(frozen=True)
class OpaqueRule:
    """Any other at-rule (``@charset``, ``@import``, ``@page``...), always kept."""

    text: str


RuleNode = Union[StyleRule, ConditionalGroup, NamedAtRule, OpaqueRule]


def iter_style_rules(rules: tuple[RuleNode, ...] | list[RuleNode]):
    """Yield every StyleRule in *rules*, descending into conditional groups."""
    for rule in rules:
        if isinstance(rule, StyleRule):
            yield rule
        elif isinstance(rule, ConditionalGroup):
            yield from iter_style_rules(rule.rules)
