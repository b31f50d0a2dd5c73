"""CSS parser: turn stylesheet text into the rule tree model using tinycss2.

Mapping of tinycss2 nodes to rule nodes:
    qualified rule                            -> StyleRule
    @media, @supports, @container, ...        -> ConditionalGroup (recursive)
    @keyframes, @font-face, @counter-style    -> NamedAtRule
    every other at-rule                       -> OpaqueRule

Selectors are sliced out of the source exactly as written, so quoting and
escapes survive. Comments between rules and around selectors are dropped.
"""

from __future__ import annotations

import re

import tinycss2

from uncss.css.errors import CssParseError
from uncss.model.rules import (
    ConditionalGroup,
    NamedAtRule,
    OpaqueRule,
    RuleNode,
    StyleRule,
    strip_vendor_prefix,
)

__all__ = ["GROUP_KEYWORDS", "NAMED_KINDS", "parse_css", "split_selector_list"]

GROUP_KEYWORDS = frozenset(
    {
        "media",
        "supports",
        "container",
        "layer",
        "document",
        "-moz-document",
        "scope",
        "starting-style",
    }
)

NAMED_KINDS = frozenset({"keyframes", "font-face", "counter-style"})

_COMMENT = r"/\*[^*]*\*+(?:[^/*][^*]*\*+)*/"
_EDGE_COMMENTS = re.compile(rf"^(?:\s|{_COMMENT})+|(?:\s|{_COMMENT})+$")


class _SourceMap:
    """Character offsets of tokens in the text tinycss2 tokenized.

    tinycss2 keeps only the *content* of a rule's ``{}`` block, so blocks are
    indexed by the identity of their content list to find where each rule's
    prelude ends.
    """

    def __init__(self, text: str, tokens: list) -> None:
        self.text = text
        self._line_starts = [0]
        self._line_starts.extend(i + 1 for i, char in enumerate(text) if char == "\n")
        self._blocks: dict[int, object] = {}
        self._index(tokens)

    def _index(self, tokens: list) -> None:
        for token in tokens:
            if token.type == "{} block":
                self._blocks[id(token.content)] = token
                self._index(token.content)

    def offset(self, node) -> int:
        return self._line_starts[node.source_line - 1] + node.source_column - 1

    def block_offset(self, content: list) -> int:
        return self.offset(self._blocks[id(content)])


def parse_css(source: str) -> list[RuleNode]:
    """Parse *source* into a list of rule nodes in source order.

    Raises :class:`CssParseError` when tinycss2 reports a parse error or a
    rule has an empty selector list.
    """
    # Same newline handling as the tokenizer, so line/column map onto text.
    text = (
        source.replace("\0", "\ufffd")
        .replace("\r\n", "\n")
        .replace("\r", "\n")
        .replace("\f", "\n")
    )
    tokens = tinycss2.parse_component_value_list(text, skip_comments=True)
    nodes = tinycss2.parse_stylesheet(tokens, skip_comments=True, skip_whitespace=True)
    return _convert(nodes, _SourceMap(text, tokens))


def _convert(nodes: list, source: _SourceMap) -> list[RuleNode]:
    rules: list[RuleNode] = []
    for node in nodes:
        if node.type == "error":
            raise CssParseError(node.message, node.source_line, node.source_column)
        if node.type == "qualified-rule":
            rules.append(_style_rule(node, source))
        elif node.type == "at-rule":
            rules.append(_at_rule(node, source))
    return rules


def _style_rule(node, source: _SourceMap) -> StyleRule:
    groups = split_selector_list(node.prelude)
    if any(all(t.type == "whitespace" for t in group) for group in groups):
        raise CssParseError(
            "Empty selector in selector list", node.source_line, node.source_column
        )
    return StyleRule(
        selectors=_selector_texts(node, source),
        declarations=tinycss2.serialize(node.content).strip(),
    )


def _selector_texts(node, source: _SourceMap) -> tuple[str, ...]:
    commas = [
        source.offset(t) for t in node.prelude if t.type == "literal" and t.value == ","
    ]
    starts = [source.offset(node)] + [comma + 1 for comma in commas]
    ends = commas + [source.block_offset(node.content)]
    return tuple(
        _EDGE_COMMENTS.sub("", source.text[start:end]) for start, end in zip(starts, ends)
    )


def _at_rule(node, source: _SourceMap) -> RuleNode:
    keyword = node.lower_at_keyword
    prelude = tinycss2.serialize(node.prelude).strip()
    if node.content is None:
        return OpaqueRule(text=node.serialize().strip())

    if keyword in GROUP_KEYWORDS:
        nested = tinycss2.parse_rule_list(
            node.content, skip_comments=True, skip_whitespace=True
        )
        return ConditionalGroup(
            keyword=node.at_keyword,
            condition=prelude,
            rules=tuple(_convert(nested, source)),
        )

    kind = strip_vendor_prefix(keyword)
    if kind in NAMED_KINDS:
        return NamedAtRule(
            keyword=node.at_keyword,
            prelude=prelude,
            name=_declared_name(kind, node.prelude, node.content),
            body=tinycss2.serialize(node.content).strip(),
        )

    return OpaqueRule(text=node.serialize().strip())


def split_selector_list(prelude: list) -> list[list]:
    """Split a rule prelude on its top-level commas."""
    groups: list[list] = [[]]
    for token in prelude:
        if token.type == "literal" and token.value == ",":
            groups.append([])
        else:
            groups[-1].append(token)
    return groups


def _declared_name(kind: str, prelude: list, content: list) -> str | None:
    """Return the name a named at-rule declares, or None if there is none."""
    if kind == "font-face":
        declarations = tinycss2.parse_blocks_contents(
            content, skip_comments=True, skip_whitespace=True
        )
        for declaration in declarations:
            if declaration.type == "declaration" and declaration.lower_name == "font-family":
                return _single_name(declaration.value)
        return None
    return _single_name(prelude)


def _single_name(tokens: list) -> str | None:
    significant = [t for t in tokens if t.type not in ("whitespace", "comment")]
    if len(significant) == 1 and significant[0].type == "string":
        return significant[0].value.strip() or None
    if significant and all(t.type == "ident" for t in significant):
        return " ".join(t.value for t in significant)
    return None
