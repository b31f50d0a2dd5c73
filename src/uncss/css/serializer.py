"""CSS serializer: render a rule tree back to stylesheet text."""

from __future__ import annotations

from collections.abc import Sequence

import tinycss2

from uncss.model.rules import ConditionalGroup, NamedAtRule, OpaqueRule, RuleNode, StyleRule

__all__ = ["stringify_css"]


def stringify_css(rules: Sequence[RuleNode], indent: str = "  ") -> str:
    """Render *rules* as CSS text, one blank line between top-level rules.

    Declaration blocks are re-laid out one declaration per line, with nested
    rules (keyframe selectors, ``&:hover`` blocks) indented below them.
    Blocks tinycss2 cannot parse are written out as they were parsed.
    """
    if not rules:
        return ""
    return "\n\n".join(_render(rule, indent, 0) for rule in rules) + "\n"


def _render(rule: RuleNode, indent: str, depth: int) -> str:
    pad = indent * depth
    if isinstance(rule, StyleRule):
        head = (",\n" + pad).join(rule.selectors)
        return _block(pad + head, _body(rule.declarations, indent, depth + 1), pad)
    if isinstance(rule, ConditionalGroup):
        head = f"{pad}@{rule.keyword} {rule.condition}" if rule.condition else f"{pad}@{rule.keyword}"
        inner = "\n\n".join(_render(child, indent, depth + 1) for child in rule.rules)
        return _block(head, inner, pad)
    if isinstance(rule, NamedAtRule):
        return _block(pad + rule.header, _body(rule.body, indent, depth + 1), pad)
    if isinstance(rule, OpaqueRule):
        return pad + rule.text
    raise TypeError(f"Cannot serialize {type(rule).__name__}")


def _block(head: str, inner: str, pad: str) -> str:
    if not inner:
        return f"{head} {{}}"
    return f"{head} {{\n{inner}\n{pad}}}"


def _body(text: str, indent: str, depth: int) -> str:
    """Lay out a block body: declarations one per line, nested rules as blocks.

    Runs of declarations and nested rules are separated by a blank line.
    Bodies tinycss2 reports errors in are written out as they were parsed.
    """
    pad = indent * depth
    nodes = tinycss2.parse_blocks_contents(text, skip_comments=True, skip_whitespace=True)
    if any(node.type == "error" for node in nodes):
        return pad + text.strip()

    chunks: list[str] = []
    declarations: list[str] = []
    for node in nodes:
        if node.type == "declaration":
            declarations.append(pad + _declaration(node))
            continue
        if declarations:
            chunks.append("\n".join(declarations))
            declarations = []
        if node.type == "qualified-rule":
            head = pad + tinycss2.serialize(node.prelude).strip()
            chunks.append(_block(head, _body(tinycss2.serialize(node.content), indent, depth + 1), pad))
        else:
            chunks.append(pad + node.serialize().strip())
    if declarations:
        chunks.append("\n".join(declarations))
    return "\n\n".join(chunks)


def _declaration(node) -> str:
    value = tinycss2.serialize(node.value).strip()
    important = " !important" if node.important else ""
    return f"{node.name}: {value}{important};"
