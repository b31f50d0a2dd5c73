"""Name-reference tracking for at-rules that are used by name, not by the DOM.

A ``@keyframes`` block is needed only if a surviving rule names it in
``animation``/``animation-name``; a ``@font-face`` only if a surviving rule
names its family in ``font``/``font-family``.
"""

from __future__ import annotations

from collections.abc import Iterable

import tinycss2

from uncss.model.rules import StyleRule, strip_vendor_prefix

__all__ = ["DEFAULT_REFERENCE_PROPERTIES", "collect_referenced_names", "value_names"]

# Named at-rule kind -> properties whose values reference it.
DEFAULT_REFERENCE_PROPERTIES: dict[str, frozenset[str]] = {
    "keyframes": frozenset({"animation", "animation-name"}),
    "font-face": frozenset({"font", "font-family"}),
    "counter-style": frozenset({"list-style", "list-style-type"}),
}


def collect_referenced_names(
    style_rules: Iterable[StyleRule], property_names: Iterable[str]
) -> set[str]:
    """Return the case-folded identifiers referenced under *property_names*.

    Custom property (``--*``) values are always scanned too, since a
    referencing property may reach its name through ``var()``.
    """
    wanted = {name.lower() for name in property_names}
    names: set[str] = set()
    for rule in style_rules:
        declarations = tinycss2.parse_blocks_contents(
            rule.declarations, skip_comments=True, skip_whitespace=True
        )
        for declaration in declarations:
            if declaration.type != "declaration":
                continue
            prop = declaration.lower_name
            if prop.startswith("--") or strip_vendor_prefix(prop) in wanted:
                names.update(value_names(declaration.value))
    return names


def value_names(tokens: list) -> set[str]:
    """Extract candidate names from a declaration value.

    Each comma-separated part contributes its identifiers and strings, plus
    every run of adjacent identifiers joined by single spaces.
    """
    names: set[str] = set()
    run: list[str] = []

    def flush() -> None:
        if len(run) > 1:
            names.add(" ".join(run))
        run.clear()

    for token in tokens:
        if token.type == "ident":
            run.append(token.value.casefold())
            names.add(token.value.casefold())
        elif token.type == "string":
            flush()
            names.add(token.value.strip().casefold())
        elif token.type in ("whitespace", "comment"):
            continue
        else:
            flush()
    flush()
    names.discard("")
    return names
