"""Selector normalizer: rewrite a selector so it can be tested against a static tree.

Pseudo-elements and transient pseudo-classes have no counterpart in a parsed
document, so they are removed and the element they decorate becomes the match
target::

    a:hover            -> a
    .menu li::before   -> .menu li
    nav > :focus       -> nav > *
    ul li:first-child  -> ul li:first-child   (kept for the matcher)

Anything the table in :mod:`uncss.selectors.pseudo` does not know makes the
whole selector unnormalizable, and :func:`normalize` returns ``None``.
"""

from __future__ import annotations

import logging

import tinycss2

from uncss.selectors.pseudo import PseudoKind, classify

__all__ = ["normalize"]

logger = logging.getLogger(__name__)

_COMBINATORS = frozenset({">", "+", "~"})
_STRIPPED = (PseudoKind.ALWAYS_MATCH_BASE, PseudoKind.PSEUDO_ELEMENT)


class _Unnormalizable(Exception):
    """Raised internally when a token sequence cannot be rewritten."""


def normalize(selector: str) -> str | None:
    """Return the matchable form of *selector*, or None if it cannot be produced."""
    tokens = tinycss2.parse_component_value_list(selector)
    try:
        text, _ = _normalize_chain(tokens)
    except _Unnormalizable as exc:
        logger.debug("Cannot normalize selector %r: %s", selector, exc)
        return None
    return text or None


def _normalize_chain(tokens: list) -> tuple[str, bool]:
    """Normalize one complex selector; return its text and whether it changed."""
    parts: list[str] = []
    changed = False
    at_boundary = True  # next token starts a new compound selector
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token.type == "error":
            raise _Unnormalizable(token.message)
        if token.type == "comment":
            i += 1
            continue
        if token.type == "whitespace":
            if parts and parts[-1] != " ":
                parts.append(" ")
            at_boundary = True
            i += 1
            continue
        if token.type == "literal" and token.value == ",":
            raise _Unnormalizable("unexpected ',' inside a single selector")
        if _namespaced(token):
            raise _Unnormalizable("namespace prefixes cannot be matched")
        if token.type == "literal" and token.value == ":":
            consumed, text, stripped = _pseudo(tokens, i)
            changed = changed or stripped
            if text is not None:
                parts.append(text)
                at_boundary = False
            elif at_boundary:
                parts.append("*")
                at_boundary = False
            i += consumed
            continue
        parts.append(token.serialize())
        at_boundary = token.type == "literal" and token.value in _COMBINATORS
        i += 1
    return "".join(parts).strip(), changed


def _pseudo(tokens: list, i: int) -> tuple[int, str | None, bool]:
    """Handle the pseudo token whose first ':' sits at *tokens[i]*.

    Returns (tokens consumed, replacement text or None when removed, changed).
    """
    nxt = tokens[i + 1] if i + 1 < len(tokens) else None
    if nxt is None:
        raise _Unnormalizable("dangling ':'")

    if nxt.type == "literal" and nxt.value == ":":
        target = tokens[i + 2] if i + 2 < len(tokens) else None
        if target is None or target.type not in ("ident", "function"):
            raise _Unnormalizable("malformed pseudo-element")
        return 3, None, True

    if nxt.type == "ident":
        kind = classify(nxt.value)
        if kind in _STRIPPED:
            return 2, None, True
        if kind is PseudoKind.STRUCTURAL:
            return 2, ":" + nxt.serialize(), False
        raise _Unnormalizable(f"unsupported pseudo-class :{nxt.value}")

    if nxt.type == "function":
        kind = classify(nxt.name, functional=True)
        if kind in _STRIPPED:
            return 2, None, True
        if kind is PseudoKind.STRUCTURAL:
            return 2, ":" + nxt.serialize(), False
        if kind is PseudoKind.LOGICAL:
            text, changed = _logical(nxt)
            return 2, text, changed
        raise _Unnormalizable(f"unsupported pseudo-class :{nxt.name}()")

    raise _Unnormalizable("malformed pseudo-class")


def _logical(function) -> tuple[str | None, bool]:
    """Normalize the selector-list argument of :not/:is/:where/:has."""
    if function.lower_name == "not":
        # Dropping a negation only widens the match, so any argument that
        # needs rewriting removes the whole :not().
        try:
            pieces = [_normalize_chain(p) for p in _split_commas(function.arguments)]
        except _Unnormalizable:
            return None, True
        if any(changed or not text for text, changed in pieces):
            return None, True
        return ":" + function.serialize(), False

    pieces = [_normalize_chain(p) for p in _split_commas(function.arguments)]
    if any(not text for text, _ in pieces):
        raise _Unnormalizable(f"empty argument in :{function.name}()")
    text = ", ".join(text for text, _ in pieces)
    return f":{function.name}({text})", any(changed for _, changed in pieces)


def _namespaced(token) -> bool:
    """True for ``ns|el``, ``*|*``, ``[ns|attr]`` and the ``||`` combinator.

    Documents are matched without the stylesheet's ``@namespace`` map.
    """
    if token.type == "literal":
        return token.value in ("|", "||")
    if token.type == "[] block":
        return any(t.type == "literal" and t.value in ("|", "||") for t in token.content)
    return False


def _split_commas(tokens: list) -> list[list]:
    groups: list[list] = [[]]
    for token in tokens:
        if token.type == "literal" and token.value == ",":
            groups.append([])
        else:
            groups[-1].append(token)
    return groups
