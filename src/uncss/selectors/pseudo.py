"""Pseudo-class and pseudo-element classification table."""

from __future__ import annotations

from enum import Enum

from uncss.model.rules import VENDOR_PREFIXES


class PseudoKind(Enum):
    """How the normalizer treats a pseudo token.

    ALWAYS_MATCH_BASE: a transient state; removed, the base selector is matched.
    STRUCTURAL: evaluable against a static tree; kept for the matcher.
    PSEUDO_ELEMENT: has no node of its own; removed.
    LOGICAL: takes a selector list argument that is normalized recursively.
    UNKNOWN: not understood; the whole selector is kept as-is.
    """

    ALWAYS_MATCH_BASE = "always-match-base"
    STRUCTURAL = "structural-evaluable"
    PSEUDO_ELEMENT = "pseudo-element-strip"
    LOGICAL = "logical"
    UNKNOWN = "unknown"


PSEUDO_TABLE: dict[str, PseudoKind] = {
    # links
    "link": PseudoKind.ALWAYS_MATCH_BASE,
    "visited": PseudoKind.ALWAYS_MATCH_BASE,
    "any-link": PseudoKind.ALWAYS_MATCH_BASE,
    "local-link": PseudoKind.ALWAYS_MATCH_BASE,
    "target": PseudoKind.ALWAYS_MATCH_BASE,
    "target-within": PseudoKind.ALWAYS_MATCH_BASE,
    # user action
    "hover": PseudoKind.ALWAYS_MATCH_BASE,
    "active": PseudoKind.ALWAYS_MATCH_BASE,
    "focus": PseudoKind.ALWAYS_MATCH_BASE,
    "focus-within": PseudoKind.ALWAYS_MATCH_BASE,
    "focus-visible": PseudoKind.ALWAYS_MATCH_BASE,
    # ui element states
    "enabled": PseudoKind.ALWAYS_MATCH_BASE,
    "disabled": PseudoKind.ALWAYS_MATCH_BASE,
    "checked": PseudoKind.ALWAYS_MATCH_BASE,
    "indeterminate": PseudoKind.ALWAYS_MATCH_BASE,
    "default": PseudoKind.ALWAYS_MATCH_BASE,
    "valid": PseudoKind.ALWAYS_MATCH_BASE,
    "invalid": PseudoKind.ALWAYS_MATCH_BASE,
    "user-valid": PseudoKind.ALWAYS_MATCH_BASE,
    "user-invalid": PseudoKind.ALWAYS_MATCH_BASE,
    "in-range": PseudoKind.ALWAYS_MATCH_BASE,
    "out-of-range": PseudoKind.ALWAYS_MATCH_BASE,
    "required": PseudoKind.ALWAYS_MATCH_BASE,
    "optional": PseudoKind.ALWAYS_MATCH_BASE,
    "read-only": PseudoKind.ALWAYS_MATCH_BASE,
    "read-write": PseudoKind.ALWAYS_MATCH_BASE,
    "placeholder-shown": PseudoKind.ALWAYS_MATCH_BASE,
    "autofill": PseudoKind.ALWAYS_MATCH_BASE,
    "fullscreen": PseudoKind.ALWAYS_MATCH_BASE,
    "modal": PseudoKind.ALWAYS_MATCH_BASE,
    "popover-open": PseudoKind.ALWAYS_MATCH_BASE,
    "playing": PseudoKind.ALWAYS_MATCH_BASE,
    "paused": PseudoKind.ALWAYS_MATCH_BASE,
    # legacy single-colon pseudo-elements
    "before": PseudoKind.PSEUDO_ELEMENT,
    "after": PseudoKind.PSEUDO_ELEMENT,
    "first-line": PseudoKind.PSEUDO_ELEMENT,
    "first-letter": PseudoKind.PSEUDO_ELEMENT,
    "selection": PseudoKind.PSEUDO_ELEMENT,
    "placeholder": PseudoKind.PSEUDO_ELEMENT,
    "marker": PseudoKind.PSEUDO_ELEMENT,
    "backdrop": PseudoKind.PSEUDO_ELEMENT,
    # structural
    "root": PseudoKind.STRUCTURAL,
    "empty": PseudoKind.STRUCTURAL,
    "first-child": PseudoKind.STRUCTURAL,
    "last-child": PseudoKind.STRUCTURAL,
    "only-child": PseudoKind.STRUCTURAL,
    "first-of-type": PseudoKind.STRUCTURAL,
    "last-of-type": PseudoKind.STRUCTURAL,
    "only-of-type": PseudoKind.STRUCTURAL,
    "nth-child": PseudoKind.STRUCTURAL,
    "nth-last-child": PseudoKind.STRUCTURAL,
    "nth-of-type": PseudoKind.STRUCTURAL,
    "nth-last-of-type": PseudoKind.STRUCTURAL,
    "lang": PseudoKind.STRUCTURAL,
    "dir": PseudoKind.STRUCTURAL,
    # selector-list arguments
    "not": PseudoKind.LOGICAL,
    "is": PseudoKind.LOGICAL,
    "where": PseudoKind.LOGICAL,
    "matches": PseudoKind.LOGICAL,
    "any": PseudoKind.LOGICAL,
    "has": PseudoKind.LOGICAL,
}

# Pseudo tokens that only make sense with a parenthesized argument.
FUNCTIONAL = frozenset(
    {
        "nth-child",
        "nth-last-child",
        "nth-of-type",
        "nth-last-of-type",
        "lang",
        "dir",
        "not",
        "is",
        "where",
        "matches",
        "any",
        "has",
    }
)


def classify(name: str, functional: bool = False) -> PseudoKind:
    """Classify the pseudo token *name* (without colons).

    Vendor-prefixed pseudo-classes are browser state hooks and are treated as
    ALWAYS_MATCH_BASE. A name used with the wrong call form (``:hover()`` or a
    bare ``:nth-child``) is UNKNOWN.
    """
    name = name.lower()
    if name.startswith(VENDOR_PREFIXES):
        return PseudoKind.ALWAYS_MATCH_BASE
    kind = PSEUDO_TABLE.get(name, PseudoKind.UNKNOWN)
    if kind is not PseudoKind.UNKNOWN and (name in FUNCTIONAL) != functional:
        return PseudoKind.UNKNOWN
    return kind
