"""Rule tree filter: prune a parsed stylesheet down to the rules documents use.

The filter works in two passes over the tree:

1. Style rules are decided selector by selector against the documents, and
   conditional groups are filtered recursively. Named at-rules are kept
   provisionally.
2. Names referenced by the surviving style rules (anywhere in the tree) decide
   which named at-rules stay; groups left empty by that sweep are dropped.

The input tree is never modified; every kept node is either the original
object or a copy made with :func:`dataclasses.replace`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field, replace

from uncss.errors import RuleTreeError, SelectorError
from uncss.filter.ignore import IgnoreEntry, is_ignored
from uncss.filter.references import (
    DEFAULT_REFERENCE_PROPERTIES,
    collect_referenced_names,
)
from uncss.model.diagnostic import Diagnostic, Severity
from uncss.model.document import Document
from uncss.model.rules import (
    ConditionalGroup,
    NamedAtRule,
    OpaqueRule,
    RuleNode,
    StyleRule,
    iter_style_rules,
)
from uncss.selectors.matcher import SelectorMatcher
from uncss.selectors.normalizer import normalize

__all__ = ["FilterResult", "RuleFilter", "filter_rules"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterResult:
    """Outcome of a filter run.

    Attributes:
        rules: The pruned rule tree, in original order.
        diagnostics: Fail-open decisions worth reporting.
        removed_selectors: Selectors and at-rule headers that were dropped,
            in the order they were decided.
    """

    rules: list[RuleNode]
    diagnostics: list[Diagnostic] = field(default_factory=list)
    removed_selectors: list[str] = field(default_factory=list)


class RuleFilter:
    """Decide which rules of a stylesheet are used by a set of documents.

    Instances only hold configuration; every :meth:`run` starts with fresh
    memo state, so one instance may serve several runs.
    """

    def __init__(
        self,
        documents: Sequence[Document],
        ignore: Iterable[IgnoreEntry] = (),
        reference_properties: Mapping[str, Iterable[str]] | None = None,
    ) -> None:
        self.documents = tuple(documents)
        self.ignore = tuple(ignore)
        if reference_properties is None:
            reference_properties = DEFAULT_REFERENCE_PROPERTIES
        self.reference_properties = {
            kind: frozenset(props) for kind, props in reference_properties.items()
        }

    def run(self, rules: Sequence[RuleNode]) -> FilterResult:
        """Filter *rules* and return the pruned tree with diagnostics."""
        run = _Run(self, SelectorMatcher(self.documents))
        provisional = run.filter_tree(rules)
        survivors = list(iter_style_rules(provisional))
        referenced = {
            kind: collect_referenced_names(survivors, props)
            for kind, props in self.reference_properties.items()
        }
        pruned = run.sweep_named(provisional, referenced)
        logger.debug(
            "Filtered %d top-level rules to %d (%d selectors removed)",
            len(rules),
            len(pruned),
            len(run.removed),
        )
        return FilterResult(
            rules=pruned,
            diagnostics=run.diagnostics,
            removed_selectors=run.removed,
        )


def filter_rules(
    documents: Sequence[Document],
    rules: Sequence[RuleNode],
    ignore: Iterable[IgnoreEntry] = (),
) -> list[RuleNode]:
    """Return the rules of *rules* used by at least one of *documents*."""
    return RuleFilter(documents, ignore).run(rules).rules


class _Run:
    """Mutable state of a single filter run."""

    def __init__(self, owner: RuleFilter, matcher: SelectorMatcher) -> None:
        self.owner = owner
        self.matcher = matcher
        self.diagnostics: list[Diagnostic] = []
        self.removed: list[str] = []

    # ---- phase 1 ---------------------------------------------------------

    def filter_tree(self, rules: Sequence[RuleNode]) -> list[RuleNode]:
        kept: list[RuleNode] = []
        for rule in rules:
            if isinstance(rule, StyleRule):
                filtered = self.filter_style_rule(rule)
                if filtered is not None:
                    kept.append(filtered)
            elif isinstance(rule, ConditionalGroup):
                nested = self.filter_tree(rule.rules)
                if nested:
                    kept.append(replace(rule, rules=tuple(nested)))
            elif isinstance(rule, (NamedAtRule, OpaqueRule)):
                kept.append(rule)
            else:
                raise RuleTreeError(
                    f"Unexpected node in rule tree: {type(rule).__name__}"
                )
        return kept

    def filter_style_rule(self, rule: StyleRule) -> StyleRule | None:
        if isinstance(rule.selectors, str) or not rule.selectors:
            raise RuleTreeError(
                f"Style rule has a malformed selector list: {rule.selectors!r}"
            )
        surviving = tuple(s for s in rule.selectors if self.selector_used(s))
        if not surviving:
            return None
        if len(surviving) == len(rule.selectors):
            return rule
        return replace(rule, selectors=surviving)

    def selector_used(self, selector: str) -> bool:
        if is_ignored(selector, self.owner.ignore):
            return True
        normalized = normalize(selector)
        if normalized is None:
            logger.debug("Keeping unparsable selector %r", selector)
            self.diagnostics.append(
                Diagnostic(
                    code="unparsable-selector",
                    severity=Severity.WARNING,
                    message="Selector could not be normalized; kept",
                    selector=selector,
                )
            )
            return True
        try:
            used = self.matcher.matches_any(normalized)
        except SelectorError as exc:
            logger.debug("Keeping unmatchable selector %r: %s", selector, exc)
            self.diagnostics.append(
                Diagnostic(
                    code="unmatchable-selector",
                    severity=Severity.WARNING,
                    message=f"Selector could not be matched ({exc}); kept",
                    selector=selector,
                )
            )
            return True
        if not used:
            self.removed.append(selector)
        return used

    # ---- phase 2 ---------------------------------------------------------

    def sweep_named(
        self, rules: Sequence[RuleNode], referenced: Mapping[str, set[str]]
    ) -> list[RuleNode]:
        kept: list[RuleNode] = []
        for rule in rules:
            if isinstance(rule, NamedAtRule):
                if self.named_rule_used(rule, referenced):
                    kept.append(rule)
            elif isinstance(rule, ConditionalGroup):
                nested = self.sweep_named(rule.rules, referenced)
                if nested:
                    kept.append(
                        rule if len(nested) == len(rule.rules)
                        else replace(rule, rules=tuple(nested))
                    )
            else:
                kept.append(rule)
        return kept

    def named_rule_used(
        self, rule: NamedAtRule, referenced: Mapping[str, set[str]]
    ) -> bool:
        ignore = self.owner.ignore
        if is_ignored(rule.header, ignore):
            return True
        if rule.name is None:
            self.diagnostics.append(
                Diagnostic(
                    code="unnamed-at-rule",
                    severity=Severity.INFO,
                    message="At-rule declares no name; kept",
                    selector=rule.header,
                )
            )
            return True
        if is_ignored(rule.name, ignore):
            return True
        names = referenced.get(rule.kind)
        if names is None or rule.name.casefold() in names:
            return True
        self.removed.append(rule.header)
        return False
