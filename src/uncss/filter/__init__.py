from uncss.filter.ignore import IgnoreEntry, is_ignored, parse_ignore_entry
from uncss.filter.references import (
    DEFAULT_REFERENCE_PROPERTIES,
    collect_referenced_names,
)
from uncss.filter.rule_filter import FilterResult, RuleFilter, filter_rules

__all__ = [
    "DEFAULT_REFERENCE_PROPERTIES",
    "FilterResult",
    "IgnoreEntry",
    "RuleFilter",
    "collect_referenced_names",
    "filter_rules",
    "is_ignored",
    "parse_ignore_entry",
]
