from uncss.model.diagnostic import Diagnostic, Severity
from uncss.model.document import Document
from uncss.model.rules import (
    ConditionalGroup,
    NamedAtRule,
    OpaqueRule,
    RuleNode,
    StyleRule,
    iter_style_rules,
    strip_vendor_prefix,
)

__all__ = [
    "ConditionalGroup",
    "Diagnostic",
    "Document",
    "NamedAtRule",
    "OpaqueRule",
    "RuleNode",
    "Severity",
    "StyleRule",
    "iter_style_rules",
    "strip_vendor_prefix",
]
