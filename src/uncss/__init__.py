"""uncss: remove CSS rules that no document uses."""
from __future__ import annotations

__version__ = "0.1.0"

from uncss.config import UncssConfig
from uncss.css import CssParseError, parse_css, stringify_css
from uncss.errors import UncssError
from uncss.filter import FilterResult, RuleFilter, filter_rules
from uncss.model import Document
from uncss.runner import Uncss, uncss

__all__ = [
    "CssParseError",
    "Document",
    "FilterResult",
    "RuleFilter",
    "Uncss",
    "UncssConfig",
    "UncssError",
    "__version__",
    "filter_rules",
    "parse_css",
    "stringify_css",
    "uncss",
]
