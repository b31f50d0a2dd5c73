from uncss.selectors.matcher import SelectorMatcher, compile_selector, matches
from uncss.selectors.normalizer import normalize
from uncss.selectors.pseudo import PseudoKind, classify

__all__ = [
    "PseudoKind",
    "SelectorMatcher",
    "classify",
    "compile_selector",
    "matches",
    "normalize",
]
