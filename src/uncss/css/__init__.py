from uncss.css.errors import CssParseError
from uncss.css.parser import parse_css
from uncss.css.serializer import stringify_css

__all__ = ["CssParseError", "parse_css", "stringify_css"]
