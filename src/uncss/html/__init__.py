from uncss.html.loader import load_document
from uncss.html.stylesheets import (
    extract_stylesheet_references,
    read_stylesheet,
    resolve_reference,
    unique_last,
)

__all__ = [
    "extract_stylesheet_references",
    "load_document",
    "read_stylesheet",
    "resolve_reference",
    "unique_last",
]
