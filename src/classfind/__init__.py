"""Find class names and their exact positions in markup, scripts and stylesheets."""

from __future__ import annotations

from typing import TYPE_CHECKING

from classfind.classlist import tokenize_flat, tokenize_with_variants
from classfind.locator import (
    locate_helper_references,
    locate_markup_class_lists,
    locate_stylesheet_class_lists,
)
from classfind.positions import compose_range, offset_to_position
from classfind.tokens import ClassListSpan, ClassToken, HelperReference, Position, Range

if TYPE_CHECKING:
    from classfind.config import Settings

__version__ = "0.1.0"

__all__ = [
    "ClassListSpan",
    "ClassToken",
    "HelperReference",
    "Position",
    "Range",
    "compose_range",
    "find_class_names",
    "locate_helper_references",
    "locate_markup_class_lists",
    "locate_stylesheet_class_lists",
    "offset_to_position",
    "tokenize_flat",
    "tokenize_with_variants",
]


def find_class_names(
    source: str,
    language_id: str = "html",
    settings: Settings | None = None,
) -> list[ClassToken]:
    """Locate and tokenize every class list in a document."""
    from classfind.config import Settings
    from classfind.document import TextDocument
    from classfind.finder import find_class_lists_in_document, tokenize_class_lists

    settings = settings or Settings()
    doc = TextDocument("untitled:document", language_id, source)
    return tokenize_class_lists(find_class_lists_in_document(doc, settings), settings)
