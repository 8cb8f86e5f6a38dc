"""Document-level extraction: boundaries -> locators -> tokenizers."""

from __future__ import annotations

from classfind.boundaries import get_language_boundaries
from classfind.classlist import tokenize_flat, tokenize_with_variants
from classfind.comments import text_without_comments
from classfind.config import Settings
from classfind.custom import custom_class_lists_in
from classfind.document import TextDocument
from classfind.locator import (
    dedupe_by_range,
    locate_helper_references,
    locate_markup_class_lists,
    locate_stylesheet_class_lists,
)
from classfind.positions import is_within_range, range_origin
from classfind.tokens import ClassListSpan, ClassToken, HelperReference, Position, Range

# Characters searched either side of a position when looking up the class under it
SEARCH_WINDOW = 2000


def find_class_lists_in_css_range(
    doc: TextDocument, settings: Settings, range: Range | None = None, lang: str | None = None
) -> list[ClassListSpan]:
    text = text_without_comments(doc.get_text(range), "css")
    semicolonless = settings.is_semicolonless(lang or doc.language_id)
    return locate_stylesheet_class_lists(text, semicolonless, range_origin(range))


def find_class_lists_in_html_range(
    doc: TextDocument, settings: Settings, kind: str, range: Range | None = None
) -> list[ClassListSpan]:
    text = text_without_comments(doc.get_text(range), kind)
    return locate_markup_class_lists(text, settings.class_attributes, origin=range_origin(range))


def find_custom_class_lists(
    doc: TextDocument, settings: Settings, range: Range | None = None
) -> list[ClassListSpan]:
    """Class lists matched by the configured custom patterns.

    Raises CustomPatternError when a pattern does not compile.
    """
    if not settings.class_regex:
        return []
    # Match from the document start so offsets are absolute
    text = doc.get_text(Range(Position(0, 0), range.end)) if range is not None else doc.text
    return [
        ClassListSpan(class_list, Range(doc.position_at(start), doc.position_at(end)))
        for class_list, (start, end) in custom_class_lists_in(text, settings.class_regex)
    ]


def find_class_lists_in_range(
    doc: TextDocument,
    settings: Settings,
    range: Range | None = None,
    mode: str | None = None,
    include_custom: bool = True,
    lang: str | None = None,
) -> list[ClassListSpan]:
    spans: list[ClassListSpan] = []
    if mode == "css":
        spans = find_class_lists_in_css_range(doc, settings, range, lang)
    elif mode in ("html", "jsx"):
        spans = find_class_lists_in_html_range(doc, settings, mode, range)
    if include_custom:
        spans.extend(find_custom_class_lists(doc, settings, range))
    return dedupe_by_range(spans)


def find_class_lists_in_document(doc: TextDocument, settings: Settings) -> list[ClassListSpan]:
    if settings.is_css_language(doc.language_id):
        return find_class_lists_in_css_range(doc, settings)

    spans: list[ClassListSpan] = []
    for boundary in get_language_boundaries(doc, settings):
        if boundary.type == "css":
            spans.extend(find_class_lists_in_css_range(doc, settings, boundary.range, boundary.lang))
        else:
            spans.extend(find_class_lists_in_html_range(doc, settings, boundary.type, boundary.range))
    spans.extend(find_custom_class_lists(doc, settings))
    return dedupe_by_range(spans)


def tokenize_class_lists(spans: list[ClassListSpan], settings: Settings) -> list[ClassToken]:
    """Tokenize spans with the tokenizer selected by settings.variant_groups."""
    tokenize = tokenize_with_variants if settings.variant_groups else tokenize_flat
    return [token for span in spans for token in tokenize(span, settings.blocklist)]


def find_class_names_in_range(
    doc: TextDocument,
    settings: Settings,
    range: Range | None = None,
    mode: str | None = None,
    include_custom: bool = True,
    lang: str | None = None,
) -> list[ClassToken]:
    spans = find_class_lists_in_range(doc, settings, range, mode, include_custom, lang)
    return tokenize_class_lists(spans, settings)


def find_class_names_in_document(doc: TextDocument, settings: Settings) -> list[ClassToken]:
    spans = find_class_lists_in_document(doc, settings)
    return [token for span in spans for token in tokenize_flat(span, settings.blocklist)]


def find_helper_functions_in_document(
    doc: TextDocument, settings: Settings
) -> list[HelperReference]:
    references: list[HelperReference] = []
    for boundary in get_language_boundaries(doc, settings):
        if boundary.type == "css":
            text = text_without_comments(doc.get_text(boundary.range), "css")
            references.extend(locate_helper_references(text, boundary.range.start))
    return references


def find_class_name_at_position(
    doc: TextDocument, settings: Settings, position: Position
) -> ClassToken | None:
    """Return the class token whose range contains position, if any."""
    offset = doc.offset_at(position)
    search = Range(
        doc.position_at(offset - SEARCH_WINDOW),
        doc.position_at(offset + SEARCH_WINDOW),
    )

    mode: str | None = None
    lang: str | None = None
    for boundary in get_language_boundaries(doc, settings):
        if is_within_range(position, boundary.range):
            mode, lang = boundary.type, boundary.lang
            break

    tokens = find_class_names_in_range(doc, settings, search, mode, lang=lang)
    for token in tokens:
        if is_within_range(position, token.range):
            return token
    return None
