"""Split mixed documents into html, css and jsx regions."""

from __future__ import annotations

import re

from classfind.config import Settings
from classfind.document import TextDocument
from classfind.tokens import LanguageBoundary, Range

_BLOCK = re.compile(
    r"<(?P<tag>style|script)\b(?P<attrs>[^>]*)>(?P<body>.*?)(?:</(?P=tag)\s*>|\Z)",
    re.IGNORECASE | re.DOTALL,
)
_LANG_ATTR = re.compile(r"""\blang\s*=\s*["']?(?P<lang>[\w-]+)""", re.IGNORECASE)
_TYPE_ATTR = re.compile(r"""\btype\s*=\s*["']?(?:text/)?(?P<lang>[\w-]+)""", re.IGNORECASE)


def _block_lang(tag: str, attrs: str) -> str:
    for regex in (_LANG_ATTR, _TYPE_ATTR):
        found = regex.search(attrs)
        if found:
            return found.group("lang").lower()
    return "css" if tag == "style" else "javascript"


def get_language_boundaries(doc: TextDocument, settings: Settings) -> list[LanguageBoundary]:
    """Return the embedded-language regions of a document, in document order.

    CSS documents are a single css region and JSX-family documents a single
    jsx region. Other markup is html except for <style> bodies (css) and
    <script> bodies (jsx).
    """
    if settings.is_css_language(doc.language_id):
        return [LanguageBoundary("css", doc.full_range, doc.language_id)]
    if settings.is_jsx_language(doc.language_id):
        return [LanguageBoundary("jsx", doc.full_range, doc.language_id)]

    boundaries: list[LanguageBoundary] = []
    html_start = 0
    for match in _BLOCK.finditer(doc.text):
        body_start, body_end = match.span("body")
        if body_start > html_start:
            boundaries.append(_boundary(doc, "html", html_start, body_start, doc.language_id))
        tag = match.group("tag").lower()
        kind = "css" if tag == "style" else "jsx"
        boundaries.append(_boundary(doc, kind, body_start, body_end, _block_lang(tag, match.group("attrs"))))
        html_start = body_end

    if html_start < len(doc.text) or not boundaries:
        boundaries.append(_boundary(doc, "html", html_start, len(doc.text), doc.language_id))
    return boundaries


def _boundary(doc: TextDocument, kind: str, start: int, end: int, lang: str) -> LanguageBoundary:
    return LanguageBoundary(kind, Range(doc.position_at(start), doc.position_at(end)), lang)
