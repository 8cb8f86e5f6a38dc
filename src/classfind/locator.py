"""Locate raw class lists and helper references in stylesheet and markup text."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Sequence

from classfind.lexer import lex_attribute_value
from classfind.positions import compose_range, offsets_to_range
from classfind.tokens import (
    LITERAL_TYPES,
    ClassListSpan,
    HelperKind,
    HelperReference,
    Position,
    Range,
    ValueToken,
)

logger = logging.getLogger(__name__)

ValueLexer = Callable[[str, bool], Iterable[ValueToken]]

_APPLY = re.compile(
    r"(?P<prefix>@apply\s+)(?P<classList>[^;}]+?)(?P<important>\s*!important)?\s*[;}]"
)
_APPLY_SEMICOLONLESS = re.compile(
    r"(?P<prefix>@apply\s+)(?P<classList>[^}\r\n]+?)(?P<important>\s*!important)?(?:\r|\n|}|\Z)"
)

_HELPER = re.compile(
    r"(?P<prefix>^|[\s:;/*(){}])(?P<helper>config|theme)(?P<innerPrefix>\(\s*)(?P<path>[^)]*?)\s*\)"
)
# path / modifier, unless the slash sits inside [...]
_HELPER_MODIFIER = re.compile(r"^(\S+)(?![^\[]*\])(?:\s*/\s*([^/\s]+))$")


# ---------------------------------------------------------------------------
# Stylesheets
# ---------------------------------------------------------------------------


def locate_stylesheet_class_lists(
    text: str, semicolonless: bool = False, origin: Position | None = None
) -> list[ClassListSpan]:
    """Find `@apply` class lists.

    `semicolonless` selects the indentation-based syntaxes (Sass, SugarSS,
    Stylus) where a rule may end at the end of the line. `origin` is the
    document position of text[0].
    """
    regex = _APPLY_SEMICOLONLESS if semicolonless else _APPLY
    spans: list[ClassListSpan] = []
    for match in regex.finditer(text):
        local = offsets_to_range(text, match.start("classList"), match.end("classList"))
        spans.append(
            ClassListSpan(
                text=match.group("classList"),
                range=compose_range(local, origin),
                important=match.group("important") is not None,
            )
        )
    return spans


def first_unquoted_comma(text: str) -> int | None:
    """Index of the first comma outside single or double quotes."""
    quote = ""
    for i, ch in enumerate(text):
        if ch == "," and not quote:
            return i
        if not quote and ch in "'\"":
            quote = ch
        elif ch == quote:
            quote = ""
    return None


def locate_helper_references(text: str, origin: Position | None = None) -> list[HelperReference]:
    """Find `theme(...)` and `config(...)` calls and resolve their lookup paths."""
    references: list[HelperReference] = []
    for match in _HELPER.finditer(text):
        argument = match.group("path")
        comma = first_unquoted_comma(argument)
        if comma is not None:
            # Drop the fallback value
            argument = argument[:comma].rstrip()

        path = argument.rstrip("'\"")
        stripped = path.lstrip("'\"")
        quotes_before = len(path) - len(stripped)
        path = stripped

        modifier = _HELPER_MODIFIER.match(path)
        if modifier:
            path = modifier.group(1)
        path = re.sub(r"['\"]*\s*$", "", path)

        start = match.start("path")
        path_start = start + quotes_before
        references.append(
            HelperReference(
                kind=HelperKind(match.group("helper")),
                path=path,
                full_range=compose_range(
                    offsets_to_range(text, start, start + len(argument)), origin
                ),
                path_range=compose_range(
                    offsets_to_range(text, path_start, path_start + len(path)), origin
                ),
            )
        )
    return references


# ---------------------------------------------------------------------------
# Markup and script
# ---------------------------------------------------------------------------


def class_attribute_regex(attributes: Sequence[str]) -> re.Pattern[str]:
    """Build the attribute matcher; each name is matched bare and as [name]."""
    names: list[str] = []
    for attribute in attributes:
        if not isinstance(attribute, str) or not attribute:
            continue
        names.append(re.escape(attribute))
        names.append(re.escape(f"[{attribute}]"))
    if not names:
        # Matches nothing
        return re.compile(r"(?!)")
    return re.compile(
        r"(?:\s|:|\()(?P<attribute>" + "|".join(names) + r")\s*=\s*['\"`{]",
        re.IGNORECASE,
    )


def match_class_attributes(text: str, attributes: Sequence[str]) -> list[re.Match[str]]:
    """Return every class attribute occurrence, positioned at its opening character."""
    return list(class_attribute_regex(attributes).finditer(text))


def _is_computed(match: re.Match[str]) -> bool:
    attribute = match.group("attribute")
    return match.group(0)[0] == ":" or (attribute.startswith("[") and attribute.endswith("]"))


def _literal_runs(lex: ValueLexer, source: str, computed: bool) -> list[tuple[str, int]]:
    """Lex an attribute value and join adjacent literal tokens into (text, offset) runs.

    Any exception raised by the lexer ends the scan for this value; runs
    collected before it are kept.
    """
    runs: list[tuple[str, int]] = []
    current: list[str] = []
    offset = 0
    try:
        for token in lex(source, computed):
            if token.type in LITERAL_TYPES:
                if not current:
                    offset = token.offset
                current.append(token.value)
            elif current:
                runs.append(("".join(current), offset))
                current = []
    except Exception as exc:
        logger.debug("attribute value lexing stopped: %s", exc)
    if current:
        runs.append(("".join(current), offset))
    return runs


def locate_markup_class_lists(
    text: str,
    attributes: Sequence[str],
    value_lexer: ValueLexer | None = None,
    origin: Position | None = None,
) -> list[ClassListSpan]:
    """Find literal class lists in class attribute values of markup or JSX.

    Each contiguous run of literal class text in a value becomes one span,
    trimmed of surrounding whitespace. Runs that are blank are dropped.
    """
    lex = value_lexer or lex_attribute_value
    spans: list[ClassListSpan] = []
    for match in match_class_attributes(text, attributes):
        value_start = match.end() - 1
        runs = _literal_runs(lex, text[value_start:], _is_computed(match))
        for value, offset in runs:
            stripped = value.strip()
            if not stripped:
                continue
            before = len(value) - len(value.lstrip())
            start = value_start + offset + before
            local = offsets_to_range(text, start, start + len(stripped))
            spans.append(ClassListSpan(stripped, compose_range(local, origin)))
    return spans


# ---------------------------------------------------------------------------
# Deduplication
# ---------------------------------------------------------------------------


def dedupe_by_range(spans: Iterable[ClassListSpan]) -> list[ClassListSpan]:
    """Keep the first span for each distinct range, preserving order."""
    seen: dict[Range, ClassListSpan] = {}
    for span in spans:
        seen.setdefault(span.range, span)
    return list(seen.values())
