"""--debug dump of located class lists and their tokens to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from classfind.positions import range_text
from classfind.tokens import ClassListSpan, ClassToken, Range


def dump_class_lists(
    spans: list[ClassListSpan], tokens: list[ClassToken], *, file: TextIO | None = None
) -> None:
    """Print each class list followed by the tokens taken from it."""
    if file is None:
        file = sys.stderr
    by_span: dict[int, list[ClassToken]] = {}
    for token in tokens:
        by_span.setdefault(id(token.span), []).append(token)

    file.write(f"ClassLists ({len(spans)})\n")
    for span in spans:
        important = " !important" if span.important else ""
        file.write(f"  ClassList {_fmt_range(span.range)} {span.text!r}{important}\n")
        for token in by_span.get(id(span), []):
            _dump_token(token, 2, file)


def _indent(depth: int) -> str:
    return "  " * depth


def _fmt_range(range: Range) -> str:
    return (
        f"{range.start.line}:{range.start.character}-{range.end.line}:{range.end.character}"
    )


def _dump_token(token: ClassToken, depth: int, f: TextIO) -> None:
    f.write(f"{_indent(depth)}Class {token.name!r} at {_fmt_range(token.range)}")
    written = range_text(token.span.text, token.local_range)
    if written != token.name:
        f.write(f" as {written!r}")
    if token.variants:
        f.write(f" variants={list(token.variants)}")
    f.write("\n")
