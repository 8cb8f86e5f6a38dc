"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from classfind.config import Settings
from classfind.document import TextDocument
from classfind.lexer import lex_attribute_value
from classfind.tokens import ClassToken, Position, Range, ValueToken


@pytest.fixture
def lex():
    """Return a helper that lexes an attribute value into a token list."""

    def _lex(source: str, computed: bool = False) -> list[ValueToken]:
        return list(lex_attribute_value(source, computed))

    return _lex


@pytest.fixture
def make_doc():
    """Return a helper that wraps text in a TextDocument."""

    def _make(text: str, language_id: str = "html") -> TextDocument:
        return TextDocument("file:///test", language_id, text)

    return _make


@pytest.fixture
def settings() -> Settings:
    return Settings()


def rng(start_line: int, start_char: int, end_line: int, end_char: int) -> Range:
    """Shorthand for building a Range."""
    return Range(Position(start_line, start_char), Position(end_line, end_char))


def names(tokens: list[ClassToken]) -> list[str]:
    """Return the class names of tokens, in order."""
    return [t.name for t in tokens]


def text_at(text: str, range: Range) -> str:
    """Slice text by a range computed over it (handles multi-line ranges)."""
    lines = text.split("\n")
    offsets = [0]
    for line in lines:
        offsets.append(offsets[-1] + len(line) + 1)
    start = offsets[range.start.line] + range.start.character
    end = offsets[range.end.line] + range.end.character
    return text[start:end]
