"""Positions, ranges, and the records produced by extraction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Document position, 0-based line and character."""

    line: int
    character: int


@dataclass(frozen=True, slots=True)
class Range:
    """Document range from start to end position."""

    start: Position
    end: Position


ORIGIN = Position(0, 0)


@dataclass(frozen=True, slots=True)
class ClassListSpan:
    """One raw class list (an @apply argument or attribute value) before tokenizing."""

    text: str
    range: Range
    important: bool = False


@dataclass(frozen=True, slots=True)
class ClassToken:
    """A single class name found in a class list."""

    name: str
    variants: tuple[str, ...]
    span: ClassListSpan
    local_range: Range
    range: Range


class HelperKind(Enum):
    THEME = "theme"
    CONFIG = "config"


@dataclass(frozen=True, slots=True)
class HelperReference:
    """A theme(...) or config(...) call inside stylesheet text."""

    kind: HelperKind
    path: str
    full_range: Range
    path_range: Range


class ValueTokenType(Enum):
    # Literal class text
    CLASSLIST = auto()
    ARBITRARY = auto()  # [...] run, kept whole

    # Structural
    START = auto()  # opening quote/backtick of a class list
    END = auto()  # closing quote/backtick
    LBRACE = auto()  # { or ${ entering an expression
    RBRACE = auto()  # } leaving an expression

    # Anything inside an expression that is not a string
    TEXT = auto()


LITERAL_TYPES = frozenset({ValueTokenType.CLASSLIST, ValueTokenType.ARBITRARY})


@dataclass(frozen=True, slots=True)
class ValueToken:
    """A token of an attribute value; offset is relative to the lexed text."""

    type: ValueTokenType
    value: str
    offset: int


@dataclass(frozen=True, slots=True)
class LanguageBoundary:
    """A region of a mixed document written in one embedded language."""

    type: str  # "html", "css" or "jsx"
    range: Range
    lang: str


# Whitespace that separates class names
SEPARATOR_CHARS = frozenset(
    " \n\t\r\f\v\u00a0\u1680\u2028\u2029\u202f\u205f\u3000\ufeff"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
)


def is_separator(ch: str) -> bool:
    """Return True if ch separates class names."""
    return ch in SEPARATOR_CHARS
