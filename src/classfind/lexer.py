"""Attribute value lexer: separates literal class lists from dynamic code."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum, auto

from classfind.errors import ValueLexError
from classfind.tokens import ValueToken, ValueTokenType, is_separator

MAX_NESTING = 64

_QUOTES = "'\"`"


class _State(Enum):
    MAIN = auto()
    CLASS_LIST = auto()
    EXPRESSION = auto()


class Lexer:
    """Tokenize an attribute value starting at its opening quote or brace.

    Plain attributes (`class="..."`, `className={...}`) treat quoted text as
    class lists. Computed attributes (`:class="..."`, `[class]="..."`) treat
    the whole value as an expression in which only nested string literals
    are class lists.
    """

    def __init__(self, source: str, computed: bool = False) -> None:
        self._source = source
        self._computed = computed
        self._pos = 0
        self._state = _State.MAIN
        self._closer = ""
        self._state_stack: list[tuple[_State, str]] = []  # (state, closing char)
        self._run: list[str] = []
        self._run_start = 0

    def __iter__(self) -> Iterator[ValueToken]:
        while self._pos < len(self._source):
            if self._state == _State.MAIN:
                yield from self._lex_main()
            elif self._state == _State.CLASS_LIST:
                yield from self._lex_class_list()
            else:
                yield from self._lex_expression()
            if self._state == _State.MAIN:
                # The opening value has closed
                return

        # Unterminated values end quietly at end of input
        yield from self._flush()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _take(self, count: int = 1) -> str:
        text = self._source[self._pos : self._pos + count]
        self._pos += count
        return text

    def _accumulate(self, count: int = 1) -> None:
        if not self._run:
            self._run_start = self._pos
        self._run.append(self._take(count))

    def _flush(self) -> Iterator[ValueToken]:
        if self._run:
            tt = ValueTokenType.CLASSLIST if self._state == _State.CLASS_LIST else ValueTokenType.TEXT
            yield ValueToken(tt, "".join(self._run), self._run_start)
            self._run = []

    def _single(self, tt: ValueTokenType, count: int = 1) -> ValueToken:
        offset = self._pos
        return ValueToken(tt, self._take(count), offset)

    def _push_state(self, state: _State, closer: str) -> None:
        if len(self._state_stack) >= MAX_NESTING:
            raise ValueLexError(
                f"value nested deeper than {MAX_NESTING} levels", self._pos, self._source
            )
        self._state_stack.append((self._state, self._closer))
        self._state = state
        self._closer = closer

    def _pop_state(self) -> None:
        self._state, self._closer = self._state_stack.pop()

    # ------------------------------------------------------------------
    # Main state: expects the opening character of a value
    # ------------------------------------------------------------------

    def _lex_main(self) -> Iterator[ValueToken]:
        ch = self._peek()

        if self._computed and ch in "'\"{":
            if ch == "{":
                self._push_state(_State.EXPRESSION, "}")
                yield self._single(ValueTokenType.LBRACE)
            else:
                self._push_state(_State.EXPRESSION, ch)
                yield self._single(ValueTokenType.START)
            return

        if not self._computed and ch in _QUOTES:
            self._push_state(_State.CLASS_LIST, ch)
            yield self._single(ValueTokenType.START)
            return

        if not self._computed and ch == "{":
            self._push_state(_State.EXPRESSION, "}")
            yield self._single(ValueTokenType.LBRACE)
            return

        raise ValueLexError(f"unexpected character {ch!r} in attribute value", self._pos, self._source)

    # ------------------------------------------------------------------
    # Quoted class list
    # ------------------------------------------------------------------

    def _lex_class_list(self) -> Iterator[ValueToken]:
        ch = self._peek()

        if ch == "\\":
            self._accumulate(2)
            return

        if ch == self._closer:
            yield from self._flush()
            yield self._single(ValueTokenType.END)
            self._pop_state()
            return

        if self._closer == "`" and ch == "$" and self._peek(1) == "{":
            yield from self._flush()
            self._push_state(_State.EXPRESSION, "}")
            yield self._single(ValueTokenType.LBRACE, 2)
            return

        if self._closer != "`" and ch == "{":
            yield from self._flush()
            self._push_state(_State.EXPRESSION, "}")
            yield self._single(ValueTokenType.LBRACE)
            return

        if ch == "[":
            length = self._arbitrary_length()
            if length:
                yield from self._flush()
                yield self._single(ValueTokenType.ARBITRARY, length)
                return

        self._accumulate()

    def _arbitrary_length(self) -> int:
        """Length of a whitespace-free [...] run at the current position, or 0."""
        idx = self._pos + 1
        while idx < len(self._source):
            ch = self._source[idx]
            if ch == "]":
                return idx - self._pos + 1
            if is_separator(ch) or ch == "[":
                return 0
            idx += 1
        return 0

    # ------------------------------------------------------------------
    # Expression (interpolation or computed value)
    # ------------------------------------------------------------------

    def _lex_expression(self) -> Iterator[ValueToken]:
        ch = self._peek()

        if ch == "\\":
            self._accumulate(2)
            return

        if ch == self._closer:
            yield from self._flush()
            tt = ValueTokenType.RBRACE if ch == "}" else ValueTokenType.END
            yield self._single(tt)
            self._pop_state()
            return

        if ch in _QUOTES:
            yield from self._flush()
            self._push_state(_State.CLASS_LIST, ch)
            yield self._single(ValueTokenType.START)
            return

        if ch == "{":
            yield from self._flush()
            self._push_state(_State.EXPRESSION, "}")
            yield self._single(ValueTokenType.LBRACE)
            return

        self._accumulate()


def lex_attribute_value(source: str, computed: bool = False) -> Iterator[ValueToken]:
    """Convenience function: lex an attribute value starting at its opening character."""
    return iter(Lexer(source, computed))
