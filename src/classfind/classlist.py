"""Class list tokenizers: split a class list into class names and variants."""

from __future__ import annotations

from collections.abc import Collection

from classfind.positions import compose_range, offsets_to_range
from classfind.tokens import ORIGIN, ClassListSpan, ClassToken, Range, is_separator


def _as_span(source: ClassListSpan | str) -> ClassListSpan:
    if isinstance(source, ClassListSpan):
        return source
    end = offsets_to_range(source, 0, len(source)).end
    return ClassListSpan(source, Range(ORIGIN, end))


class VariantTokenizer:
    """Scan a class list, tracking variant prefixes and parenthesized groups.

    `hover:(bg-red-500 focus:text-white)` yields `bg-red-500` with variants
    `("hover",)` and `text-white` with `("hover", "focus")`.
    """

    def __init__(self, span: ClassListSpan, blocklist: Collection[str] = ()) -> None:
        self._span = span
        self._text = span.text
        self._blocklist = blocklist
        self._searching_for_start = True
        self._word_index = 0
        self._global_stack: list[str] = []
        self._global_lengths: list[int] = []  # entries pushed at each "(" depth
        self._local_stack: list[str] = []
        self._tokens: list[ClassToken] = []

    def tokenize(self) -> list[ClassToken]:
        """Tokenize the full class list and return the class tokens."""
        text = self._text
        for idx, ch in enumerate(text):
            if not self._searching_for_start and is_separator(ch):
                self._emit(idx)
                self._local_stack.clear()
                self._searching_for_start = True
            elif not self._searching_for_start and ch == ":":
                self._local_stack.append(text[self._word_index : idx])
                self._searching_for_start = True
            elif ch == "(":
                self._open_group()
            elif ch == ")":
                self._close_group(idx)
            elif self._searching_for_start and not is_separator(ch):
                self._word_index = idx
                self._searching_for_start = False

        # Unterminated words and groups are tolerated
        if not self._searching_for_start:
            self._emit(len(text))
        return self._tokens

    def _open_group(self) -> None:
        self._global_stack.extend(self._local_stack)
        self._global_lengths.append(len(self._local_stack))
        self._local_stack.clear()
        self._searching_for_start = True

    def _close_group(self, idx: int) -> None:
        if not self._searching_for_start:
            self._emit(idx)
        self._local_stack.clear()
        if self._global_lengths:
            count = self._global_lengths.pop()
            if count:
                del self._global_stack[-count:]
        self._searching_for_start = True

    def _emit(self, idx: int) -> None:
        name = self._text[self._word_index : idx]
        if name in self._blocklist:
            return
        # Steps back over local variants assuming each is followed by exactly one
        # character (its ":") before the next word; separators after a ":" are not counted
        prefix = sum(len(variant) + 1 for variant in self._local_stack)
        local_range = offsets_to_range(self._text, idx - len(name) - prefix, idx)
        self._tokens.append(
            ClassToken(
                name=name,
                variants=(*self._global_stack, *self._local_stack),
                span=self._span,
                local_range=local_range,
                range=compose_range(local_range, self._span.range.start),
            )
        )


def tokenize_with_variants(
    source: ClassListSpan | str, blocklist: Collection[str] = ()
) -> list[ClassToken]:
    """Split a class list into class names with their variant chains."""
    return VariantTokenizer(_as_span(source), blocklist).tokenize()


def tokenize_flat(source: ClassListSpan | str, blocklist: Collection[str] = ()) -> list[ClassToken]:
    """Split a class list on whitespace only; no variants, no grouping."""
    span = _as_span(source)
    text = span.text
    tokens: list[ClassToken] = []
    start: int | None = None
    for idx in range(len(text) + 1):
        at_separator = idx == len(text) or is_separator(text[idx])
        if start is None:
            if not at_separator:
                start = idx
            continue
        if at_separator:
            name = text[start:idx]
            if name not in blocklist:
                local_range = offsets_to_range(text, start, idx)
                tokens.append(
                    ClassToken(
                        name=name,
                        variants=(),
                        span=span,
                        local_range=local_range,
                        range=compose_range(local_range, span.range.start),
                    )
                )
            start = None
    return tokens
