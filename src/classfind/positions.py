"""Offset to line/character conversion and range composition."""

from __future__ import annotations

from classfind.tokens import ORIGIN, Position, Range


def offset_to_position(text: str, offset: int) -> Position:
    """Return the 0-based position of `offset` within `text`.

    Offsets outside the text are clamped to its bounds.
    """
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset)
    line_start = text.rfind("\n", 0, offset) + 1
    return Position(line, offset - line_start)


def offsets_to_range(text: str, start: int, end: int) -> Range:
    """Return the range covering text[start:end]."""
    return Range(offset_to_position(text, start), offset_to_position(text, end))


def compose_position(local: Position, origin: Position | None) -> Position:
    """Lift a position computed within a substring into the enclosing frame.

    Only the first line of the substring shares its horizontal origin with
    `origin`; characters on later lines are already absolute.
    """
    if origin is None:
        return local
    if local.line == 0:
        return Position(origin.line, origin.character + local.character)
    return Position(origin.line + local.line, local.character)


def compose_range(local: Range, origin: Position | None) -> Range:
    """Lift a substring-relative range into the frame that starts at `origin`."""
    return Range(compose_position(local.start, origin), compose_position(local.end, origin))


def is_within_range(position: Position, range: Range) -> bool:
    """Return True if position lies in range, both ends inclusive."""
    return range.start <= position <= range.end


def position_to_offset(text: str, position: Position) -> int:
    """Return the offset of `position` in `text`, clamped to the line's length."""
    offset = 0
    for _ in range(position.line):
        newline = text.find("\n", offset)
        if newline == -1:
            return len(text)
        offset = newline + 1
    line_end = text.find("\n", offset)
    if line_end == -1:
        line_end = len(text)
    return min(offset + position.character, line_end)


def range_text(text: str, range: Range) -> str:
    """Return the slice of `text` covered by a range computed over it."""
    return text[position_to_offset(text, range.start) : position_to_offset(text, range.end)]


def range_origin(range: Range | None) -> Position:
    """Return the start of an optional enclosing range."""
    return range.start if range is not None else ORIGIN
