"""Text documents with position/offset conversion."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field

from classfind.tokens import Position, Range


@dataclass(frozen=True)
class TextDocument:
    """Document text bound to its uri and language id."""

    uri: str
    language_id: str
    text: str
    _line_starts: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        starts = [0]
        starts.extend(i + 1 for i, ch in enumerate(self.text) if ch == "\n")
        object.__setattr__(self, "_line_starts", tuple(starts))

    def position_at(self, offset: int) -> Position:
        """Return the position of an offset, clamped to the document."""
        offset = max(0, min(offset, len(self.text)))
        line = bisect_right(self._line_starts, offset) - 1
        return Position(line, offset - self._line_starts[line])

    def offset_at(self, position: Position) -> int:
        """Return the offset of a position; characters past the line end are clamped."""
        if position.line >= len(self._line_starts):
            return len(self.text)
        if position.line < 0:
            return 0
        line_start = self._line_starts[position.line]
        if position.line + 1 < len(self._line_starts):
            line_end = self._line_starts[position.line + 1] - 1
        else:
            line_end = len(self.text)
        return max(line_start, min(line_start + position.character, line_end))

    def get_text(self, range: Range | None = None) -> str:
        """Return the whole text, or the text covered by range."""
        if range is None:
            return self.text
        return self.text[self.offset_at(range.start) : self.offset_at(range.end)]

    @property
    def full_range(self) -> Range:
        return Range(Position(0, 0), self.position_at(len(self.text)))
