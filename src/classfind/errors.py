"""Error types with formatted source context."""

from __future__ import annotations

from pathlib import Path

from classfind.positions import offset_to_position


class ClassFindError(Exception):
    """Base class for all classfind errors."""


class ValueLexError(ClassFindError):
    """Raised by an attribute value lexer that cannot continue."""

    def __init__(self, message: str, offset: int, source: str) -> None:
        self.message = message
        self.offset = offset
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "<attribute>") -> str:
        position = offset_to_position(self.source, self.offset)
        lines = self.source.splitlines()
        if 0 <= position.line < len(lines):
            source_line = lines[position.line].rstrip("\r")
        else:
            source_line = ""

        line_num = str(position.line + 1)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"
        pad = " " * position.character

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{line_num}:{position.character + 1}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )


class CustomPatternError(ClassFindError):
    """Raised when a configured custom extraction pattern cannot be compiled."""

    def __init__(self, message: str, pattern: str) -> None:
        self.message = message
        self.pattern = pattern
        super().__init__(self.format())

    def format(self) -> str:
        return f"error: invalid custom class pattern: {self.message}\n  --> pattern: {self.pattern}"


class ConfigError(ClassFindError):
    """Raised when a config file exists but cannot be read."""

    def __init__(self, message: str, path: Path) -> None:
        self.message = message
        self.path = path
        super().__init__(self.format())

    def format(self) -> str:
        return f"error: {self.message}\n  --> {self.path}"
