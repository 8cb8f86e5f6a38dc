"""User-configured extraction patterns (container regex + optional class regex)."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Sequence

from classfind.errors import CustomPatternError

logger = logging.getLogger(__name__)

Pattern = str | Sequence[str]


def _compile(source: str) -> re.Pattern[str]:
    try:
        return re.compile(source)
    except re.error as exc:
        raise CustomPatternError(str(exc), source) from None


def _split_pattern(pattern: Pattern) -> tuple[str, str | None]:
    if isinstance(pattern, str):
        return pattern, None
    parts = list(pattern)
    if not parts or len(parts) > 2 or not all(isinstance(p, str) for p in parts):
        raise CustomPatternError("expected a pattern or a [container, class] pair", repr(pattern))
    if len(parts) == 1:
        return parts[0], None
    return parts[0], parts[1]


def custom_class_lists_in(
    text: str, patterns: Sequence[Pattern]
) -> Iterator[tuple[str, tuple[int, int]]]:
    """Yield (class_list, (start, end)) for every custom pattern match in text.

    Each pattern's first capture group is the class list. When a pattern is a
    [container, class] pair, the class regex runs inside the container's
    capture and its own first group is the class list. Offsets index `text`.
    """
    for pattern in patterns:
        container_source, class_source = _split_pattern(pattern)
        container = _compile(container_source)
        class_regex = _compile(class_source) if class_source is not None else None
        yield from _matches_in(text, container, class_regex)


def _matches_in(
    text: str, container: re.Pattern[str], class_regex: re.Pattern[str] | None
) -> Iterator[tuple[str, tuple[int, int]]]:
    if container.groups < 1:
        logger.warning("custom pattern %r has no capture group, skipping", container.pattern)
        return
    if class_regex is not None and class_regex.groups < 1:
        logger.warning("custom pattern %r has no capture group, skipping", class_regex.pattern)
        return

    for match in container.finditer(text):
        value = match.group(1)
        if value is None:
            continue
        start = match.start(1)
        if class_regex is None:
            yield value, (start, start + len(value))
            continue
        for class_match in class_regex.finditer(value):
            class_value = class_match.group(1)
            if class_value is None:
                continue
            class_start = start + class_match.start(1)
            yield class_value, (class_start, class_start + len(class_value))
