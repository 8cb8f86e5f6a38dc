"""Comment removal that keeps every offset and line break in place."""

from __future__ import annotations

import re

_CSS_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_HTML_COMMENT = re.compile(r"<!--.*?-->", re.DOTALL)


def _blank(text: str) -> str:
    return "".join("\n" if ch == "\n" else " " for ch in text)


def _blank_match(match: re.Match[str]) -> str:
    return _blank(match.group(0))


def text_without_comments(text: str, kind: str) -> str:
    """Replace comments in `text` with spaces.

    `kind` is "css", "html", or "js"/"jsx". Newlines inside comments are
    kept, so positions computed on the result match the original text.
    """
    if kind in ("js", "jsx"):
        return _js_without_comments(text)
    if kind == "css":
        return _CSS_COMMENT.sub(_blank_match, text)
    return _HTML_COMMENT.sub(_blank_match, text)


def _js_without_comments(text: str) -> str:
    out: list[str] = []
    quote = ""
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]

        if quote:
            if ch == "\\" and i + 1 < n:
                out.append(text[i : i + 2])
                i += 2
                continue
            if ch == quote:
                quote = ""
            out.append(ch)
            i += 1
            continue

        if ch in "'\"`":
            quote = ch
            out.append(ch)
            i += 1
            continue

        if ch == "/" and text.startswith("//", i):
            end = text.find("\n", i)
            if end == -1:
                end = n
            out.append(" " * (end - i))
            i = end
            continue

        if ch == "/" and text.startswith("/*", i):
            end = text.find("*/", i + 2)
            end = n if end == -1 else end + 2
            out.append(_blank(text[i:end]))
            i = end
            continue

        out.append(ch)
        i += 1
    return "".join(out)
