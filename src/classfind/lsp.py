"""Minimal LSP server for classfind: hover over class names."""

from __future__ import annotations

import logging
from pathlib import Path

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_HOVER,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    MessageType,
    Position,
    Range,
    ShowMessageParams,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from classfind import tokens
from classfind.config import Settings, load_config, settings_from_config
from classfind.document import TextDocument
from classfind.errors import ConfigError, CustomPatternError
from classfind.finder import find_class_lists_in_document, find_class_name_at_position

logger = logging.getLogger(__name__)

server = LanguageServer("classfind-lsp", "0.1.0", text_document_sync_kind=TextDocumentSyncKind.Full)


def _settings(ls: LanguageServer) -> Settings:
    """Settings from classfind.toml at the workspace root, if there is one."""
    root = ls.workspace.root_path
    if not root:
        return Settings()
    try:
        return settings_from_config(load_config(None, Path(root)))
    except ConfigError as exc:
        _report(ls, exc.message)
        return Settings()


def _report(ls: LanguageServer, message: str) -> None:
    logger.warning("%s", message)
    ls.window_show_message(ShowMessageParams(type=MessageType.Error, message=message))


def _document(ls: LanguageServer, uri: str) -> TextDocument:
    doc = ls.workspace.get_text_document(uri)
    return TextDocument(uri, doc.language_id or "html", doc.source)


def _to_lsp_range(range: tokens.Range) -> Range:
    return Range(
        start=Position(line=range.start.line, character=range.start.character),
        end=Position(line=range.end.line, character=range.end.character),
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Run extraction so broken custom patterns are reported as soon as possible."""
    try:
        find_class_lists_in_document(_document(ls, uri), _settings(ls))
    except CustomPatternError as exc:
        _report(ls, f"classfind: invalid class_regex {exc.pattern!r}: {exc.message}")


def hover(ls: LanguageServer, params: HoverParams) -> Hover | None:
    doc = _document(ls, params.text_document.uri)
    position = tokens.Position(params.position.line, params.position.character)
    try:
        token = find_class_name_at_position(doc, _settings(ls), position)
    except CustomPatternError as exc:
        _report(ls, f"classfind: invalid class_regex {exc.pattern!r}: {exc.message}")
        return None
    if token is None:
        return None

    lines = [f"`{token.name}`"]
    if token.variants:
        lines.append("variants: " + ", ".join(f"`{v}`" for v in token.variants))
    if token.span.important:
        lines.append("`!important`")
    return Hover(
        contents=MarkupContent(kind=MarkupKind.Markdown, value="\n\n".join(lines)),
        range=_to_lsp_range(token.range),
    )


@server.feature(TEXT_DOCUMENT_HOVER)
def did_hover(ls: LanguageServer, params: HoverParams) -> Hover | None:
    return hover(ls, params)


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
