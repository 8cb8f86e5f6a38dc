"""Tests for the LSP server: hover content and reported configuration problems."""

from __future__ import annotations

from pathlib import Path

import pytest
from lsprotocol.types import (
    HoverParams,
    MarkupKind,
    MessageType,
    Position,
    ShowMessageParams,
    TextDocumentIdentifier,
    TextDocumentItem,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer
from pygls.workspace import Workspace

from classfind.lsp import _validate, hover

URI = "file:///test.html"


def _make_env(root_uri: str | None):
    ls = LanguageServer("test", "v0", text_document_sync_kind=TextDocumentSyncKind.Full)
    ws = Workspace(root_uri)
    ls.protocol._workspace = ws

    messages: list[ShowMessageParams] = []
    ls.window_show_message = lambda params: messages.append(params)

    def put(source: str, language_id: str = "html", uri: str = URI) -> None:
        ws.put_text_document(
            TextDocumentItem(uri=uri, language_id=language_id, version=0, text=source)
        )

    return ls, messages, put


@pytest.fixture
def lsp_env():
    """Create a LanguageServer with a rootless workspace and captured messages."""
    return _make_env(None)


def _hover(ls, line: int, character: int, uri: str = URI):
    params = HoverParams(
        text_document=TextDocumentIdentifier(uri=uri),
        position=Position(line=line, character=character),
    )
    return hover(ls, params)


# ---------------------------------------------------------------------------
# Hover
# ---------------------------------------------------------------------------


class TestHover:
    def test_class_name(self, lsp_env) -> None:
        ls, messages, put = lsp_env
        put('<div class="flex p-4"></div>')
        result = _hover(ls, 0, 18)

        assert result is not None
        assert result.contents.kind == MarkupKind.Markdown
        assert result.contents.value == "`p-4`"
        assert result.range.start.character == 17
        assert result.range.end.character == 20
        assert messages == []

    def test_nothing_under_cursor(self, lsp_env) -> None:
        ls, _, put = lsp_env
        put('<div class="flex"></div>')
        assert _hover(ls, 0, 1) is None

    def test_important_stylesheet(self, lsp_env) -> None:
        ls, _, put = lsp_env
        put(".a { @apply flex !important; }", language_id="css", uri="file:///a.css")
        result = _hover(ls, 0, 13, uri="file:///a.css")

        assert result is not None
        assert "`flex`" in result.contents.value
        assert "`!important`" in result.contents.value

    def test_second_line(self, lsp_env) -> None:
        ls, _, put = lsp_env
        put('<div>\n  <b class="hidden"></b>\n</div>')
        result = _hover(ls, 1, 14)

        assert result is not None
        assert result.contents.value == "`hidden`"
        assert result.range.start.line == 1
        assert result.range.start.character == 12


# ---------------------------------------------------------------------------
# Workspace configuration
# ---------------------------------------------------------------------------


class TestWorkspaceConfig:
    def test_variant_groups_from_config(self, tmp_path: Path) -> None:
        (tmp_path / "classfind.toml").write_text("[classfind]\nvariant_groups = true\n")
        ls, messages, put = _make_env(tmp_path.as_uri())
        put('<a class="hover:(underline)">')
        result = _hover(ls, 0, 20)

        assert result is not None
        assert result.contents.value == "`underline`\n\nvariants: `hover`"
        assert messages == []

    def test_invalid_pattern_reported(self, tmp_path: Path) -> None:
        (tmp_path / "classfind.toml").write_text("[classfind]\nclass_regex = ['tw(']\n")
        ls, messages, put = _make_env(tmp_path.as_uri())
        put('<a class="x">')
        _validate(ls, URI)

        assert len(messages) == 1
        assert messages[0].type == MessageType.Error
        assert "tw(" in messages[0].message

    def test_invalid_pattern_on_hover(self, tmp_path: Path) -> None:
        (tmp_path / "classfind.toml").write_text("[classfind]\nclass_regex = ['tw(']\n")
        ls, messages, put = _make_env(tmp_path.as_uri())
        put('<a class="x">')

        assert _hover(ls, 0, 10) is None
        assert len(messages) == 1

    def test_broken_config_falls_back_to_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "classfind.toml").write_text("[classfind\n")
        ls, messages, put = _make_env(tmp_path.as_uri())
        put('<a class="x">')
        result = _hover(ls, 0, 10)

        assert result is not None
        assert result.contents.value == "`x`"
        assert len(messages) == 1
        assert messages[0].type == MessageType.Error

    def test_valid_document_reports_nothing(self, lsp_env) -> None:
        ls, messages, put = lsp_env
        put('<a class="x">')
        _validate(ls, URI)
        assert messages == []
