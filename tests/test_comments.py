"""Test comment blanking."""

from classfind.comments import text_without_comments


class TestCss:
    def test_block_comment(self):
        text = "a /* b */ c"
        assert text_without_comments(text, "css") == "a         c"

    def test_keeps_newlines(self):
        text = "a /* b\nc */ d"
        result = text_without_comments(text, "css")
        assert result == "a     \n     d"
        assert len(result) == len(text)

    def test_apply_inside_comment_hidden(self):
        result = text_without_comments("/* @apply p-4; */", "css")
        assert "@apply" not in result


class TestHtml:
    def test_html_comment(self):
        text = '<!-- <a class="x"> --><b>'
        result = text_without_comments(text, "html")
        assert result == " " * 22 + "<b>"

    def test_css_comment_untouched_in_html(self):
        assert text_without_comments("/* a */", "html") == "/* a */"


class TestJs:
    def test_line_comment(self):
        text = "a // b\nc"
        assert text_without_comments(text, "jsx") == "a     \nc"

    def test_block_comment(self):
        text = "a /* b */ c"
        assert text_without_comments(text, "js") == "a         c"

    def test_comment_markers_in_strings_kept(self):
        text = "x = 'http://a' + \"/* b */\""
        assert text_without_comments(text, "jsx") == text

    def test_escaped_quote_in_string(self):
        text = "'a\\' // b' // c"
        assert text_without_comments(text, "jsx") == "'a\\' // b'     "

    def test_unterminated_block(self):
        text = "a /* b"
        assert text_without_comments(text, "jsx") == "a     "

    def test_length_preserved(self):
        text = "a // x\n/* y\nz */ 'q'"
        assert len(text_without_comments(text, "jsx")) == len(text)
