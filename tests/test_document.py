"""Test TextDocument offset and position conversion."""

from classfind.tokens import Position

from .conftest import rng


class TestPositionAt:
    def test_first_line(self, make_doc):
        doc = make_doc("abc\ndef")
        assert doc.position_at(2) == Position(0, 2)

    def test_after_newline(self, make_doc):
        doc = make_doc("abc\ndef")
        assert doc.position_at(4) == Position(1, 0)

    def test_newline_itself(self, make_doc):
        doc = make_doc("abc\ndef")
        assert doc.position_at(3) == Position(0, 3)

    def test_clamped(self, make_doc):
        doc = make_doc("abc\ndef")
        assert doc.position_at(-5) == Position(0, 0)
        assert doc.position_at(100) == Position(1, 3)


class TestOffsetAt:
    def test_round_trip(self, make_doc):
        text = "ab\n\ncde\n"
        doc = make_doc(text)
        for offset in range(len(text) + 1):
            assert doc.offset_at(doc.position_at(offset)) == offset

    def test_character_past_line_end(self, make_doc):
        doc = make_doc("ab\ncd")
        assert doc.offset_at(Position(0, 10)) == 2

    def test_line_past_end(self, make_doc):
        doc = make_doc("ab\ncd")
        assert doc.offset_at(Position(9, 0)) == 5


class TestGetText:
    def test_whole(self, make_doc):
        assert make_doc("abc").get_text() == "abc"

    def test_range(self, make_doc):
        doc = make_doc("one\ntwo\nthree")
        assert doc.get_text(rng(1, 1, 2, 2)) == "wo\nth"

    def test_full_range(self, make_doc):
        doc = make_doc("one\ntwo")
        assert doc.full_range == rng(0, 0, 1, 3)
