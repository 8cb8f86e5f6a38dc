"""Test custom extraction patterns."""

import logging

import pytest

from classfind.custom import custom_class_lists_in
from classfind.errors import CustomPatternError


class TestContainerOnly:
    def test_single_group(self):
        text = "const x = tw`p-4 m-2`"
        found = list(custom_class_lists_in(text, [r"tw`([^`]*)`"]))
        assert found == [("p-4 m-2", (13, 20))]

    def test_several_matches(self):
        text = "tw`a` tw`b`"
        found = list(custom_class_lists_in(text, [r"tw`([^`]*)`"]))
        assert [value for value, _ in found] == ["a", "b"]

    def test_no_match(self):
        assert list(custom_class_lists_in("nothing", [r"tw`([^`]*)`"])) == []

    def test_offsets_index_text(self):
        text = "xx cva('a b')"
        for value, (start, end) in custom_class_lists_in(text, [r"cva\('([^']*)'\)"]):
            assert text[start:end] == value


class TestContainerAndClass:
    def test_class_regex_inside_container(self):
        text = "clsx('a b', cond && 'c')"
        patterns = [[r"clsx\(([^)]*)\)", r"'([^']*)'"]]
        found = list(custom_class_lists_in(text, patterns))
        assert [value for value, _ in found] == ["a b", "c"]
        for value, (start, end) in found:
            assert text[start:end] == value

    def test_tuple_pair(self):
        text = "cx('a')"
        found = list(custom_class_lists_in(text, [(r"cx\(([^)]*)\)", r"'([^']*)'")]))
        assert found == [("a", (4, 5))]

    def test_single_element_list(self):
        found = list(custom_class_lists_in("tw`a`", [[r"tw`([^`]*)`"]]))
        assert found == [("a", (3, 4))]


class TestPatternErrors:
    def test_invalid_container(self):
        with pytest.raises(CustomPatternError) as exc_info:
            list(custom_class_lists_in("x", ["tw`([^`]*`"]))
        assert exc_info.value.pattern == "tw`([^`]*`"

    def test_invalid_class_pattern(self):
        with pytest.raises(CustomPatternError):
            list(custom_class_lists_in("x", [["(a)", "(b"]]))

    def test_bad_pair_shape(self):
        with pytest.raises(CustomPatternError):
            list(custom_class_lists_in("x", [["a", "b", "c"]]))

    def test_error_formats_pattern(self):
        with pytest.raises(CustomPatternError) as exc_info:
            list(custom_class_lists_in("x", ["(unclosed"]))
        assert "(unclosed" in str(exc_info.value)

    def test_missing_group_skipped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="classfind.custom"):
            found = list(custom_class_lists_in("tw`a`", [r"tw`[^`]*`"]))
        assert found == []
        assert "no capture group" in caplog.text

    def test_later_patterns_still_run_after_skip(self):
        patterns = [r"tw`[^`]*`", r"tw`([^`]*)`"]
        assert [v for v, _ in custom_class_lists_in("tw`a`", patterns)] == ["a"]
