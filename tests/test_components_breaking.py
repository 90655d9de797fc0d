from __future__ import annotations

import time

import pytest

from textfit.components import (
    BREAK_TIERS,
    InvalidParameterError,
    TableFontMetrics,
    UnsupportedGlyphError,
    break_lines,
    measure,
)
from textfit.processors.layout import fit_column_width
from textfit.variables import CONST_CONTINUATION_MARKER


class TestHelveticaBreaking:
    def test_fits_in_double_width_returns_one_line(self, helvetica):
        text = "this is a small text"
        # 两倍宽度必然无需断行
        max_width = 2 * measure(text, helvetica, 12)
        assert break_lines(text, helvetica, 12, max_width) == [text]

    def test_explicit_new_lines_are_kept(self, helvetica):
        text = "this is a small text\nthat has two\nnew lines in it"
        max_width = 2 * measure(text, helvetica, 12)
        assert break_lines(text, helvetica, 12, max_width) == [
            "this is a small text",
            "that has two",
            "new lines in it",
        ]

    def test_no_spaces_split_on_dot(self, helvetica):
        text = "This.should.be.splitted.on.a.dot.No.spaces.in.here."
        max_width = measure("This.should.be.splitted.on.a.dot.", helvetica, 12)
        assert break_lines(text, helvetica, 12, max_width) == [
            "This.should.be.splitted.on.a.dot.",
            "No.spaces.in.here.",
        ]

    def test_no_spaces_nor_dots_split_on_comma(self, helvetica):
        text = "This,should,be,splitted,on,a,comma,no,space,nor,dots,in,here,"
        max_width = measure("This,should,be,splitted,on,a,comma,", helvetica, 12)
        assert break_lines(text, helvetica, 12, max_width) == [
            "This,should,be,splitted,on,a,comma,",
            "no,space,nor,dots,in,here,",
        ]

    def test_no_spaces_nor_dots_split_on_slash(self, helvetica):
        text = "This/should/be/splitted/on/a/slash/no/space/nor/dots/in/here/"
        max_width = measure("This/should/be/splitted/on/a/slash/", helvetica, 12)
        assert break_lines(text, helvetica, 12, max_width) == [
            "This/should/be/splitted/on/a/slash/",
            "no/space/nor/dots/in/here/",
        ]

    def test_no_delimiters_split_by_size_with_marker(self, helvetica):
        text = "ThisDoesNotHaveAnyCharactersWhereWeCouldBreakMoreEasilySoWeBreakBySize"
        max_width = measure("ThisDoesNotHaveAnyCharacters", helvetica, 12)
        # 续行标记本身占宽，断点比纯字符宽度左移一个字符
        assert break_lines(text, helvetica, 12, max_width) == [
            "ThisDoesNotHaveAnyCharacter-",
            "sWhereWeCouldBreakMoreEasi-",
            "lySoWeBreakBySize",
        ]

    def test_very_big_text_is_fast_and_optimal(self, helvetica):
        token = "https://averylonginternetdnsnamewhich-maybe-breaks-easytable.com "
        text = token * 50
        expected = ["https://", "averylonginternet-", "dnsnamewhich-", "maybe-breaks-", "easytable.com"] * 50

        started = time.perf_counter()
        lines = break_lines(text, helvetica, 8, 68)
        elapsed = time.perf_counter() - started

        assert lines == expected
        assert elapsed < 5.0

    def test_line_filled_exactly_before_a_space(self, helvetica):
        max_width = measure("Hello world", helvetica, 12)
        assert break_lines("Hello world again", helvetica, 12, max_width) == ["Hello world", "again"]

    def test_punctuation_edge_followed_by_space(self, helvetica):
        max_width = measure("Hello,", helvetica, 12)
        assert break_lines("Hello, world", helvetica, 12, max_width) == ["Hello,", "world"]

    def test_column_sized_to_widest_word_never_hyphenates(self, helvetica):
        text = "Lorem ipsum dolor sit amet consectetur adipiscing elit sed do eiusmod tempor"
        max_width = fit_column_width(text.split(" "), "Helvetica", 12)
        lines = break_lines(text, helvetica, 12, max_width)
        assert not any(line.endswith(CONST_CONTINUATION_MARKER) for line in lines)
        assert " ".join(lines) == text
        for line in lines:
            assert measure(line, helvetica, 12) <= max_width

    def test_every_unforced_line_fits(self, helvetica):
        text = "Lorem ipsum dolor sit amet, consectetur adipiscing elit. " * 8
        for line in break_lines(text, helvetica, 10, 120):
            assert measure(line, helvetica, 10) <= 120


class TestTieredBreaking:
    def test_whitespace_wins_over_later_punctuation(self, mono):
        # 每字符 5pt，行宽 35pt = 7 字符；窗口 "ab cd.e" 内空白优先
        assert break_lines("ab cd.efgh", mono, 10, 35) == ["ab", "cd.efgh"]

    def test_word_filling_line_exactly_is_kept_whole(self, mono):
        # 每字符 5pt，行宽 20pt 恰好容纳 "aaaa"，其后的空格即为断点
        assert break_lines("aaaa bbbb", mono, 10, 20) == ["aaaa", "bbbb"]

    def test_space_after_punctuation_break_is_not_carried_over(self, mono):
        assert break_lines("abcd, efgh ijkl", mono, 10, 25) == ["abcd,", "efgh", "ijkl"]

    def test_punctuation_at_window_edge_followed_by_space(self, mono):
        # 行宽 20pt 恰好容纳 "abc."，其后空格被吞掉，下一行不以空格开头
        assert break_lines("abc. def", mono, 10, 20) == ["abc.", "def"]

    @pytest.mark.parametrize("width", [20, 25, 30, 35, 40])
    def test_no_forced_split_when_every_word_fits(self, mono, width):
        text = "aa bbbb c dddd ee ffff g hh"
        lines = break_lines(text, mono, 10, width)
        assert not any(line.endswith(CONST_CONTINUATION_MARKER) for line in lines)
        assert " ".join(lines) == text

    def test_rightmost_space_wins(self, mono):
        assert break_lines("aaa bbb ccc", mono, 10, 40) == ["aaa bbb", "ccc"]

    def test_rightmost_punctuation_wins_regardless_of_kind(self, mono):
        assert break_lines("a.b,c/d-efghij", mono, 10, 35) == ["a.b,c/", "d-", "efghij"]

    def test_forced_split_consumes_prefix_plus_marker(self, mono):
        lines = break_lines("abcdefghij", mono, 10, 25)
        assert lines == ["abcd-", "efgh-", "ij"]
        # 去掉续行标记后可无损还原
        rebuilt = "".join(ln[: -len(CONST_CONTINUATION_MARKER)] if ln.endswith("-") else ln for ln in lines)
        assert rebuilt == "abcdefghij"

    def test_glyph_wider_than_line_still_progresses(self, mono):
        assert break_lines("abc", mono, 10, 3) == ["a-", "b-", "c"]

    def test_leading_space_is_not_a_break_point(self, mono):
        lines = break_lines(" abcdefgh", mono, 10, 25)
        assert lines == [" abc-", "defgh"]
        assert all(lines)

    def test_trailing_space_of_last_chunk_is_dropped(self, mono):
        assert break_lines("aaaa bbbb ", mono, 10, 25) == ["aaaa", "bbbb"]

    def test_lone_trailing_space_does_not_become_a_line(self, mono):
        assert break_lines("abcd  ", mono, 10, 25) == ["abcd"]

    def test_line_that_fits_is_kept_verbatim(self, mono):
        assert break_lines("ab ", mono, 10, 100) == ["ab "]

    def test_empty_input_lines_are_preserved(self, mono):
        assert break_lines("a\n\nb", mono, 10, 100) == ["a", "", "b"]
        assert break_lines("", mono, 10, 100) == [""]

    def test_each_input_line_is_broken_independently(self, mono):
        assert break_lines("aaa bbb\nccc ddd", mono, 10, 20) == ["aaa", "bbb", "ccc", "ddd"]

    def test_tiers_are_ordered_whitespace_first(self):
        assert [t.name for t in BREAK_TIERS] == ["whitespace", "punctuation"]
        assert BREAK_TIERS[0].trim_delimiter and not BREAK_TIERS[1].trim_delimiter


class TestBreakingErrors:
    @pytest.mark.parametrize("size, max_width", [(0, 10), (-1, 10), (10, 0), (10, -5)])
    def test_invalid_parameters_fail_before_measuring(self, size, max_width):
        # 空表字体：任何查询都会缺字，若先测量则会抛 UnsupportedGlyphError
        font = TableFontMetrics({})
        with pytest.raises(InvalidParameterError):
            break_lines("abc", font, size, max_width)

    def test_unsupported_glyph_is_not_swallowed(self):
        font = TableFontMetrics({"a": 500.0, " ": 250.0})
        with pytest.raises(UnsupportedGlyphError):
            break_lines("a a a\na b", font, 10, 100)

    def test_fallback_width_keeps_breaking_total(self):
        font = TableFontMetrics({"a": 500.0}, fallback_width=500.0)
        assert break_lines("aa中aa", font, 10, 15) == ["aa-", "中aa"]
