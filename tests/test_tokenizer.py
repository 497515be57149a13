"""Tests for advent2023.core.tokenizer."""
import pytest

from advent2023.core.errors import ParseFailure
from advent2023.core.tokenizer import (
    detect_delimiters,
    join_vec1,
    join_vec2,
    read_lines,
    read_map,
    read_vec1,
    read_vec2,
)


class TestDetectDelimiters:
    def test_priority_order(self) -> None:
        assert detect_delimiters("a b,c") == [",", " "]

    def test_paragraph_implies_newline(self) -> None:
        assert detect_delimiters("a\n\nb")[:2] == ["\n\n", "\n"]

    def test_none_present(self) -> None:
        assert detect_delimiters("abc") == []


class TestReadVec1:
    def test_converts_each_piece(self) -> None:
        assert read_vec1("1,2,3", int) == [1, 2, 3]

    def test_splits_on_highest_priority(self) -> None:
        assert read_vec1("a b\nc d") == ["a b", "c d"]

    def test_trailing_newline_ignored(self) -> None:
        assert read_vec1("1\n2\n", int) == [1, 2]

    def test_bad_piece_fails(self) -> None:
        with pytest.raises(ParseFailure):
            read_vec1("1,x", int)

    def test_no_delimiter_fails(self) -> None:
        with pytest.raises(ParseFailure):
            read_vec1("abc")

    def test_empty_fails(self) -> None:
        with pytest.raises(ParseFailure):
            read_vec1("")


class TestReadVec2:
    def test_two_levels(self) -> None:
        assert read_vec2("1 2\n3 4", int) == [[1, 2], [3, 4]]

    def test_characters_without_second_delimiter(self) -> None:
        assert read_vec2("ab\ncd") == [["a", "b"], ["c", "d"]]

    def test_paragraphs_of_lines(self) -> None:
        assert read_vec2("a b\nc\n\nd") == [["a b", "c"], ["d"]]

    def test_bad_character_fails(self) -> None:
        with pytest.raises(ParseFailure):
            read_vec2("12\n3x", int)


class TestRoundTrip:
    @pytest.mark.parametrize("text", [
        "1abc2\npqr3stu8vwx\na1b2c3d4e5f",
        "1,2 3,4\n5,6",
        "seeds: 1 2\n\na-to-b map:\n1 2 3",
    ])
    def test_rejoin_reconstructs_input(self, text: str) -> None:
        assert join_vec2(read_vec2(text), detect_delimiters(text)) == text

    def test_rejoin_ignores_trailing_newline(self) -> None:
        text = "1\n2\n3\n"
        assert join_vec1(read_vec1(text), "\n") == text.rstrip()


class TestReadLines:
    def test_single_line_with_spaces(self) -> None:
        assert read_lines("32T3K 765") == ["32T3K 765"]

    def test_one_element_per_line(self) -> None:
        assert read_lines("1 2\n3 4\n", lambda s: s.split()) == [["1", "2"], ["3", "4"]]

    def test_bad_line_fails(self) -> None:
        with pytest.raises(ParseFailure):
            read_lines("1\nx", int)

    def test_empty_fails(self) -> None:
        with pytest.raises(ParseFailure):
            read_lines("\n")


class TestReadMap:
    def test_coordinates_are_column_row(self) -> None:
        grid = read_map("a.\n.b", str)
        assert grid == {(0, 0): "a", (1, 0): ".", (0, 1): ".", (1, 1): "b"}

    def test_other_delimiters_are_cells(self) -> None:
        grid = read_map("5-\n,:", str)
        assert grid[(1, 0)] == "-"
        assert len(grid) == 4

    def test_empty_fails(self) -> None:
        with pytest.raises(ParseFailure):
            read_map("\n", str)
