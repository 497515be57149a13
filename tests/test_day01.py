"""Tests for day 1 calibration extraction."""
import pytest

from advent2023.core.errors import ComputeFailure, ParseFailure
from advent2023.days import day01


class TestFindDigits:
    def test_overlapping_words_from_both_ends(self) -> None:
        assert day01.find_first("oneight") == 1
        assert day01.find_last("oneight") == 8

    def test_literal_digit_wins_over_later_word(self) -> None:
        assert day01.find_first("7pqrstsixteen") == 7
        assert day01.find_last("7pqrstsixteen") == 6

    def test_no_digit(self) -> None:
        assert day01.find_first("abc") is None
        assert day01.find_last("abc") is None


class TestParts:
    def test_single_digit_counts_twice(self) -> None:
        assert day01.part1(day01.parse("treb7uchet\nx1y")) == 77 + 11

    def test_spelled_digits(self) -> None:
        assert day01.part2(day01.parse("zoneight234\neightwothree")) == 14 + 83

    def test_line_without_digit_fails(self) -> None:
        lines = day01.parse("a1\nbc")
        with pytest.raises(ComputeFailure):
            day01.part1(lines)

    def test_line_without_spelled_digit_fails(self) -> None:
        lines = day01.parse("one\nxyz")
        with pytest.raises(ComputeFailure):
            day01.part2(lines)

    def test_single_line_has_no_delimiter(self) -> None:
        with pytest.raises(ParseFailure):
            day01.parse("1abc2")
