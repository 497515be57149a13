"""
Day 1: Trebuchet?!

Each calibration line hides a two digit number made of its first and last
digit. Part 2 also counts digits spelled out as words.
"""

from __future__ import annotations
import logging
from typing import List, Optional

from ..core.errors import ComputeFailure
from ..core.tokenizer import read_vec2
from .base import Day, Examples

logger = logging.getLogger(__name__)

DIGITS = "0123456789"

SPELLED_DIGITS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

EXAMPLE_1 = """1abc2
pqr3stu8vwx
a1b2c3d4e5f
treb7uchet"""

EXAMPLE_2 = """two1nine
eightwothree
abcone2threexyz
xtwone3four
4nineeightseven2
zoneight234
7pqrstsixteen"""


# One list of characters per input line
Calibration = List[List[str]]


def parse(text: str) -> Calibration:
    return read_vec2(text, str)


def _numeric_value(line: List[str]) -> int:
    first = next((c for c in line if c in DIGITS), None)
    last = next((c for c in reversed(line) if c in DIGITS), None)
    if first is None or last is None:
        raise ComputeFailure(f"No digit on line {''.join(line)!r}")
    return 10 * int(first) + int(last)


def find_first(line: str) -> Optional[int]:
    """First digit scanning forward, literal or spelled."""
    for index, char in enumerate(line):
        if char in DIGITS:
            return int(char)
        for word, value in SPELLED_DIGITS.items():
            if line[index:index + len(word)] == word:
                return value
    return None


def find_last(line: str) -> Optional[int]:
    """Last digit scanning backward; a spelled digit must end at the index."""
    for index in range(len(line) - 1, -1, -1):
        if line[index] in DIGITS:
            return int(line[index])
        for word, value in SPELLED_DIGITS.items():
            start = index + 1 - len(word)
            if start >= 0 and line[start:index + 1] == word:
                return value
    return None


def _alphanumeric_value(line: List[str]) -> int:
    text = "".join(line)
    first = find_first(text)
    last = find_last(text)
    if first is None or last is None:
        raise ComputeFailure(f"No digit on line {text!r}")
    logger.debug("On line %r the first digit is %d and the last is %d", text, first, last)
    return 10 * first + last


def part1(lines: Calibration) -> int:
    return sum(_numeric_value(line) for line in lines)


def part2(lines: Calibration) -> int:
    return sum(_alphanumeric_value(line) for line in lines)


DAY = Day(
    title="Trebuchet?!",
    display=(
        "The sum of all the numeric calibration values is {answer}.",
        "The sum of all the alphanumeric calibration values is {answer}.",
    ),
    parse=parse,
    part1=part1,
    part2=part2,
    examples=Examples.pair(EXAMPLE_1, EXAMPLE_2, answers=("142", "281")),
)
