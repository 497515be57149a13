"""
Puzzle days.

Each day module exposes ``parse``, ``part1``, ``part2`` and a ``DAY`` record
bundling them with a title, display templates and embedded examples.

Usage:
    from advent2023.days import get_day, Part

    day_num, day = get_day(2)
    part1, part2 = day.both(text)
    answer = day.calc(Part.FIRST, text)
"""

from .base import Day, DayHandle, Examples, Part, PrimaryExample
from .registry import DAYS, get_day, get_days

__all__ = [
    # Main functions
    "get_day",
    "get_days",

    # Types
    "Day",
    "DayHandle",
    "Examples",
    "Part",
    "PrimaryExample",

    # Constants
    "DAYS",
]
