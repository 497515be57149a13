from __future__ import annotations
from typing import Dict

from .base import DayHandle
from . import day01, day02, day03, day04, day05, day06, day07, day08


# Day number -> puzzle, in day order
DAYS: Dict[int, DayHandle] = {
    1: day01.DAY,
    2: day02.DAY,
    3: day03.DAY,
    4: day04.DAY,
    5: day05.DAY,
    6: day06.DAY,
    7: day07.DAY,
    8: day08.DAY,
}


def get_days() -> Dict[int, DayHandle]:
    """All registered puzzles keyed by 1-based day number."""
    return dict(sorted(DAYS.items()))


def get_day(day_num: int | None = None) -> tuple[int, DayHandle]:
    """
    Look up a puzzle by day number.

    Args:
        day_num: 1-based day number, or None for the latest registered day

    Returns:
        (day number, puzzle)

    Raises:
        KeyError: If no puzzle is registered for that day
    """
    if day_num is None:
        day_num = max(DAYS)
    if day_num not in DAYS:
        raise KeyError(
            f"No puzzle registered for day {day_num}\n"
            f"Available: {', '.join(str(d) for d in sorted(DAYS))}"
        )
    return day_num, DAYS[day_num]
