"""
Day 6: Wait For It

T: race time
t: hold time
D: record distance to beat

Holding the button for t gives speed t for the remaining T - t, so the boat
travels t * (T - t). It beats the record when

    t * (T - t) > D   <=>   t² - Tt + D < 0

i.e. for the integers strictly between the roots of t² - Tt + D = 0.

Part 2 races are large enough that float roots can no longer tell a tie
from a win, so the roots are taken with an integer square root and then
nudged until the inequality holds exactly.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import List

from ..core.errors import ParseFailure
from .base import Day, Examples

logger = logging.getLogger(__name__)

EXAMPLE = """Time:      7  15   30
Distance:  9  40  200"""


def first_winning_hold(time: int, distance: int) -> int | None:
    """Smallest t with t * (time - t) > distance, or None if the record cannot be beaten."""
    discriminant_squared = time * time - 4 * distance
    if discriminant_squared <= 0:
        return None
    hold = (time - math.isqrt(discriminant_squared)) // 2
    while hold > 0 and (hold - 1) * (time - hold + 1) > distance:
        hold -= 1
    while hold * (time - hold) <= distance:
        hold += 1
        if hold > time // 2:
            return None
    logger.debug("time %d distance %d: first win at %d", time, distance, hold)
    return hold


@dataclass(frozen=True)
class Race:
    time: int
    distance: int

    def winning_range(self) -> range:
        low = first_winning_hold(self.time, self.distance)
        if low is None:
            return range(0)
        # t * (T - t) is symmetric about T / 2
        return range(low, self.time - low + 1)


@dataclass(frozen=True)
class Competition:
    races: List[Race]
    kerning_race: Race  # all digits of each line read as one number


def _row(line: str, label: str) -> List[str]:
    name, sep, values = line.partition(":")
    if not sep or name.strip() != label:
        raise ParseFailure(f"Expected {label!r} row, got {line!r}")
    fields = values.split()
    if not all(f.isdigit() for f in fields):
        raise ParseFailure(f"Non-numeric {label} row {line!r}")
    return fields


def parse(text: str) -> Competition:
    lines = text.strip().split("\n")
    if len(lines) != 2:
        raise ParseFailure(f"Expected Time and Distance rows, got {len(lines)} lines")
    times = _row(lines[0], "Time")
    distances = _row(lines[1], "Distance")
    if len(times) != len(distances) or not times:
        raise ParseFailure(f"{len(times)} times but {len(distances)} distances")
    return Competition(
        races=[Race(int(t), int(d)) for t, d in zip(times, distances)],
        kerning_race=Race(int("".join(times)), int("".join(distances))),
    )


def part1(competition: Competition) -> int:
    answer = 1
    for race in competition.races:
        ways = len(race.winning_range())
        logger.debug("race %r: %d ways", race, ways)
        answer *= ways
    return answer


def part2(competition: Competition) -> int:
    return len(competition.kerning_race.winning_range())


DAY = Day(
    title="Wait For It",
    display=(
        "The product of the ways to beat the record are {answer}.",
        "There are {answer} ways to beat the race.",
    ),
    parse=parse,
    part1=part1,
    part2=part2,
    examples=Examples.single(EXAMPLE, answers=("288", "71503")),
)
