"""
Day 2: Cube Conundrum
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import List

from ..core.errors import ParseFailure
from ..core.tokenizer import read_lines
from .base import Day, Examples

EXAMPLE = """Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green"""

RE_GAME = re.compile(r"Game (?P<id>\d+): (?P<hands>.+)")

MAX_RED = 12
MAX_GREEN = 13
MAX_BLUE = 14


@dataclass(frozen=True)
class Hand:
    red: int = 0
    green: int = 0
    blue: int = 0

    @classmethod
    def from_str(cls, s: str) -> "Hand":
        counts = {}
        for num_colour in s.split(", "):
            num, sep, colour = num_colour.partition(" ")
            if not sep or colour not in ("red", "green", "blue"):
                raise ParseFailure(f"Unexpected cube count {num_colour!r}")
            if not num.isdigit():
                raise ParseFailure(f"Unexpected count {num!r}")
            if colour in counts:
                raise ParseFailure(f"Colour {colour} repeated in {s!r}")
            counts[colour] = int(num)
        return cls(**counts)

    def possible(self) -> bool:
        return self.red <= MAX_RED and self.green <= MAX_GREEN and self.blue <= MAX_BLUE


@dataclass(frozen=True)
class Game:
    id: int
    hands: List[Hand]

    @classmethod
    def from_str(cls, s: str) -> "Game":
        match = RE_GAME.fullmatch(s)
        if not match:
            raise ParseFailure(f"Unexpected game {s!r}")
        return cls(
            id=int(match["id"]),
            hands=[Hand.from_str(h) for h in match["hands"].split("; ")],
        )

    def power(self) -> int:
        red = max(hand.red for hand in self.hands)
        green = max(hand.green for hand in self.hands)
        blue = max(hand.blue for hand in self.hands)
        return red * green * blue


def parse(text: str) -> List[Game]:
    return read_lines(text, Game.from_str)


def part1(games: List[Game]) -> int:
    return sum(game.id for game in games if all(hand.possible() for hand in game.hands))


def part2(games: List[Game]) -> int:
    return sum(game.power() for game in games)


DAY = Day(
    title="Cube Conundrum",
    display=(
        "The sum of the IDs of the possible games is {answer}.",
        "The sum of the powers is {answer}.",
    ),
    parse=parse,
    part1=part1,
    part2=part2,
    examples=Examples.single(EXAMPLE, answers=("8", "2286")),
)
