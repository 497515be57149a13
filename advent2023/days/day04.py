"""
Day 4: Scratchcards
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from typing import Dict, FrozenSet, List

from ..core.errors import ParseFailure
from ..core.tokenizer import read_lines
from .base import Day, Examples

logger = logging.getLogger(__name__)

EXAMPLE = """Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53
Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19
Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1
Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83
Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36
Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11"""

RE_CARD = re.compile(r"Card +(?P<id>\d+):(?P<winning>.+)\|(?P<selected>.+)")


def _numbers(field: str, name: str) -> FrozenSet[int]:
    try:
        return frozenset(int(n) for n in field.split())
    except ValueError as err:
        raise ParseFailure(f"{name} {field!r}") from err


@dataclass(frozen=True)
class Card:
    id: int
    winning: FrozenSet[int]
    selected: FrozenSet[int]

    @classmethod
    def from_str(cls, s: str) -> "Card":
        match = RE_CARD.fullmatch(s)
        if not match:
            raise ParseFailure(f"Unexpected card {s!r}")
        return cls(
            id=int(match["id"]),
            winning=_numbers(match["winning"], "winning"),
            selected=_numbers(match["selected"], "selected"),
        )

    def count_matching(self) -> int:
        return len(self.winning & self.selected)

    def points(self) -> int:
        won = self.count_matching()
        if won == 0:
            return 0
        return 1 << (won - 1)


def parse(text: str) -> List[Card]:
    cards = read_lines(text, Card.from_str)
    # copies are handed out by id, so the pile must be in order without gaps
    for previous, card in zip(cards, cards[1:]):
        if card.id != previous.id + 1:
            raise ParseFailure(f"Card {card.id} follows card {previous.id}")
    return cards


def part1(cards: List[Card]) -> int:
    return sum(card.points() for card in cards)


def part2(cards: List[Card]) -> int:
    copies: Dict[int, int] = {card.id: 1 for card in cards}
    for card in cards:
        count = copies[card.id]
        for won_id in range(card.id + 1, card.id + card.count_matching() + 1):
            if won_id in copies:
                copies[won_id] += count
    logger.debug("copies: %r", copies)
    return sum(copies.values())


DAY = Day(
    title="Scratchcards",
    display=(
        "The scratchcards are worth {answer} points.",
        "We end up with {answer} scratchcards.",
    ),
    parse=parse,
    part1=part1,
    part2=part2,
    examples=Examples.single(EXAMPLE, answers=("13", "30")),
)
