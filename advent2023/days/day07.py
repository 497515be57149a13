"""
Day 7: Camel Cards
"""

from __future__ import annotations
import logging
from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Tuple

from ..core.errors import ComputeFailure, ParseFailure
from ..core.tokenizer import read_lines
from .base import Day, Examples

logger = logging.getLogger(__name__)

EXAMPLE = """32T3K 765
T55J5 684
KK677 28
KTJJT 220
QQQJA 483"""

# Weakest to strongest. Rank 0 is reserved for the joker.
CARD_ORDER = "23456789TJQKA"
JOKER = 0
JACK = CARD_ORDER.index("J") + 1
HAND_SIZE = 5


class HandType(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_KIND = 3
    FULL_HOUSE = 4
    FOUR_KIND = 5
    FIVE_KIND = 6


@dataclass(frozen=True, order=True)
class Hand:
    ranks: Tuple[int, ...]

    @classmethod
    def from_str(cls, s: str) -> "Hand":
        if len(s) != HAND_SIZE or any(c not in CARD_ORDER for c in s):
            raise ParseFailure(f"Not a hand of {HAND_SIZE} cards: {s!r}")
        return cls(tuple(CARD_ORDER.index(c) + 1 for c in s))

    def __str__(self) -> str:
        return "".join("*" if r == JOKER else CARD_ORDER[r - 1] for r in self.ranks)

    def to_joker(self) -> "Hand":
        """Every J becomes a joker: weakest card, but wild for the hand type."""
        return Hand(tuple(JOKER if r == JACK else r for r in self.ranks))

    def hand_type(self) -> HandType:
        counter = Counter(self.ranks)
        jokers = counter.pop(JOKER, 0)
        if len(counter) <= 1:
            return HandType.FIVE_KIND
        counts = sorted(counter.values(), reverse=True)
        top, second = counts[0] + jokers, counts[1]
        if top == 4:
            return HandType.FOUR_KIND
        if top == 3:
            return HandType.FULL_HOUSE if second == 2 else HandType.THREE_KIND
        if top == 2:
            return HandType.TWO_PAIR if second == 2 else HandType.ONE_PAIR
        return HandType.HIGH_CARD


def parse_line(line: str) -> Tuple[Hand, int]:
    hand, sep, bid = line.partition(" ")
    if not sep or not bid.isdigit():
        raise ParseFailure(f"Expected 'hand bid', got {line!r}")
    return Hand.from_str(hand), int(bid)


def parse(text: str) -> List[Tuple[Hand, int]]:
    return read_lines(text, parse_line)


def total_winnings(hands: List[Tuple[Hand, int]]) -> int:
    """Sum of bid times 1-based rank, weakest hand first."""
    ranked = sorted((hand.hand_type(), hand, bid) for hand, bid in hands)
    for (a_type, a_hand, _), (b_type, b_hand, _) in zip(ranked, ranked[1:]):
        if a_type == b_type and a_hand == b_hand:
            raise ComputeFailure(f"Hand {a_hand} appears twice, ranking is ambiguous")
    logger.debug("hands: %s", [(t.name, str(h), b) for t, h, b in ranked])
    return sum(rank * bid for rank, (_, _, bid) in enumerate(ranked, start=1))


def part1(hands: List[Tuple[Hand, int]]) -> int:
    return total_winnings(hands)


def part2(hands: List[Tuple[Hand, int]]) -> int:
    return total_winnings([(hand.to_joker(), bid) for hand, bid in hands])


DAY = Day(
    title="Camel Cards",
    display=(
        "The total winnings are {answer}.",
        "The new total winnings with jokers are {answer}.",
    ),
    parse=parse,
    part1=part1,
    part2=part2,
    examples=Examples.single(EXAMPLE, answers=("6440", "5905")),
)
