"""
Day 3: Gear Ratios

The engine schematic is read into a sparse grid. Every symbol collects the
numbers touching it (including diagonally); numbers are materialised by
walking left to the start of a digit run and then reading rightward.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple

from ..core.tokenizer import read_map
from .base import Day, Examples

logger = logging.getLogger(__name__)

EXAMPLE = """467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598.."""

GEAR = "*"


class CellKind(Enum):
    BLANK = "blank"
    DIGIT = "digit"
    SYMBOL = "symbol"


@dataclass(frozen=True)
class Cell:
    kind: CellKind
    char: str

    @classmethod
    def from_char(cls, c: str) -> "Cell":
        if c == ".":
            return cls(CellKind.BLANK, c)
        if c in "0123456789":
            return cls(CellKind.DIGIT, c)
        return cls(CellKind.SYMBOL, c)


Position = Tuple[int, int]
Grid = Dict[Position, Cell]


@dataclass
class Part:
    symbol: str
    numbers: List[int] = field(default_factory=list)


@dataclass
class Schematic:
    parts: List[Part]


def _is_digit(grid: Grid, pos: Position) -> bool:
    cell = grid.get(pos)
    return cell is not None and cell.kind is CellKind.DIGIT


def construct_right(grid: Grid, start: Position) -> int:
    """Read the number whose first digit is at ``start``."""
    x, y = start
    digits = []
    while _is_digit(grid, (x, y)):
        digits.append(grid[(x, y)].char)
        x += 1
    return int("".join(digits))


def scan_horizontal(grid: Grid, start: Position) -> int:
    """Read the whole number containing the digit at ``start``."""
    x, y = start
    while _is_digit(grid, (x - 1, y)):
        x -= 1
    return construct_right(grid, (x, y))


def adjacent_numbers(grid: Grid, pos: Position) -> List[int]:
    """Numbers in the 8-neighbourhood of ``pos``, each counted once."""
    x, y = pos
    numbers = []
    # top and bottom
    for off_y in (y - 1, y + 1):
        if _is_digit(grid, (x - 1, off_y)):
            numbers.append(scan_horizontal(grid, (x - 1, off_y)))
            # a second number on the same row, e.g. 123.456
            #                                          *
            if not _is_digit(grid, (x, off_y)) and _is_digit(grid, (x + 1, off_y)):
                numbers.append(construct_right(grid, (x + 1, off_y)))
        elif _is_digit(grid, (x, off_y)):
            numbers.append(construct_right(grid, (x, off_y)))
        elif _is_digit(grid, (x + 1, off_y)):
            numbers.append(construct_right(grid, (x + 1, off_y)))
    # left
    if _is_digit(grid, (x - 1, y)):
        numbers.append(scan_horizontal(grid, (x - 1, y)))
    # right
    if _is_digit(grid, (x + 1, y)):
        numbers.append(construct_right(grid, (x + 1, y)))
    return numbers


def parse(text: str) -> Schematic:
    grid = read_map(text, Cell.from_char)
    parts = [
        Part(symbol=cell.char, numbers=adjacent_numbers(grid, pos))
        for pos, cell in grid.items()
        if cell.kind is CellKind.SYMBOL
    ]
    logger.debug("found %d symbols", len(parts))
    return Schematic(parts=parts)


def part1(schematic: Schematic) -> int:
    return sum(sum(part.numbers) for part in schematic.parts)


def part2(schematic: Schematic) -> int:
    return sum(
        part.numbers[0] * part.numbers[1]
        for part in schematic.parts
        if part.symbol == GEAR and len(part.numbers) == 2
    )


DAY = Day(
    title="Gear Ratios",
    display=(
        "The sum of all of the part numbers in the engine schematic is {answer}.",
        "The sum of all of the gear ratios in the engine schematic is {answer}.",
    ),
    parse=parse,
    part1=part1,
    part2=part2,
    examples=Examples.single(EXAMPLE, answers=("4361", "467835")),
)
