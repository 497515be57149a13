"""
Day 8: Haunted Wasteland

Part 2 walks every ghost separately and combines the step counts with a
least common multiple. That only works because, in the puzzle inputs, each
ghost reaches its first end node after exactly one full cycle of its loop.
It is not a general solution for walks with a lead-in before the cycle.
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from enum import Enum
from functools import reduce
from typing import Callable, Dict, List, Tuple

from ..core.errors import ComputeFailure, ParseFailure
from .base import Day, Examples

logger = logging.getLogger(__name__)

EXAMPLE_1_1 = """RL

AAA = (BBB, CCC)
BBB = (DDD, EEE)
CCC = (ZZZ, GGG)
DDD = (DDD, DDD)
EEE = (EEE, EEE)
GGG = (GGG, GGG)
ZZZ = (ZZZ, ZZZ)"""

EXAMPLE_1_2 = """LLR

AAA = (BBB, BBB)
BBB = (AAA, ZZZ)
ZZZ = (ZZZ, ZZZ)"""

EXAMPLE_2 = """LR

11A = (11B, XXX)
11B = (XXX, 11Z)
11Z = (11B, XXX)
22A = (22B, XXX)
22B = (22C, 22C)
22C = (22Z, 22Z)
22Z = (22B, 22B)
XXX = (XXX, XXX)"""

RE_NODE = re.compile(r"(?P<from>\w{3}) = \((?P<left>\w{3}), (?P<right>\w{3})\)")

START = "AAA"
END = "ZZZ"


class Direction(Enum):
    LEFT = "L"
    RIGHT = "R"


@dataclass(frozen=True)
class Documents:
    instructions: Tuple[Direction, ...]
    nodes: Dict[str, Tuple[str, str]]

    def get_direction(self, step: int) -> Direction:
        return self.instructions[step % len(self.instructions)]

    def next_node(self, node: str, step: int) -> str:
        left, right = self.nodes[node]
        return left if self.get_direction(step) is Direction.LEFT else right

    def walk(self, start: str, is_end: Callable[[str], bool]) -> int:
        """
        Count steps from ``start`` until ``is_end`` holds.

        Raises:
            ComputeFailure: If ``start`` is unknown or the walk loops without
                ever reaching an end node
        """
        if start not in self.nodes:
            raise ComputeFailure(f"No node {start}")
        seen = set()
        node, step = start, 0
        while not is_end(node):
            state = (node, step % len(self.instructions))
            if state in seen:
                raise ComputeFailure(f"Walk from {start} loops forever at {node}")
            seen.add(state)
            node = self.next_node(node, step)
            step += 1
        return step


def _parse_node(line: str) -> Tuple[str, Tuple[str, str]]:
    match = RE_NODE.fullmatch(line)
    if not match:
        raise ParseFailure(f"Unexpected node {line!r}")
    return match["from"], (match["left"], match["right"])


def parse(text: str) -> Documents:
    first, sep, rest = text.strip().partition("\n\n")
    if not sep:
        raise ParseFailure("Expected instructions, a blank line, then nodes")
    try:
        instructions = tuple(Direction(c) for c in first)
    except ValueError as err:
        raise ParseFailure(f"Unexpected instructions {first!r}") from err
    nodes = dict(_parse_node(line) for line in rest.split("\n"))
    for node, successors in nodes.items():
        for successor in successors:
            if successor not in nodes:
                raise ParseFailure(f"{node} leads to unknown node {successor}")
    logger.debug("%d instructions, %d nodes", len(instructions), len(nodes))
    return Documents(instructions=instructions, nodes=nodes)


def greatest_common_divisor(a: int, b: int) -> int:
    while b:
        a, b = b, a % b
    return a


def least_common_multiple(a: int, b: int) -> int:
    return a * b // greatest_common_divisor(a, b)


def part1(documents: Documents) -> int:
    return documents.walk(START, lambda node: node == END)


def part2(documents: Documents) -> int:
    starts = [node for node in documents.nodes if node.endswith("A")]
    if not starts:
        raise ComputeFailure("No ghost start nodes")
    logger.debug("starting: %r", starts)
    steps: List[int] = [documents.walk(node, lambda n: n.endswith("Z")) for node in starts]
    logger.debug("steps: %r", steps)
    return reduce(least_common_multiple, steps)


DAY = Day(
    title="Haunted Wasteland",
    display=(
        "{answer} steps are required to reach ZZZ.",
        "{answer} steps are required to reach **Z.",
    ),
    parse=parse,
    part1=part1,
    part2=part2,
    examples=Examples(
        part1=(EXAMPLE_1_2, EXAMPLE_1_1),
        part2=(EXAMPLE_2,),
        answers=("6", "6"),
    ),
)
