"""
Day 5: If You Give A Seed A Fertilizer

The almanac is a chain of remapping tables from "seed" to "location". Part 2
asks for the lowest location reachable from any seed in a set of huge seed
ranges. Two searches give the same answer:

- ``probe``: try locations 0, 1, 2, ... and invert each one through the chain
  until a preimage lands in a seed range. Simple, but slow on real inputs.
- ``ranges``: push whole seed intervals forward through every table, splitting
  them at rule boundaries, and take the lowest start. This is the default.

``DAY`` uses the search chosen with ``select_search``; the CLI picks it from
``ADVENT_ALMANAC_SEARCH``.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from ..core.errors import ComputeFailure, ParseFailure
from ..core.tokenizer import read_vec1
from .base import Day, Examples

logger = logging.getLogger(__name__)

EXAMPLE = """seeds: 79 14 55 13

seed-to-soil map:
50 98 2
52 50 48

soil-to-fertilizer map:
0 15 37
37 52 2
39 0 15

fertilizer-to-water map:
49 53 8
0 11 42
42 0 7
57 7 4

water-to-light map:
88 18 7
18 25 70

light-to-temperature map:
45 77 23
81 45 19
68 64 13

temperature-to-humidity map:
0 69 1
1 0 69

humidity-to-location map:
60 56 37
56 93 4"""

FIRST_CATEGORY = "seed"
LAST_CATEGORY = "location"

# Half-open [start, end)
Interval = Tuple[int, int]


@dataclass(frozen=True)
class RangeRule:
    destination: int
    source: int
    length: int

    @classmethod
    def from_str(cls, s: str) -> "RangeRule":
        fields = s.split()
        if len(fields) != 3:
            raise ParseFailure(f"Expected 'destination source length', got {s!r}")
        try:
            destination, source, length = (int(f) for f in fields)
        except ValueError as err:
            raise ParseFailure(f"Non-numeric range {s!r}") from err
        return cls(destination, source, length)

    @property
    def source_end(self) -> int:
        return self.source + self.length

    @property
    def offset(self) -> int:
        return self.destination - self.source

    def convert(self, value: int) -> Optional[int]:
        if self.source <= value < self.source_end:
            return value + self.offset
        return None

    def invert_convert(self, value: int) -> Optional[int]:
        if self.destination <= value < self.destination + self.length:
            return value - self.offset
        return None


@dataclass(frozen=True)
class Table:
    source: str
    destination: str
    rules: Tuple[RangeRule, ...]

    @classmethod
    def from_str(cls, s: str) -> "Table":
        header, *lines = s.split("\n")
        naming, _, suffix = header.partition(" ")
        source, sep, destination = naming.partition("-to-")
        if suffix != "map:" or not sep:
            raise ParseFailure(f"Unexpected table header {header!r}")
        return cls(source, destination, tuple(RangeRule.from_str(line) for line in lines))

    def convert(self, value: int) -> int:
        """First rule covering ``value`` wins; otherwise ``value`` passes through."""
        for rule in self.rules:
            converted = rule.convert(value)
            if converted is not None:
                return converted
        return value

    def invert_convert(self, value: int) -> Set[int]:
        """Every input that this table converts to ``value``."""
        candidates = {value}
        for rule in self.rules:
            inverted = rule.invert_convert(value)
            if inverted is not None:
                candidates.add(inverted)
        return {c for c in candidates if self.convert(c) == value}

    def convert_intervals(self, intervals: List[Interval]) -> List[Interval]:
        converted: List[Interval] = []
        pending = list(intervals)
        for rule in self.rules:
            unmatched: List[Interval] = []
            for start, end in pending:
                lo = max(start, rule.source)
                hi = min(end, rule.source_end)
                if lo >= hi:
                    unmatched.append((start, end))
                    continue
                converted.append((lo + rule.offset, hi + rule.offset))
                if start < lo:
                    unmatched.append((start, lo))
                if hi < end:
                    unmatched.append((hi, end))
            pending = unmatched
        return converted + pending


@dataclass(frozen=True)
class Almanac:
    seeds: Tuple[int, ...]
    seed_ranges: Tuple[Interval, ...]
    tables: Tuple[Table, ...]

    def convert(self, seed: int) -> int:
        value = seed
        for table in self.tables:
            value = table.convert(value)
        return value

    def invert_convert(self, location: int) -> Set[int]:
        values = {location}
        for table in reversed(self.tables):
            values = {v for value in values for v in table.invert_convert(value)}
        return values

    def in_seed_ranges(self, seed: int) -> bool:
        return any(start <= seed < end for start, end in self.seed_ranges)

    def location_bound(self) -> int:
        """Every seed in a seed range converts to a location below this."""
        ends = [end for _, end in self.seed_ranges]
        for table in self.tables:
            ends.extend(rule.destination + rule.length for rule in table.rules)
        return max(ends)


def _parse_seeds(section: str) -> Tuple[Tuple[int, ...], Tuple[Interval, ...]]:
    label, _, numbers = section.partition(":")
    if label != "seeds":
        raise ParseFailure(f"Expected seeds, got {section!r}")
    try:
        seeds = tuple(int(n) for n in numbers.split())
    except ValueError as err:
        raise ParseFailure(f"Non-numeric seeds {numbers!r}") from err
    if not seeds or len(seeds) % 2:
        raise ParseFailure(f"Seeds must come in start/length pairs, got {len(seeds)} values")
    if not all(seeds[1::2]):
        raise ParseFailure(f"Seed ranges must not be empty, got lengths {seeds[1::2]}")
    ranges = tuple(
        (start, start + length) for start, length in zip(seeds[::2], seeds[1::2])
    )
    return seeds, ranges


def _check_chain(tables: List[Table]) -> None:
    if not tables:
        raise ParseFailure("Almanac has no tables")
    if tables[0].source != FIRST_CATEGORY:
        raise ParseFailure(f"Chain starts at {tables[0].source!r}, not {FIRST_CATEGORY!r}")
    for before, after in zip(tables, tables[1:]):
        if before.destination != after.source:
            raise ParseFailure(
                f"{before.source}-to-{before.destination} is followed by "
                f"{after.source}-to-{after.destination}"
            )
    if tables[-1].destination != LAST_CATEGORY:
        raise ParseFailure(f"Chain ends at {tables[-1].destination!r}, not {LAST_CATEGORY!r}")


def parse(text: str) -> Almanac:
    seeds_section, *table_sections = read_vec1(text.strip(), str)
    seeds, seed_ranges = _parse_seeds(seeds_section)
    tables = [Table.from_str(section) for section in table_sections]
    _check_chain(tables)
    logger.debug("%d seeds, %d tables", len(seeds), len(tables))
    return Almanac(seeds=seeds, seed_ranges=seed_ranges, tables=tuple(tables))


def lowest_location_by_probe(almanac: Almanac) -> int:
    """
    Raises:
        ComputeFailure: If no location below ``almanac.location_bound()``
            inverts into a seed range
    """
    bound = almanac.location_bound()
    for location in range(bound):
        seeds = almanac.invert_convert(location)
        if any(almanac.in_seed_ranges(seed) for seed in seeds):
            return location
        if location and location % 1_000_000 == 0:
            logger.info("probed up to location %d", location)
    raise ComputeFailure(f"No seed reaches a location below {bound}")


def lowest_location_by_ranges(almanac: Almanac) -> int:
    intervals = list(almanac.seed_ranges)
    for table in almanac.tables:
        intervals = table.convert_intervals(intervals)
        logger.debug("%s: %d intervals", table.destination, len(intervals))
    starts = [start for start, end in intervals if start < end]
    if not starts:
        raise ComputeFailure("No seed range survives the table chain")
    return min(starts)


SEARCHES = {
    "probe": lowest_location_by_probe,
    "ranges": lowest_location_by_ranges,
}

DEFAULT_SEARCH = "ranges"
_selected_search = DEFAULT_SEARCH


def select_search(name: str) -> None:
    """
    Choose the search ``part2`` uses when none is passed.

    Raises:
        ValueError: If ``name`` is not one of ``SEARCHES``
    """
    global _selected_search
    if name not in SEARCHES:
        raise ValueError(f"Unknown almanac search: {name}\nSupported: {', '.join(SEARCHES)}")
    _selected_search = name


def part1(almanac: Almanac) -> int:
    return min(almanac.convert(seed) for seed in almanac.seeds)


def part2(almanac: Almanac, search: str | None = None) -> int:
    return SEARCHES[search or _selected_search](almanac)


DAY = Day(
    title="If You Give A Seed A Fertilizer",
    display=(
        "The lowest location number is {answer}.",
        "The lowest location number given ranges is {answer}.",
    ),
    parse=parse,
    part1=part1,
    part2=part2,
    examples=Examples.single(EXAMPLE, answers=("35", "46")),
)
