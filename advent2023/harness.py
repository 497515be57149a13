"""
Running puzzles: input loading, single and batch evaluation, example checks.
"""

from __future__ import annotations
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

import orjson

from .core.errors import ComputeFailure, ParseFailure
from .days.base import DayHandle, Part
from .utils import render_pair

logger = logging.getLogger(__name__)


@dataclass
class DayResult:
    """Outcome of evaluating one day, ready for display."""
    day_num: int
    title: str
    display: Tuple[str, str]
    answers: Optional[Tuple[str, str]] = None
    error: Optional[str] = None
    elapsed: float = 0.0
    example: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    def rendered(self) -> Tuple[str, str]:
        if self.answers is None:
            raise ValueError(f"Day {self.day_num} has no answers: {self.error}")
        return render_pair(self.display, self.answers)

    def to_record(self) -> Dict[str, Any]:
        return {
            "day": self.day_num,
            "title": self.title,
            "example": self.example,
            "part1": self.answers[0] if self.answers else None,
            "part2": self.answers[1] if self.answers else None,
            "error": self.error,
            "elapsed": round(self.elapsed, 6),
        }


@dataclass
class ExampleCheck:
    day_num: int
    expected: Tuple[str, str]
    actual: Optional[Tuple[str, str]] = None
    error: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.actual == self.expected


def input_paths(day_num: int, inputs_dir: str = "inputs") -> List[Path]:
    """Where the input for a day may live, in lookup order."""
    name = f"day{day_num:02}.txt"
    return [Path(inputs_dir) / name, Path("..") / inputs_dir / name]


def load_input(day_num: int, inputs_dir: str = "inputs") -> str:
    """
    Read a day's puzzle input.

    Raises:
        FileNotFoundError: If none of the candidate paths exist
        ParseFailure: If the file is not UTF-8 text
    """
    candidates = input_paths(day_num, inputs_dir)
    for path in candidates:
        if path.is_file():
            logger.debug("reading %s", path)
            try:
                return path.read_text(encoding="utf-8")
            except UnicodeDecodeError as err:
                raise ParseFailure(f"{path} is not UTF-8 text: {err}") from err
    raise FileNotFoundError(
        f"No input for day {day_num}, tried: {', '.join(str(p) for p in candidates)}"
    )


def solve_examples(day: DayHandle) -> Tuple[str, str]:
    """Answers for the primary examples; distinct examples are solved per part."""
    examples = day.get_examples()
    if examples.same:
        return day.both(examples.first)
    return day.calc(Part.FIRST, examples.first), day.calc(Part.SECOND, examples.second)


def run_day(
    day_num: int,
    day: DayHandle,
    example: bool = False,
    inputs_dir: str = "inputs",
) -> DayResult:
    """
    Evaluate one day against its input file or its embedded examples.

    Parse and compute failures are captured in the result instead of raised,
    so one broken day does not stop a batch.
    """
    result = DayResult(
        day_num=day_num,
        title=day.get_title(),
        display=day.get_display(),
        example=example,
    )
    start = time.perf_counter()
    try:
        if example:
            result.answers = solve_examples(day)
        else:
            result.answers = day.both(load_input(day_num, inputs_dir))
    except (ParseFailure, ComputeFailure, OSError) as e:
        logger.error("day %d failed: %s", day_num, e)
        result.error = f"{type(e).__name__}: {e}"
    result.elapsed = time.perf_counter() - start
    return result


def run_days(
    days: Dict[int, DayHandle],
    example: bool = False,
    inputs_dir: str = "inputs",
    parallel: bool = False,
    max_workers: Optional[int] = None,
) -> List[DayResult]:
    """
    Evaluate several days, returning results in day order.

    With ``parallel`` every day runs on its own worker thread; days share no
    state, so results are only joined back for display.
    """
    items = sorted(days.items())
    if not parallel:
        return [run_day(n, d, example, inputs_dir) for n, d in items]

    with ThreadPoolExecutor(max_workers=max_workers or len(items) or 1) as pool:
        futures = []
        for day_num, day in items:
            logger.info("spawn day %d", day_num)
            futures.append(pool.submit(run_day, day_num, day, example, inputs_dir))
        return [f.result() for f in futures]


def check_examples(days: Dict[int, DayHandle]) -> List[ExampleCheck]:
    """Run every day's primary examples against the expected answers."""
    checks = []
    for day_num, day in sorted(days.items()):
        check = ExampleCheck(day_num=day_num, expected=day.get_expected())
        try:
            check.actual = solve_examples(day)
        except (ParseFailure, ComputeFailure) as e:
            check.error = f"{type(e).__name__}: {e}"
        if not check.passed:
            logger.warning("day %d example mismatch: %r != %r", day_num, check.actual, check.expected)
        checks.append(check)
    return checks


def write_results(results: Iterable[DayResult], out_path: str) -> None:
    """Append one JSON line per result."""
    path = Path(out_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("ab") as f:
        for r in results:
            f.write(orjson.dumps(r.to_record()) + b"\n")
