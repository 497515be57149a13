"""
Advent of Code 2023 solvers - Core modules.
"""

from .core.errors import ParseFailure, ComputeFailure
from .days import get_day, get_days, Part
from .harness import run_day, run_days, check_examples, load_input
from .utils import render_display

__all__ = [
    "ParseFailure",
    "ComputeFailure",
    "get_day",
    "get_days",
    "Part",
    "run_day",
    "run_days",
    "check_examples",
    "load_input",
    "render_display",
]
