"""
CLI commands for running the puzzle solvers.
"""

from .solve import main as run_solve
from .list_days import main as show_days
from .check_examples import main as run_example_check

__all__ = [
    "run_solve",
    "show_days",
    "run_example_check",
]
