"""
Shared plumbing for the puzzle solvers: errors, settings, logging and the
generic delimiter-sniffing tokenizer.
"""

from .errors import ParseFailure, ComputeFailure
from .env import Settings, load_env, load_settings
from .logs import setup_logging
from .tokenizer import (
    DELIMITERS,
    detect_delimiters,
    read_vec1,
    read_vec2,
    read_lines,
    read_map,
    join_vec1,
    join_vec2,
)

__all__ = [
    "ParseFailure",
    "ComputeFailure",
    "Settings",
    "load_env",
    "load_settings",
    "setup_logging",
    "DELIMITERS",
    "detect_delimiters",
    "read_vec1",
    "read_vec2",
    "read_lines",
    "read_map",
    "join_vec1",
    "join_vec2",
]
