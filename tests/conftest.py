"""Pytest configuration shared by all tests.

Puts the project root on sys.path so ``import advent2023`` works without an
install, and isolates every test from the developer's environment and .env.
"""

import os
import sys

import pytest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from advent2023.core.env import KNOWN_KEYS  # noqa: E402
from advent2023.days import day05, get_days  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """No ADVENT_* variables, no stray .env file, default almanac search."""
    for key in KNOWN_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(day05, "_selected_search", day05.DEFAULT_SEARCH)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def all_days():
    return get_days()


@pytest.fixture
def inputs_dir(tmp_path):
    """An empty inputs directory to drop dayNN.txt files into."""
    path = tmp_path / "inputs"
    path.mkdir()
    return path
