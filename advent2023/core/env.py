# advent2023/core/env.py
from __future__ import annotations
import os
from dataclasses import dataclass
from dotenv import load_dotenv

KNOWN_KEYS = [
    "ADVENT_INPUTS_DIR",      # directory with dayNN.txt files
    "ADVENT_LOG_LEVEL",
    "ADVENT_ALMANAC_SEARCH",  # "ranges" or "probe"
]

ALMANAC_STRATEGIES = ("ranges", "probe")


@dataclass(frozen=True)
class Settings:
    inputs_dir: str = "inputs"
    log_level: str = "WARNING"
    almanac_search: str = "ranges"


def load_env(dotenv_path: str | None = None) -> dict[str, str]:
    """
    Load .env once. Returns a dict of which keys are present.
    """
    load_dotenv(dotenv_path or os.getenv("DOTENV_PATH", ".env"), override=False)
    found = {}
    for k in KNOWN_KEYS:
        v = os.getenv(k)
        if v:
            found[k] = v
    return found


def load_settings(dotenv_path: str | None = None) -> Settings:
    """Build Settings from the environment (after loading .env)."""
    load_env(dotenv_path)
    defaults = Settings()
    almanac_search = os.getenv("ADVENT_ALMANAC_SEARCH", defaults.almanac_search).lower()
    if almanac_search not in ALMANAC_STRATEGIES:
        raise ValueError(
            f"Unknown ADVENT_ALMANAC_SEARCH: {almanac_search}\n"
            f"Supported: {', '.join(ALMANAC_STRATEGIES)}"
        )
    return Settings(
        inputs_dir=os.getenv("ADVENT_INPUTS_DIR", defaults.inputs_dir),
        log_level=os.getenv("ADVENT_LOG_LEVEL", defaults.log_level).upper(),
        almanac_search=almanac_search,
    )
