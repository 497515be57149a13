"""
Generic delimiter-sniffing tokenizer.

Puzzle inputs are mostly lists of lists: paragraphs of lines, lines of
comma separated values, rows of single characters. Rather than writing a
format string per puzzle, the tokenizer checks which of a fixed list of
delimiters occur in the text and splits on the first one (and the second
one, for nested input). Puzzles with an irregular grammar bypass this and
use their own regular expressions.
"""

from __future__ import annotations
import logging
from typing import Callable, Dict, List, Sequence, Tuple, TypeVar

from .errors import ParseFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Priority order: the first delimiter present is the outer split.
DELIMITERS: Tuple[str, ...] = ("\n\n", "\n", ",", " ", ":", "-")


def _normalize(text: str) -> str:
    # Files on disk end with a newline, embedded examples usually don't.
    return text.rstrip("\n")


def _convert(fragment: str, convert: Callable[[str], T]) -> T:
    try:
        return convert(fragment)
    except ParseFailure:
        raise
    except (ValueError, KeyError, TypeError) as err:
        raise ParseFailure(f"Cannot convert {fragment!r}: {err}") from err


def detect_delimiters(text: str) -> List[str]:
    """Return the delimiters present in ``text``, in priority order."""
    found = [delim for delim in DELIMITERS if delim in text]
    logger.debug("found delimiters: %r", found)
    return found


def _first_delimiter(text: str) -> Tuple[str, List[str]]:
    if not text:
        raise ParseFailure("Empty input")
    found = detect_delimiters(text)
    if not found:
        raise ParseFailure(f"No known delimiter in input: {text[:40]!r}")
    return found[0], found


def read_vec1(text: str, convert: Callable[[str], T] = str) -> List[T]:
    """
    Split ``text`` on its highest priority delimiter and convert each piece.

    Raises:
        ParseFailure: if no delimiter is present or a piece fails to convert
    """
    text = _normalize(text)
    first, _ = _first_delimiter(text)
    logger.debug("parse list delimited by %r", first)
    return [_convert(piece, convert) for piece in text.split(first)]


def read_vec2(text: str, convert: Callable[[str], T] = str) -> List[List[T]]:
    """
    Split ``text`` into groups on the first delimiter, then each group on the
    second delimiter. Without a second delimiter every group is split into
    single characters, which covers dense character grids.
    """
    text = _normalize(text)
    first, found = _first_delimiter(text)
    groups = text.split(first)
    if len(found) > 1:
        second = found[1]
        logger.debug("parse list delimited by %r of lists delimited by %r", first, second)
        return [
            [_convert(piece, convert) for piece in group.split(second)]
            for group in groups
        ]
    logger.debug("parse list delimited by %r of character lists", first)
    return [[_convert(char, convert) for char in group] for group in groups]


def read_lines(text: str, convert: Callable[[str], T] = str) -> List[T]:
    """
    Convert every line of ``text``. Unlike read_vec1 this never sniffs, so a
    single record without newlines is still a one-element list.
    """
    text = _normalize(text).strip()
    if not text:
        raise ParseFailure("Empty input")
    return [_convert(line, convert) for line in text.split("\n")]


def read_map(text: str, convert: Callable[[str], T]) -> Dict[Tuple[int, int], T]:
    """
    Read a character grid into a sparse ``{(x, y): cell}`` mapping where x is
    the column and y the row. Rows are only split on newlines, so grids may
    contain any of the other delimiters as cell characters.
    """
    text = _normalize(text)
    if not text:
        raise ParseFailure("Empty grid")
    cells: Dict[Tuple[int, int], T] = {}
    for y, row in enumerate(text.split("\n")):
        for x, char in enumerate(row):
            cells[(x, y)] = _convert(char, convert)
    logger.debug("read grid with %d cells", len(cells))
    return cells


def join_vec1(pieces: Sequence[str], delimiter: str) -> str:
    return delimiter.join(pieces)


def join_vec2(groups: Sequence[Sequence[str]], delimiters: Sequence[str]) -> str:
    """Inverse of read_vec2 for string elements, given the detected delimiters."""
    inner = delimiters[1] if len(delimiters) > 1 else ""
    return delimiters[0].join(inner.join(group) for group in groups)
