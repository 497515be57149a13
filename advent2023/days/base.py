from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Protocol, Tuple


class Part(Enum):
    FIRST = 1
    SECOND = 2


@dataclass(frozen=True)
class Examples:
    """Embedded example inputs for a day, with the answers they must produce."""
    common: Tuple[str, ...] = ()    # shared by both parts
    part1: Tuple[str, ...] = ()     # part-specific, take precedence over common
    part2: Tuple[str, ...] = ()
    answers: Tuple[str, str] = ("", "")  # expected answers for the primary examples

    @classmethod
    def single(cls, text: str, answers: Tuple[str, str]) -> "Examples":
        return cls(common=(text,), answers=answers)

    @classmethod
    def pair(cls, first: str, second: str, answers: Tuple[str, str]) -> "Examples":
        return cls(part1=(first,), part2=(second,), answers=answers)


@dataclass(frozen=True)
class PrimaryExample:
    """The example text each part should be demonstrated with."""
    first: str
    second: str

    @property
    def same(self) -> bool:
        return self.first == self.second


@dataclass(frozen=True)
class Day:
    """
    One puzzle: a parser from raw text to a model, two part functions over
    that model, and the text used to present the answers.

    The model type is private to the day module; callers only ever see the
    stringified answers.
    """
    title: str
    display: Tuple[str, str]        # each contains exactly one {answer}
    parse: Callable[[str], Any]
    part1: Callable[[Any], Any]
    part2: Callable[[Any], Any]
    examples: Examples

    def get_title(self) -> str:
        return self.title

    def get_display(self) -> Tuple[str, str]:
        return self.display

    def get_examples(self) -> PrimaryExample:
        first = (self.examples.part1 or self.examples.common)[0]
        second = (self.examples.part2 or self.examples.common)[0]
        return PrimaryExample(first=first, second=second)

    def get_expected(self) -> Tuple[str, str]:
        """Answers the primary examples must produce."""
        return self.examples.answers

    def calc(self, part: Part, text: str) -> str:
        """
        Parse ``text`` and compute a single part.

        Raises:
            ParseFailure: If the input is malformed
            ComputeFailure: If the model breaks an assumption of the part
        """
        model = self.parse(text)
        func = self.part1 if part is Part.FIRST else self.part2
        return str(func(model))

    def both(self, text: str) -> Tuple[str, str]:
        """Parse once and compute both parts from the same model."""
        model = self.parse(text)
        return str(self.part1(model)), str(self.part2(model))


class DayHandle(Protocol):
    """Interface the harness and CLI use, independent of the day's model."""

    def get_title(self) -> str:
        ...

    def get_display(self) -> Tuple[str, str]:
        ...

    def get_examples(self) -> PrimaryExample:
        ...

    def get_expected(self) -> Tuple[str, str]:
        ...

    def calc(self, part: Part, text: str) -> str:
        ...

    def both(self, text: str) -> Tuple[str, str]:
        ...
