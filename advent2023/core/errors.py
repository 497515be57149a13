"""Failure types raised by parsers and part functions."""


class ParseFailure(ValueError):
    """Raw puzzle input could not be turned into a model."""


class ComputeFailure(RuntimeError):
    """A parsed model broke an assumption the part function relies on."""
