"""
Primitive parsers built directly on the sequence abstraction.
"""

from typing import Any, Callable, TypeVar

from .result import Matched, NoMatch, Outcome
from .sequence import split_first

__all__ = ("read_one", "read_matching", "is_equal_to")

A = TypeVar("A")
E = TypeVar("E")
S = TypeVar("S")


def read_one(sequence: S) -> Outcome[Any, S, E]:
    """
    Reads the first part of ``sequence``. Doesn't match an empty sequence.

    >>> from triparse.primitive import read_one

    >>> read_one("abc")
    Matched(value='a', rest='bc')
    >>> read_one("")
    NoMatch()

    :param sequence: Sequence to read from
    """

    split = split_first(sequence)
    if split is None:
        return NoMatch()
    part, rest = split
    return Matched(part, rest)


def read_matching(
        sequence: S, test: Callable[[Any], bool]) -> Outcome[Any, S, E]:
    """
    Reads the first part of ``sequence`` if ``test`` returns ``True`` for
    it.

    >>> from triparse.primitive import read_matching

    >>> read_matching("1a", str.isdigit)
    Matched(value='1', rest='a')
    >>> read_matching("a1", str.isdigit)
    NoMatch()

    :param sequence: Sequence to read from
    :param test: Predicate for the first part
    """

    return read_one(sequence).chain(
        lambda part, rest: Matched(part, rest) if test(part) else NoMatch()
    )


def is_equal_to(x: A) -> Callable[[A], bool]:
    """
    Returns a predicate that is true for values equal to ``x``.

    :param x: Value to compare with
    """

    def is_equal(part: A) -> bool:
        return bool(part == x)

    return is_equal
