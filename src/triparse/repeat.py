"""
Repetition engine.
"""

import copy
from typing import Any, Sized, TypeVar

from typing_extensions import Protocol

from .parser import Parser
from .result import CollectOutcome, FatalError, Matched, Outcome

__all__ = ("Appendable", "collect_repeating", "normalize")

A = TypeVar("A")
A_contra = TypeVar("A_contra", contravariant=True)
E = TypeVar("E")
S = TypeVar("S")


class Appendable(Protocol[A_contra]):
    """
    Collection that parsed values can be appended to, such as ``list``,
    ``bytearray`` or ``collections.deque``.
    """

    def append(self, item: A_contra) -> None:
        ...


C = TypeVar("C", bound=Appendable[Any])


def _consumed(before: S, after: S) -> bool:
    if isinstance(before, Sized) and isinstance(after, Sized):
        return len(after) < len(before)
    return after is not before


def collect_repeating(
        collection: C, sequence: S,
        parser: Parser[S, A, E]) -> CollectOutcome[C, S, E]:
    """
    Applies ``parser`` repeatedly, each time to the remainder left by the
    previous application, and appends parsed values to a copy of
    ``collection``.

    Stops at the first ``NoMatch`` and returns the collected values together
    with the sequence that attempt was given. Stops at the first
    ``FatalError`` and returns it, dropping everything collected so far.
    Zero repetitions is a match.

    ``parser`` must consume input whenever it matches.

    >>> from triparse.primitive import is_equal_to, read_matching
    >>> from triparse.repeat import collect_repeating

    >>> a = lambda s: read_matching(s, is_equal_to("a"))

    >>> collect_repeating([], "aaab", a)
    Matched(value=['a', 'a', 'a'], rest='b')
    >>> collect_repeating([], "bbb", a)
    Matched(value=[], rest='bbb')

    :param collection: Initial collection, anything with an ``append``
        method; it is copied and not modified
    :param sequence: Sequence to parse
    :param parser: Parser to repeat
    :raise: :exc:`RuntimeError` if ``parser`` matches without consuming
        input
    """

    value = copy.copy(collection)
    r = parser(sequence)
    while type(r) is Matched:
        if not _consumed(sequence, r.rest):
            raise RuntimeError(
                "parser shouldn't match without consuming input"
            )
        value.append(r.value)
        sequence = r.rest
        r = parser(sequence)
    if type(r) is FatalError:
        return r
    return Matched(value, sequence)


def normalize(outcome: CollectOutcome[C, S, E]) -> Outcome[C, S, E]:
    """
    Turns the outcome of :func:`collect_repeating` into an ordinary outcome,
    so it can be combined with ``chain``, ``transform`` and ``fallback``.

    >>> from triparse.primitive import read_one
    >>> from triparse.repeat import collect_repeating, normalize

    >>> normalize(collect_repeating([], "ab", read_one)).transform(len)
    Matched(value=2, rest='')

    :param outcome: Outcome of the repetition
    :raise: :exc:`TypeError` if ``outcome`` is neither ``Matched`` nor
        ``FatalError``
    """

    if type(outcome) is Matched or type(outcome) is FatalError:
        return outcome
    raise TypeError(
        "expected Matched or FatalError, got {!r}".format(outcome)
    )
