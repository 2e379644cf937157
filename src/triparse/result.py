"""
Outcome of a single parser application and combinators over it.

An outcome is exactly one of :class:`Matched`, :class:`NoMatch` and
:class:`FatalError`. ``NoMatch`` is recoverable and is replaced by an
alternative in :func:`fallback`. ``FatalError`` passes unchanged through
every combinator.
"""

from typing import Callable, Generic, NoReturn, TypeVar, Union

from typing_extensions import final

from .types import ParseError

__all__ = (
    "Matched", "NoMatch", "FatalError", "Outcome", "CollectOutcome",
    "transform", "chain", "fallback"
)

A = TypeVar("A")
A_co = TypeVar("A_co", covariant=True)
B = TypeVar("B")
C = TypeVar("C")
E = TypeVar("E")
E_co = TypeVar("E_co", covariant=True)
S = TypeVar("S")


@final
class Matched(Generic[A_co, S]):
    """
    A value was parsed, ``rest`` is the unconsumed part of the input.
    """

    __slots__ = "value", "rest"

    def __init__(self, value: A_co, rest: S):
        self.value = value
        self.rest = rest

    def __repr__(self) -> str:
        return "Matched(value={!r}, rest={!r})".format(self.value, self.rest)

    def __eq__(self, other: object) -> bool:
        if type(other) is not Matched:
            return NotImplemented
        return self.value == other.value and self.rest == other.rest

    def __hash__(self) -> int:
        return hash((Matched, self.value, self.rest))

    def transform(self, fn: Callable[[A_co], B]) -> "Matched[B, S]":
        return Matched(fn(self.value), self.rest)

    def chain(
            self, fn: Callable[[A_co, S], "Outcome[B, S, E]"]
    ) -> "Outcome[B, S, E]":
        return fn(self.value, self.rest)

    def fallback(self, fn: object) -> "Matched[A_co, S]":
        return self

    def unwrap(self) -> A_co:
        return self.value

    def is_matched(self) -> bool:
        return True

    def is_no_match(self) -> bool:
        return False

    def is_fatal(self) -> bool:
        return False


@final
class NoMatch:
    """
    The parser is not applicable to the input. Carries no information.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "NoMatch()"

    def __eq__(self, other: object) -> bool:
        if type(other) is not NoMatch:
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(NoMatch)

    def transform(self, fn: object) -> "NoMatch":
        return self

    def chain(self, fn: object) -> "NoMatch":
        return self

    def fallback(self, fn: Callable[[], A]) -> A:
        return fn()

    def unwrap(self) -> NoReturn:
        raise ParseError(self)

    def is_matched(self) -> bool:
        return False

    def is_no_match(self) -> bool:
        return True

    def is_fatal(self) -> bool:
        return False


@final
class FatalError(Generic[E_co]):
    """
    Parsing can't continue. ``error`` is a payload defined by the grammar.
    """

    __slots__ = "error",

    def __init__(self, error: E_co):
        self.error = error

    def __repr__(self) -> str:
        return "FatalError(error={!r})".format(self.error)

    def __eq__(self, other: object) -> bool:
        if type(other) is not FatalError:
            return NotImplemented
        return bool(self.error == other.error)

    def __hash__(self) -> int:
        return hash((FatalError, self.error))

    def transform(self, fn: object) -> "FatalError[E_co]":
        return self

    def chain(self, fn: object) -> "FatalError[E_co]":
        return self

    def fallback(self, fn: object) -> "FatalError[E_co]":
        return self

    def unwrap(self) -> NoReturn:
        raise ParseError(self)

    def is_matched(self) -> bool:
        return False

    def is_no_match(self) -> bool:
        return False

    def is_fatal(self) -> bool:
        return True


Outcome = Union[Matched[A, S], NoMatch, FatalError[E]]
CollectOutcome = Union[Matched[C, S], FatalError[E]]


def transform(
        outcome: Outcome[A, S, E], fn: Callable[[A], B]) -> Outcome[B, S, E]:
    """
    Applies ``fn`` to the parsed value. ``NoMatch`` and ``FatalError`` are
    returned unchanged and ``fn`` is not called.

    >>> from triparse.result import Matched, NoMatch, transform

    >>> transform(Matched("1", ""), int)
    Matched(value=1, rest='')
    >>> transform(NoMatch(), int)
    NoMatch()

    :param outcome: Outcome to transform
    :param fn: Function to produce new value from the parsed one
    """

    return outcome.transform(fn)


def chain(
        outcome: Outcome[A, S, E],
        fn: Callable[[A, S], Outcome[B, S, E]]) -> Outcome[B, S, E]:
    """
    Calls ``fn`` with the parsed value and the remainder and returns its
    outcome. ``NoMatch`` and ``FatalError`` are returned unchanged and ``fn``
    is not called.

    >>> from triparse.primitive import read_one
    >>> from triparse.result import chain

    >>> chain(read_one("ab"), lambda a, rest: read_one(rest))
    Matched(value='b', rest='')
    >>> chain(read_one(""), lambda a, rest: read_one(rest))
    NoMatch()

    :param outcome: Outcome of the first parser
    :param fn: Function that continues parsing from the remainder
    """

    return outcome.chain(fn)


def fallback(
        outcome: Outcome[A, S, E],
        fn: Callable[[], Outcome[A, S, E]]) -> Outcome[A, S, E]:
    """
    Returns the outcome of ``fn`` if ``outcome`` is ``NoMatch``. ``Matched``
    and ``FatalError`` are returned unchanged and ``fn`` is not called.

    >>> from triparse.primitive import is_equal_to, read_matching
    >>> from triparse.result import fallback

    >>> fallback(
    ...     read_matching("b", is_equal_to("a")),
    ...     lambda: read_matching("b", is_equal_to("b"))
    ... )
    Matched(value='b', rest='')

    :param outcome: Outcome of the first alternative
    :param fn: Function that produces the outcome of the next alternative
    """

    return outcome.fallback(fn)
