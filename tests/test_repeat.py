from collections import deque
from typing import List

import pytest

from triparse import (
    FatalError, Matched, NoMatch, Position, PositionedString,
    collect_repeating, is_equal_to, normalize, read_matching, read_one
)

from .parsers.countdown import Countdown


def a(src: object) -> object:
    return read_matching(src, is_equal_to("a"))


def digit(src: object) -> object:
    return read_matching(src, str.isdigit)


DATA_POSITIVE = [
    (a, "aaab", Matched(["a", "a", "a"], "b")),
    (a, "bbb", Matched([], "bbb")),
    (a, "", Matched([], "")),
    (digit, "123abc", Matched(["1", "2", "3"], "abc")),
    (digit, "abc", Matched([], "abc")),
    (digit, "123", Matched(["1", "2", "3"], "")),
    (read_one, (1, 2), Matched([1, 2], ())),
]


@pytest.mark.parametrize("parser, data, expected", DATA_POSITIVE)
def test_positive(parser: object, data: object, expected: object) -> None:
    assert collect_repeating([], data, parser) == expected


def test_initial_collection() -> None:
    initial = ["x"]
    r = collect_repeating(initial, "aab", a)
    assert r == Matched(["x", "a", "a"], "b")
    assert initial == ["x"]


def test_fatal_first() -> None:
    r = collect_repeating([], "", lambda src: FatalError(()))
    assert r == FatalError(())


def test_fatal_discards_collected() -> None:
    calls: List[object] = []

    def parser(src: str) -> object:
        calls.append(src)
        if len(calls) == 2:
            return FatalError("boom")
        return read_one(src)

    assert collect_repeating([], "abc", parser) == FatalError("boom")
    assert calls == ["abc", "bc"]


def test_no_match_returns_sequence_before_attempt() -> None:
    def ab(src: str) -> object:
        return a(src).chain(
            lambda _, rest: read_matching(rest, is_equal_to("b"))
        )

    assert collect_repeating([], "ababac", ab) == Matched(["b", "b"], "ac")


def test_positioned() -> None:
    r = collect_repeating([], PositionedString.from_str("a\naab"), read_one)
    assert r == Matched(
        ["a", "\n", "a", "a", "b"], PositionedString("", Position(2, 4))
    )


def test_unconsumed() -> None:
    with pytest.raises(RuntimeError):
        collect_repeating([], "abc", lambda src: Matched(None, src))


def test_splittable_without_length() -> None:
    r = collect_repeating([], Countdown(3), read_one)
    assert type(r) is Matched
    assert r.value == [3, 2, 1]
    assert r.rest.n == 0


def test_splittable_unconsumed() -> None:
    with pytest.raises(RuntimeError):
        collect_repeating([], Countdown(3), lambda src: Matched(None, src))


DATA_COLLECTIONS = [
    (bytearray(), b"ab", Matched(bytearray(b"ab"), b"")),
    (deque(), "ab", Matched(deque(["a", "b"]), "")),
    (["x"], "ab", Matched(["x", "a", "b"], "")),
]


@pytest.mark.parametrize("collection, data, expected", DATA_COLLECTIONS)
def test_collections(
        collection: object, data: object, expected: object) -> None:
    assert collect_repeating(collection, data, read_one) == expected


def test_normalize() -> None:
    r = normalize(collect_repeating([], "12a", digit)).chain(
        lambda ds, rest: a(rest).transform(lambda c: "".join(ds) + c)
    )
    assert r == Matched("12a", "")


def test_normalize_fatal() -> None:
    r = normalize(FatalError("e")).fallback(lambda: Matched([], ""))
    assert r == FatalError("e")


def test_normalize_no_match() -> None:
    with pytest.raises(TypeError):
        normalize(NoMatch())  # type: ignore[arg-type]
