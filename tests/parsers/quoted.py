from typing import List, Tuple, TypeVar

from triparse import (
    FatalError, Matched, Outcome, Parser, Position, PositionedString,
    collect_repeating, is_equal_to, normalize, read_matching, read_one
)

A = TypeVar("A")

Error = Tuple[str, Position]
Result = Outcome[str, PositionedString, Error]

ESCAPES = {"n": "\n", "t": "\t", '"': '"', "\\": "\\"}


def plain_char(src: PositionedString) -> Result:
    return read_matching(src, lambda c: c not in '"\\')


def escaped_char(src: PositionedString) -> Result:
    def escape(c: str, rest: PositionedString, at: Position) -> Result:
        if c in ESCAPES:
            return Matched(ESCAPES[c], rest)
        return FatalError(("bad escape", at))

    return read_matching(src, is_equal_to("\\")).chain(
        lambda _, rest: read_one(rest).chain(
            lambda c, after: escape(c, after, rest.pos)
        ).fallback(lambda: FatalError(("unterminated escape", rest.pos)))
    )


def char(src: PositionedString) -> Result:
    return plain_char(src).fallback(lambda: escaped_char(src))


def closing_quote(chars: List[str], src: PositionedString) -> Result:
    return read_matching(src, is_equal_to('"')).transform(
        lambda _: "".join(chars)
    ).fallback(lambda: FatalError(("unterminated string", src.pos)))


def string(src: PositionedString) -> Result:
    return read_matching(src, is_equal_to('"')).chain(
        lambda _, rest: normalize(
            collect_repeating([], rest, char)
        ).chain(closing_quote)
    )


def spaces(
        src: PositionedString
) -> Outcome[List[str], PositionedString, Error]:
    return normalize(
        collect_repeating([], src, lambda s: read_matching(s, str.isspace))
    )


def spaced(
        parser: Parser[PositionedString, A, Error]
) -> Parser[PositionedString, A, Error]:
    def spaced(src: PositionedString) -> Outcome[A, PositionedString, Error]:
        return spaces(src).chain(lambda _, rest: parser(rest))

    return spaced


spaced_string: Parser[PositionedString, str, Error] = spaced(string)


def strings(
        src: PositionedString
) -> Outcome[List[str], PositionedString, Error]:
    return normalize(collect_repeating([], src, spaced_string))


def parse(src: str) -> List[str]:
    return strings(PositionedString.from_str(src)).unwrap()
