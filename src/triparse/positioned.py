"""
Character sequence that tracks line and column of the next unconsumed
character.
"""

from typing import NamedTuple, Optional, Tuple

from typing_extensions import final

__all__ = ("Position", "PositionedString")


class Position(NamedTuple):
    line: int
    col: int


@final
class PositionedString:
    """
    String with a position attached. Both line and column are 1-indexed.

    Splitting returns the next character and a new :class:`PositionedString`
    whose position points past that character. A line break moves the
    position to the first column of the next line.

    >>> from triparse.positioned import PositionedString

    >>> c, rest = PositionedString("a\\nb").split_first()
    >>> c, rest.pos
    ('a', Position(line=1, col=2))
    >>> c, rest = rest.split_first()
    >>> c, rest.pos
    ('\\n', Position(line=2, col=1))

    :param src: Text to parse
    :param pos: Position of the first character of ``src``
    """

    __slots__ = "_text", "_offset", "pos"

    def __init__(self, src: str, pos: Position = Position(1, 1)):
        self._text = src
        self._offset = 0
        self.pos = pos

    @classmethod
    def from_str(cls, src: str) -> "PositionedString":
        """
        Converts a plain string to a :class:`PositionedString` starting at
        line 1, column 1.
        """

        return cls(src)

    @classmethod
    def _at(
            cls, text: str, offset: int, pos: Position) -> "PositionedString":
        # Shares ``text`` with the parent instead of slicing it.
        self = cls.__new__(cls)
        self._text = text
        self._offset = offset
        self.pos = pos
        return self

    @property
    def src(self) -> str:
        """
        Remaining text.
        """

        return self._text[self._offset:]

    def split_first(self) -> Optional[Tuple[str, "PositionedString"]]:
        if self._offset >= len(self._text):
            return None
        c = self._text[self._offset]
        line, col = self.pos
        if c == "\n":
            pos = Position(line + 1, 1)
        else:
            pos = Position(line, col + 1)
        return c, PositionedString._at(self._text, self._offset + 1, pos)

    def __len__(self) -> int:
        return len(self._text) - self._offset

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PositionedString):
            return NotImplemented
        return self.pos == other.pos and self.src == other.src

    def __hash__(self) -> int:
        return hash((self.src, self.pos))

    def __repr__(self) -> str:
        return "PositionedString(src={!r}, pos={!r})".format(
            self.src, self.pos
        )
