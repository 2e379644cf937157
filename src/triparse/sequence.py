"""
Sequence abstraction: anything that can be split into its first part and the
remainder.
"""

from typing import Iterator, Optional, Sequence, Tuple, TypeVar

from typing_extensions import Protocol, runtime_checkable

__all__ = ("Splittable", "split_first", "parts")

P_co = TypeVar("P_co", covariant=True)
T = TypeVar("T")


@runtime_checkable
class Splittable(Protocol[P_co]):
    """
    Capability of a sequence type that knows how to split itself.

    ``split_first`` returns ``None`` if and only if the sequence is empty.
    Otherwise it returns the first part together with a new value holding
    everything except that part. The sequence itself is never modified.
    """

    def split_first(self) -> Optional[Tuple[P_co, "Splittable[P_co]"]]:
        ...


def _split_sequence(seq: Sequence[T]) -> Optional[Tuple[T, Sequence[T]]]:
    if not seq:
        return None
    return seq[0], seq[1:]


def split_first(sequence: object) -> Optional[Tuple[object, object]]:
    """
    Splits ``sequence`` into its first part and the remainder, or returns
    ``None`` if it is empty.

    Strings and other built-in sequences are split by slicing, objects
    implementing :class:`Splittable` by their own ``split_first``.

    >>> from triparse.sequence import split_first

    >>> split_first("abc")
    ('a', 'bc')
    >>> split_first((1, 2))
    (1, (2,))
    >>> split_first("") is None
    True

    :param sequence: Sequence to split
    :raise: :exc:`TypeError` if ``sequence`` can't be split
    """

    if isinstance(sequence, Splittable):
        return sequence.split_first()
    if isinstance(sequence, Sequence):
        return _split_sequence(sequence)
    raise TypeError(
        "{} object can't be split".format(type(sequence).__name__)
    )


def parts(sequence: object) -> Iterator[object]:
    """
    Iterates over parts of ``sequence`` in order.

    >>> from triparse.sequence import parts

    >>> list(parts("hello"))
    ['h', 'e', 'l', 'l', 'o']

    :param sequence: Sequence to iterate over
    """

    split = split_first(sequence)
    while split is not None:
        part, sequence = split
        yield part
        split = split_first(sequence)
