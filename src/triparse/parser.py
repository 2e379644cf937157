from typing import Callable, TypeVar

from .result import Outcome

A = TypeVar("A")
E = TypeVar("E")
S = TypeVar("S")

Parser = Callable[[S], Outcome[A, S, E]]
