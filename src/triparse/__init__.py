"""
Public API.
"""

from .parser import Parser
from .positioned import Position, PositionedString
from .primitive import is_equal_to, read_matching, read_one
from .repeat import Appendable, collect_repeating, normalize
from .result import (
    CollectOutcome, FatalError, Matched, NoMatch, Outcome, chain, fallback,
    transform
)
from .sequence import Splittable, parts, split_first
from .types import ParseError

__all__ = (
    "Parser",
    "Position", "PositionedString",
    "is_equal_to", "read_matching", "read_one",
    "Appendable", "collect_repeating", "normalize",
    "CollectOutcome", "FatalError", "Matched", "NoMatch", "Outcome", "chain",
    "fallback", "transform",
    "Splittable", "parts", "split_first",
    "ParseError",
)

__version__ = "0.1.0"
