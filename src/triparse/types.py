"""
Exceptions.
"""

__all__ = ("ParseError",)


class ParseError(Exception):
    """
    Exception that is raised when an outcome without a parsed value is
    unwrapped.

    :param outcome: Unwrapped outcome, either ``NoMatch`` or ``FatalError``
    """

    def __init__(self, outcome: object):
        super().__init__(outcome)
        self.outcome = outcome

    @property
    def error(self) -> object:
        """
        Payload of the fatal error, ``None`` for a failed match.
        """

        return getattr(self.outcome, "error", None)

    def __str__(self) -> str:
        if hasattr(self.outcome, "error"):
            return "fatal error: {!r}".format(self.error)
        return "no match"
