"""
Exception hierarchy for PyFreqStats.

All exceptions inherit from PyFreqStatsError to allow catching any
library-specific error. Input problems inherit from ValidationError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Messages are complete enough to show to an end user as-is
    - Never catch and re-raise with less information
"""


class PyFreqStatsError(Exception):
    """Base exception for all PyFreqStats errors."""
    pass


class ValidationError(PyFreqStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class EmptyInputError(ValidationError):
    """Raw input is empty or contains only whitespace."""

    def __init__(self, message: str = "Please enter some data to process."):
        super().__init__(message)


class NoTokensError(ValidationError):
    """Raw input contains nothing but delimiters."""

    def __init__(self, message: str = "No values were found in the input."):
        super().__init__(message)


class InvalidTokensError(ValidationError):
    """
    One or more tokens are not valid integer literals.

    Attributes:
        tokens: Every offending literal, in input order
    """

    def __init__(self, tokens: tuple[str, ...] | list[str], message: str | None = None):
        self.tokens = tuple(tokens)
        if message is None:
            message = (
                "The following values are not valid integers: "
                f"{', '.join(self.tokens)}"
            )
        super().__init__(message)


class NoValidTokensError(ValidationError):
    """
    Every token was rejected by the active parse options.

    Attributes:
        dropped: Literals removed by the options (e.g. negatives when
                 allow_negative=False), in input order
    """

    def __init__(self, dropped: tuple[str, ...] | list[str] = (), message: str | None = None):
        self.dropped = tuple(dropped)
        if message is None:
            message = "No valid integers were found in the input."
            if self.dropped:
                message += (
                    f" Negative values are not allowed: {', '.join(self.dropped)}"
                )
        super().__init__(message)
