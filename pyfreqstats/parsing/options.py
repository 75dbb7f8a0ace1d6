"""
Parse options.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParseOptions:
    """
    Options controlling which integer literals parse() accepts.

    Attributes:
        allow_negative: If False, negative literals are dropped from the
            sample. When that leaves nothing, parse() raises
            NoValidTokensError.
    """
    allow_negative: bool = True


DEFAULT_OPTIONS = ParseOptions()
