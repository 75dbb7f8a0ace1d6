"""
Parsing module.

Turns free-form text into a validated integer Sample.

Public API:
    parse(raw)            - Text to Sample, or a ValidationError subclass
    tokenize(raw)         - Split on comma/semicolon/whitespace runs
    is_integer_literal(t) - Strict canonical integer check
"""

from pyfreqstats.parsing.options import ParseOptions
from pyfreqstats.parsing._tokens import tokenize, is_integer_literal
from pyfreqstats.parsing.parser import parse

__all__ = [
    "parse",
    "tokenize",
    "is_integer_literal",
    "ParseOptions",
]
