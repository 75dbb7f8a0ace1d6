"""
Tokenizer and strict integer literal check for free-form input.
"""

from __future__ import annotations

import re

from pyfreqstats.core.compute.precision import INT_MIN, INT_MAX, INT_MAX_DIGITS

# Any run of comma, semicolon or whitespace (newlines included)
DELIMITER_RE = re.compile(r'[,;\s]+')

# Optional sign followed by ASCII digits; canonical form is checked separately
_LITERAL_RE = re.compile(r'[+-]?[0-9]+', re.ASCII)


def tokenize(raw: str) -> list[str]:
    """
    Split raw text on runs of delimiters.

    Leading, trailing and repeated delimiters never produce empty tokens.

    >>> tokenize(" 13,9;;14\\n11 ")
    ['13', '9', '14', '11']
    """
    return [tok for tok in DELIMITER_RE.split(raw.strip()) if tok]


def is_integer_literal(token: str) -> bool:
    """
    True if `token` is exactly the canonical decimal form of an int64.

    Canonical means str(int(token)) == token, so '+3', '03', '-0', '3.0'
    and '3abc' are all rejected.
    """
    if _LITERAL_RE.fullmatch(token) is None:
        return False
    # Longer literals are out of range, and int() caps string length
    if len(token.lstrip("+-")) > INT_MAX_DIGITS:
        return False
    value = int(token)
    if str(value) != token:
        return False
    return INT_MIN <= value <= INT_MAX
