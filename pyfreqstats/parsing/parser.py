"""
Input normalizer: free-form text to a validated integer Sample.
"""

from __future__ import annotations

import logging

from pyfreqstats.core.exceptions import (
    ValidationError,
    EmptyInputError,
    NoTokensError,
    InvalidTokensError,
    NoValidTokensError,
)
from pyfreqstats.descriptive.design import Sample
from pyfreqstats.parsing._tokens import tokenize, is_integer_literal
from pyfreqstats.parsing.options import ParseOptions, DEFAULT_OPTIONS

logger = logging.getLogger(__name__)


def parse(
    raw: str,
    *,
    allow_negative: bool | None = None,
    options: ParseOptions | None = None,
) -> Sample:
    """
    Parse raw text into a validated integer sample.

    Values may be separated by any mix of commas, semicolons, spaces,
    tabs and newlines. Every token must be a canonical integer literal.

    Parameters
    ----------
    raw : str
        Free-form input text.
    allow_negative : bool, optional
        Overrides ``options.allow_negative``. Default True.
    options : ParseOptions, optional
        Option bundle. Keyword arguments take precedence.

    Returns
    -------
    Sample with the parsed integers in input order.

    Raises
    ------
    EmptyInputError
        If `raw` is empty or whitespace only.
    NoTokensError
        If `raw` holds nothing but delimiters.
    InvalidTokensError
        If any token is not a valid integer. All offenders are reported.
    NoValidTokensError
        If the options rejected every token.
    """
    opts = options if options is not None else DEFAULT_OPTIONS
    if allow_negative is None:
        allow_negative = opts.allow_negative

    if raw is None:
        raise EmptyInputError()
    if not isinstance(raw, str):
        raise ValidationError(
            f"raw: expected str, got {type(raw).__name__}"
        )
    if not raw.strip():
        raise EmptyInputError()

    tokens = tokenize(raw)
    logger.debug("tokenized input into %d tokens", len(tokens))
    if not tokens:
        raise NoTokensError()

    invalid = [tok for tok in tokens if not is_integer_literal(tok)]
    if invalid:
        raise InvalidTokensError(invalid)

    values = [int(tok) for tok in tokens]

    if not allow_negative:
        dropped = [tok for tok, v in zip(tokens, values) if v < 0]
        if dropped:
            logger.info(
                "dropped %d negative value(s): %s", len(dropped), ", ".join(dropped)
            )
            values = [v for v in values if v >= 0]
        if not values:
            raise NoValidTokensError(dropped)

    sample = Sample.from_values(values)
    logger.debug("parsed sample of size %d", sample.n)
    return sample
