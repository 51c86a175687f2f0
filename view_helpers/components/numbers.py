"""Digit grouping for numerals."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

# Runs over the *reversed* integer part: a group boundary (comma, dot or
# start), three digits, then one more digit that needs a comma before it.
_GROUP_RE = re.compile(r"(,|\.|^)(\d{3})(\d)", re.ASCII)
_NUMERAL_RE = re.compile(r"-?\d*", re.ASCII)


def commify(num: object) -> str:
    """Group the integer digits of a numeral in threes.

    e.g. 532566 => "532,566" and 79593255.66 => "79,593,255.66". The
    fractional part is passed through untouched. Non-numeric characters are
    left where they are; only runs of digits are grouped.
    """
    text = str(num)
    integer, sep, fraction = text.partition(".")
    if not _NUMERAL_RE.fullmatch(integer):
        logger.debug("commify got a non-numeric integer part: %r", integer)

    reversed_int = integer[::-1]
    while True:
        reversed_int, count = _GROUP_RE.subn(r"\1\2,\3", reversed_int)
        if not count:
            break
    return reversed_int[::-1] + sep + fraction
