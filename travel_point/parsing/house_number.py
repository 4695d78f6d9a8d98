"""House-number normalisation into a comparable numeric key.

Lot numbers are written in many ways ("４番１５号", "1470番地",
"12-3", "5の2"). Travel-distance rules only compare the primary and
secondary lot components, so every notation is reduced to a single
float whose integer part is the primary number and whose fractional
digits are the secondary number copied verbatim:

    >>> parse_numeric_key("４番１５号")
    4.15
    >>> parse_numeric_key("1-2-3")
    1.2

Parsing never raises. Input that yields no number produces NaN, which
callers detect with :func:`is_numeric_key` before using the key.
"""

from __future__ import annotations

import math
import re
from typing import Optional

SEPARATOR = "."

_FULLWIDTH_DIGITS = str.maketrans("０１２３４５６７８９", "0123456789")

# Longest token first so that "番地" is not split into "番" + "地"
_LOT_TOKENS = ("番地", "番", "号", "の")

_HYPHENS_RE = re.compile(r"[-ー－‐―−]")
_WHITESPACE_RE = re.compile(r"\s+")
_LEADING_NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


def normalize_house_number(raw: str) -> str:
    """Reduce a house number to ``primary[.secondary]`` text.

    Full-width digits become ASCII, lot tokens and hyphens become the
    separator, and only the first two non-empty segments are kept.
    The result is not guaranteed to be numeric.
    """
    text = _WHITESPACE_RE.sub("", raw.translate(_FULLWIDTH_DIGITS))
    for token in _LOT_TOKENS:
        text = text.replace(token, SEPARATOR)
    text = _HYPHENS_RE.sub(SEPARATOR, text)

    segments = [s for s in text.split(SEPARATOR) if s]
    return SEPARATOR.join(segments[:2])


def parse_numeric_key(raw: Optional[str]) -> float:
    """Convert a raw house-number string into a numeric key.

    Args:
        raw: House number in local notation. Empty or None yields 0.

    Returns:
        The numeric key, or NaN if no leading number could be read.
    """
    if not raw:
        return 0.0

    match = _LEADING_NUMBER_RE.match(normalize_house_number(raw))
    if match is None:
        return math.nan
    return float(match.group(0))


def is_numeric_key(key: float) -> bool:
    """Check that *key* can be used for a range lookup."""
    return not math.isnan(key)
