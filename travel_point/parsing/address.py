"""Split full addresses into town-name and house-number parts."""

from __future__ import annotations

import re
from typing import Optional

from ..config import get_config
from ..domain.models import ParsedAddress

# The house number starts at the first digit; the town part may be empty.
_TOWN_AND_NUMBER_RE = re.compile(r"^(.*?)([0-9０-９].*)$", re.DOTALL)


def split_address(
    full_address: str, municipality_prefix: Optional[str] = None
) -> ParsedAddress:
    """Split an address such as ``"天草市浄南町４番１５号"``.

    Text after the first occurrence of the municipality prefix is the
    working address. Within it, everything from the first digit on is
    the raw house number and everything before it is the town name.

    Args:
        full_address: Full postal address.
        municipality_prefix: Prefix to look for. Defaults to the
            configured municipality.

    Returns:
        ParsedAddress with both parts trimmed. Both parts are empty when
        the prefix is missing; the house number is empty when the
        address has no digits.
    """
    prefix = municipality_prefix or get_config().matching.municipality_prefix

    _, found, remainder = full_address.partition(prefix)
    if not found:
        return ParsedAddress(town_name="", raw_house_number="")

    remainder = remainder.strip()
    match = _TOWN_AND_NUMBER_RE.match(remainder)
    if match is None:
        return ParsedAddress(town_name=remainder, raw_house_number="")

    return ParsedAddress(
        town_name=match.group(1).strip(),
        raw_house_number=match.group(2).strip(),
    )
