"""Lot-number range lookup within a town entry."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..domain.errors import RangeNotFoundError
from ..domain.models import RangeMatch, TownRangeEntry


@dataclass
class RangeResolver:
    """Finds the range a numeric key falls in.

    Ranges are half-open (``start <= key < end``) and evaluated in
    table order; the first match wins. A key equal to one range's end
    therefore lands in the range that starts there. Ambiguous labels
    are returned unchanged.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def resolve(self, entry: TownRangeEntry, key: float) -> RangeMatch:
        """Find the range of *entry* that contains *key*.

        Args:
            entry: The matched town entry.
            key: Numeric house-number key. NaN never matches.

        Returns:
            RangeMatch with the entry, the range and the key.

        Raises:
            RangeNotFoundError: If no range contains the key.
        """
        for position, rng in enumerate(entry.ranges):
            if rng.contains(key):
                self._logger.debug(
                    "Range matched",
                    extra={
                        "town_key": entry.town_key,
                        "key": key,
                        "position": position,
                        "location": rng.location,
                    },
                )
                return RangeMatch(entry=entry, range=rng, key=key)

        self._logger.warning(
            "No range contains key",
            extra={"town_key": entry.town_key, "key": key},
        )
        raise RangeNotFoundError(
            "入力された地番の範囲を特定できませんでした。",
            town_key=entry.town_key,
            key=key,
        )
