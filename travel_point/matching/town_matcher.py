"""Town name matching against the reference table.

Matching runs through strict tiers, first match in table order wins
within a tier, and a lower tier is only consulted when every entry
failed the tier above:

1. exact equality with the reference town key;
2. equality after stripping one trailing town suffix ("町") from both
   the input and the reference key.

If nothing matched and the input contains none of the excluded town
names, the catch-all entry is used. Partial (substring) matching is
not a tier: towns sharing short substrings are unrelated.

rapidfuzz is only used to suggest close names in TownNotFound errors.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

from rapidfuzz import fuzz, process

from ..config import MatchingConfig, get_config
from ..domain.errors import TownNotFoundError
from ..domain.models import TownRangeEntry


@dataclass
class TownMatcher:
    """Finds the reference entry for a town name.

    Attributes:
        entries: Reference entries in table order
        config: Matching configuration (suffix, catch-all, exclusions)
    """

    entries: Sequence[TownRangeEntry]
    config: MatchingConfig = field(default_factory=lambda: get_config().matching)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self.entries = tuple(self.entries)

    def strip_suffix(self, town_name: str) -> str:
        """Remove one trailing town suffix and surrounding whitespace."""
        name = town_name.strip()
        suffix = self.config.town_suffix
        if suffix and name.endswith(suffix):
            name = name[: -len(suffix)]
        return name.strip()

    def find(self, town_name: str) -> Optional[TownRangeEntry]:
        """Find the entry for *town_name*, or None.

        Args:
            town_name: Town name as entered or split from an address.

        Returns:
            The matched entry, the catch-all entry, or None.
        """
        name = town_name.strip()
        if not name:
            return None

        for entry in self.entries:
            if entry.town_key == name:
                self._logger.debug(
                    "Town matched exactly", extra={"town": name, "tier": 1}
                )
                return entry

        cleaned = self.strip_suffix(name)
        if cleaned:
            for entry in self.entries:
                if self.strip_suffix(entry.town_key) == cleaned:
                    self._logger.debug(
                        "Town matched without suffix",
                        extra={"town": name, "town_key": entry.town_key, "tier": 2},
                    )
                    return entry

        if self.is_excluded(name):
            return None

        catch_all = self.catch_all_entry()
        if catch_all is not None:
            self._logger.debug(
                "Town fell back to catch-all entry",
                extra={"town": name, "town_key": catch_all.town_key},
            )
        return catch_all

    def match(self, town_name: str) -> TownRangeEntry:
        """Find the entry for *town_name*, raising if there is none.

        Raises:
            TownNotFoundError: If no tier matched and no catch-all applies.
        """
        entry = self.find(town_name)
        if entry is None:
            name = town_name.strip()
            self._logger.info("Town not found", extra={"town": name})
            raise TownNotFoundError(
                f"入力された町名「{name}」に該当する旅費データが見つかりません。",
                town_name=name,
                suggestions=self.suggest(name),
            )
        return entry

    def is_excluded(self, town_name: str) -> bool:
        """Check whether the catch-all entry must not apply to *town_name*."""
        return any(excluded in town_name for excluded in self.config.excluded_towns)

    def catch_all_entry(self) -> Optional[TownRangeEntry]:
        for entry in self.entries:
            if entry.town_key == self.config.catch_all_town:
                return entry
        return None

    def suggest(self, town_name: str) -> tuple[str, ...]:
        """Return reference town keys that look like *town_name*.

        Suggestions are for display only and never select an entry.
        """
        if not town_name or self.config.max_suggestions == 0:
            return ()

        choices: Dict[str, str] = {
            entry.town_key: entry.town_key
            for entry in self.entries
            if entry.town_key != self.config.catch_all_town
        }
        results = process.extract(
            town_name,
            choices,
            scorer=fuzz.ratio,
            score_cutoff=self.config.suggestion_cutoff,
            limit=self.config.max_suggestions,
        )
        return tuple(key for _, _, key in results)
