"""In-memory reference data repository.

Wraps pre-built tables, for embedding the resolver in another
application or for tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ...domain.models import FacilityRecord, TownRangeEntry


@dataclass(frozen=True)
class InMemoryReferenceRepository:
    """Read-only reference data held in memory.

    This adapter implements ReferenceDataPort.

    Attributes:
        town_ranges: Town entries in table order
        facilities: Facility records in table order
    """

    town_ranges: tuple[TownRangeEntry, ...] = ()
    facilities: tuple[FacilityRecord, ...] = ()

    @classmethod
    def from_sequences(
        cls,
        town_ranges: Sequence[TownRangeEntry],
        facilities: Sequence[FacilityRecord] = (),
    ) -> InMemoryReferenceRepository:
        return cls(town_ranges=tuple(town_ranges), facilities=tuple(facilities))

    def load_town_ranges(self) -> Sequence[TownRangeEntry]:
        return self.town_ranges

    def load_facilities(self) -> Sequence[FacilityRecord]:
        return self.facilities

    def get_facility(self, name: str) -> Optional[FacilityRecord]:
        return next((f for f in self.facilities if f.name == name), None)
