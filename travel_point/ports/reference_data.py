"""Reference data port - Abstraction over the static lookup tables.

The town range table and the facility table are supplied fully
populated before any resolution call and are never mutated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import FacilityRecord, TownRangeEntry


class ReferenceDataPort(Protocol):
    """Port for loading reference data.

    Implementations:
    - adapters/reference_data/csv_repository.py (CSVReferenceRepository)
    - adapters/reference_data/memory_repository.py (InMemoryReferenceRepository)
    """

    def load_town_ranges(self) -> Sequence[TownRangeEntry]:
        """Load the town range table.

        Returns:
            Town entries in table order, each with ordered ranges.
        """
        ...

    def load_facilities(self) -> Sequence[FacilityRecord]:
        """Load the facility table.

        Returns:
            Facility records in table order.
        """
        ...

    def get_facility(self, name: str) -> Optional[FacilityRecord]:
        """Get a facility by its exact name.

        Args:
            name: The facility name to look up.

        Returns:
            The first facility with that name, or None if not found.
        """
        ...
