"""CSV reference data repository adapter.

Loads the two static tables from CSV files:
- town_ranges.csv: ``town,start,end,location``; one row per range,
  rows of a town in evaluation order
- facilities.csv: ``name,address``

Both tables are validated on first load and cached as immutable
tuples.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from ...config import ReferenceDataConfig, get_config
from ...domain.errors import ReferenceDataError
from ...domain.models import FacilityRecord, Range, TownRangeEntry

TOWN_RANGE_COLUMNS = ("town", "start", "end", "location")
FACILITY_COLUMNS = ("name", "address")


@dataclass
class CSVReferenceRepository:
    """Reference data repository that loads from CSV files.

    This adapter implements ReferenceDataPort.

    Attributes:
        config: Reference data configuration (paths, file names)
    """

    config: ReferenceDataConfig = field(default_factory=lambda: get_config().data)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _town_ranges: Optional[Tuple[TownRangeEntry, ...]] = field(default=None, repr=False)
    _facilities: Optional[Tuple[FacilityRecord, ...]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load_town_ranges(self) -> Sequence[TownRangeEntry]:
        """Load the town range table.

        Returns:
            Town entries in order of first appearance.

        Raises:
            ReferenceDataError: If the file is missing or malformed.
        """
        if self._town_ranges is not None:
            return self._town_ranges

        path = self.config.town_ranges_path
        self._logger.debug("Loading town ranges", extra={"path": str(path)})

        grouped: Dict[str, List[Range]] = {}
        for line_number, row in self._read_rows(path, TOWN_RANGE_COLUMNS):
            town = row["town"].strip()
            if not town:
                raise ReferenceDataError(
                    "Empty town name",
                    file_path=str(path),
                    line_number=line_number,
                )
            grouped.setdefault(town, []).append(
                self._parse_range(row, path, line_number)
            )

        self._town_ranges = tuple(
            TownRangeEntry(town_key=town, ranges=tuple(ranges))
            for town, ranges in grouped.items()
        )
        self._logger.info(
            "Town ranges loaded",
            extra={
                "towns": len(self._town_ranges),
                "ranges": sum(len(r) for r in grouped.values()),
            },
        )
        return self._town_ranges

    def load_facilities(self) -> Sequence[FacilityRecord]:
        """Load the facility table.

        Returns:
            Facility records in file order.

        Raises:
            ReferenceDataError: If the file is missing or malformed.
        """
        if self._facilities is not None:
            return self._facilities

        path = self.config.facilities_path
        facilities: List[FacilityRecord] = []
        for line_number, row in self._read_rows(path, FACILITY_COLUMNS):
            name = row["name"].strip()
            address = row["address"].strip()
            if not name or not address:
                raise ReferenceDataError(
                    "Facility rows need both a name and an address",
                    file_path=str(path),
                    line_number=line_number,
                )
            facilities.append(FacilityRecord(name=name, address=address))

        self._facilities = tuple(facilities)
        self._logger.info(
            "Facilities loaded", extra={"facilities": len(self._facilities)}
        )
        return self._facilities

    def get_facility(self, name: str) -> Optional[FacilityRecord]:
        """Get a facility by its exact name.

        Args:
            name: The facility name to look up.

        Returns:
            The first facility with that name, or None if not found.
        """
        for facility in self.load_facilities():
            if facility.name == name:
                return facility
        return None

    def clear_cache(self) -> None:
        """Clear cached reference data."""
        self._town_ranges = None
        self._facilities = None
        self._logger.debug("Reference data cache cleared")

    def _read_rows(
        self, path: Path, columns: Tuple[str, ...]
    ) -> List[Tuple[int, Dict[str, str]]]:
        """Read a CSV file, checking its header.

        Returns (line number, row) pairs; blank lines are skipped.
        """
        try:
            with path.open(encoding="utf-8-sig", newline="") as f:
                reader = csv.DictReader(f)
                missing = set(columns) - set(reader.fieldnames or ())
                if missing:
                    raise ReferenceDataError(
                        f"Missing columns: {', '.join(sorted(missing))}",
                        file_path=str(path),
                    )
                rows = []
                for row in reader:
                    if not any(
                        isinstance(value, str) and value.strip()
                        for value in row.values()
                    ):
                        continue
                    rows.append(
                        (reader.line_num, {c: row.get(c) or "" for c in columns})
                    )
                return rows
        except OSError as e:
            raise ReferenceDataError(
                f"Failed to read reference data: {e}",
                file_path=str(path),
                cause=e,
            )

    @staticmethod
    def _parse_range(row: Dict[str, str], path: Path, line_number: int) -> Range:
        try:
            start = float(row["start"])
            end = float(row["end"])
        except ValueError as e:
            raise ReferenceDataError(
                "Range bounds must be numeric",
                file_path=str(path),
                line_number=line_number,
                cause=e,
            )
        location = row["location"].strip()
        if not location:
            raise ReferenceDataError(
                "Empty location label",
                file_path=str(path),
                line_number=line_number,
            )
        if not start < end:
            raise ReferenceDataError(
                f"Range start {start} must be below end {end}",
                file_path=str(path),
                line_number=line_number,
            )
        return Range(start=start, end=end, location=location)
