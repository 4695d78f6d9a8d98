"""Travel point resolver service - Main entry point.

Composes house-number parsing, town matching and range resolution
into one lookup. The service exposes two APIs:

- ``resolve`` raises typed TravelPointError subclasses;
- ``resolve_travel_point``, ``resolve_address`` and
  ``resolve_facility`` never raise. Every failure becomes a
  LookupResult whose ``point`` starts with the error marker.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List

from ..config import MatchingConfig, ResolutionConfig, get_config
from ..domain.errors import (
    AddressParseError,
    EmptyInputError,
    FacilityNotFoundError,
    NotANumberError,
    RangeNotFoundError,
    TownNotFoundError,
    TravelPointError,
)
from ..domain.models import (
    FacilityRecord,
    LookupResult,
    RangeMatch,
    ResolutionStatus,
)
from ..matching import RangeResolver, TownMatcher
from ..parsing import is_numeric_key, parse_numeric_key, split_address
from ..ports.reference_data import ReferenceDataPort

INTERNAL_FAILURE_MESSAGE = "検索ロジック処理中に例外が発生しました。"


@dataclass
class TravelPointService:
    """Resolves a town name and house number to a travel point.

    Reference data is read once at construction and never mutated, so
    a single instance can serve concurrent callers.

    Attributes:
        reference_data: Source of the town range and facility tables
        config: Result conventions (error marker, empty-number policy)
        matching_config: Town matching vocabulary
    """

    reference_data: ReferenceDataPort
    config: ResolutionConfig = field(default_factory=lambda: get_config().resolution)
    matching_config: MatchingConfig = field(
        default_factory=lambda: get_config().matching
    )

    _matcher: TownMatcher = field(init=False, repr=False)
    _resolver: RangeResolver = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._matcher = TownMatcher(
            self.reference_data.load_town_ranges(), self.matching_config
        )
        self._resolver = RangeResolver()

    # ── Raising API ───────────────────────────────────────────────

    def parse_key(self, house_number_raw: str) -> float:
        """Parse a house number, rejecting keys that cannot be looked up.

        Raises:
            NotANumberError: If no numeric key can be derived.
        """
        raw = (house_number_raw or "").strip()
        if not raw and not self.config.empty_house_number_as_zero:
            raise NotANumberError(
                "地番が入力されていません。", raw_house_number=raw
            )

        key = parse_numeric_key(raw)
        if not is_numeric_key(key):
            raise NotANumberError(
                f"地番「{raw}」を数値として解釈できませんでした。",
                raw_house_number=raw,
            )
        return key

    def resolve(self, town_name: str, house_number_raw: str) -> RangeMatch:
        """Resolve a town name and raw house number.

        Args:
            town_name: Town name as entered.
            house_number_raw: House number in local notation.

        Returns:
            RangeMatch with the matched entry and range.

        Raises:
            EmptyInputError: If the town name is blank.
            NotANumberError: If the house number is not numeric.
            TownNotFoundError: If no reference entry applies.
            RangeNotFoundError: If no range contains the key.
        """
        town = (town_name or "").strip()
        if not town:
            raise EmptyInputError(
                "町名と地番を入力してください。", field_name="town_name"
            )

        key = self.parse_key(house_number_raw)
        self._logger.debug(
            "House number parsed",
            extra={"raw": house_number_raw, "key": key},
        )

        entry = self._matcher.match(town)
        match = self._resolver.resolve(entry, key)
        self._logger.info(
            "Travel point resolved",
            extra={
                "town": town,
                "town_key": entry.town_key,
                "key": key,
                "location": match.location,
                "ambiguous": match.is_ambiguous,
            },
        )
        return match

    # ── Non-raising API ───────────────────────────────────────────

    def resolve_travel_point(
        self, town_name: str, house_number_raw: str
    ) -> LookupResult:
        """Resolve a town name and raw house number, never raising.

        Returns:
            LookupResult; on failure ``point`` starts with the error marker.
        """
        return self._run(
            lambda: self.resolve(town_name, house_number_raw),
            source=f"住所: {town_name} {house_number_raw}",
        )

    def resolve_address(self, town_name: str, house_number_raw: str) -> LookupResult:
        """Resolve address-form input, requiring both fields.

        Returns:
            LookupResult; blank input yields an EmptyInput error result.
        """
        town = (town_name or "").strip()
        house_number = (house_number_raw or "").strip()
        source = f"住所: {town} {house_number}"

        if not town or not house_number:
            return self._error_result(
                EmptyInputError(
                    "町名と地番を入力してください。",
                    field_name="town_name" if not town else "house_number",
                ),
                source=source,
            )
        return self._run(lambda: self.resolve(town, house_number), source=source)

    def resolve_facility(self, facility_name: str) -> LookupResult:
        """Resolve a named facility through its address, never raising."""
        name = (facility_name or "").strip()
        source = f"施設名: {name}"
        try:
            facility = self.find_facility(name)
        except TravelPointError as e:
            return self._error_result(e, source=source)
        except Exception:
            return self._internal_failure(source)

        return self._run(
            lambda: self._resolve_facility(facility),
            source=f"施設名: {facility.name} ({facility.address})",
        )

    def find_facility(self, facility_name: str) -> FacilityRecord:
        """Look up a facility by exact name.

        Raises:
            EmptyInputError: If the name is blank.
            FacilityNotFoundError: If no facility has that name.
        """
        name = (facility_name or "").strip()
        if not name:
            raise EmptyInputError("施設を選択してください。", field_name="facility_name")
        facility = self.reference_data.get_facility(name)
        if facility is None:
            raise FacilityNotFoundError(
                f"施設「{name}」が見つかりません。", facility_name=name
            )
        return facility

    def list_facilities(self) -> List[FacilityRecord]:
        """Return facilities without duplicate (name, address) pairs."""
        seen = set()
        unique: List[FacilityRecord] = []
        for facility in self.reference_data.load_facilities():
            marker = (facility.name, facility.address)
            if marker not in seen:
                seen.add(marker)
                unique.append(facility)
        return unique

    def error_point(self, message: str) -> str:
        """Prefix *message* with the configured error marker."""
        return f"{self.config.error_marker} {message}"

    # ── Private helpers ───────────────────────────────────────────

    def _resolve_facility(self, facility: FacilityRecord) -> RangeMatch:
        parsed = split_address(
            facility.address, self.matching_config.municipality_prefix
        )
        if not parsed.town_name:
            raise AddressParseError(
                f"施設住所「{facility.address}」から町名を特定できませんでした。",
                address=facility.address,
            )
        return self.resolve(parsed.town_name, parsed.raw_house_number)

    def _run(self, lookup: Callable[[], RangeMatch], source: str) -> LookupResult:
        try:
            match = lookup()
        except TravelPointError as e:
            return self._error_result(e, source=source)
        except Exception:
            return self._internal_failure(source)
        return self._to_result(match, source=source)

    def _internal_failure(self, source: str) -> LookupResult:
        self._logger.exception(
            "Unexpected error in travel point resolution",
            extra={"source": source},
        )
        return LookupResult(
            point=self.error_point(INTERNAL_FAILURE_MESSAGE),
            status=ResolutionStatus.ERROR,
            source=source,
        )

    def _to_result(self, match: RangeMatch, source: str) -> LookupResult:
        status = (
            ResolutionStatus.AMBIGUOUS if match.is_ambiguous else ResolutionStatus.SUCCESS
        )
        return LookupResult(
            point=match.location,
            matched_town=match.entry.town_key,
            matched_range_description=match.range.describe(),
            status=status,
            key=match.key,
            source=source,
        )

    def _error_result(self, error: TravelPointError, source: str) -> LookupResult:
        self._logger.warning(
            "Travel point resolution failed",
            extra={"error_type": type(error).__name__, "error": error.message},
        )
        matched_town = ""
        key = None
        suggestions: tuple[str, ...] = ()
        if isinstance(error, RangeNotFoundError):
            matched_town = error.town_key
            key = error.key
        elif isinstance(error, TownNotFoundError):
            suggestions = error.suggestions
        return LookupResult(
            point=self.error_point(error.message),
            matched_town=matched_town,
            status=ResolutionStatus.ERROR,
            key=key,
            source=source,
            suggestions=suggestions,
        )
