"""Immutable domain models for the travel point resolver.

All models are frozen dataclasses with slots. They carry no external
dependencies and describe the reference data (town range tables and
facilities) and the results produced by a lookup.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, Optional

# Labels such as "本渡or亀場" name two acceptable travel points.
AMBIGUITY_TOKENS: tuple[str, ...] = ("or", "OR")

_AMBIGUITY_SPLIT_RE = re.compile(r"or|OR")


def is_ambiguous_label(label: str) -> bool:
    """Return True if *label* names two candidate travel points."""
    return any(token in label for token in AMBIGUITY_TOKENS)


def format_bound(value: float) -> str:
    """Render a range bound the way the reference tables write it.

    Integral values lose their trailing ``.0`` (``5.0`` -> ``"5"``).
    """
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return str(value)


class ResolutionStatus(Enum):
    """Outcome class of a lookup, as seen by presentation code."""

    SUCCESS = auto()
    AMBIGUOUS = auto()
    ERROR = auto()


@dataclass(frozen=True, slots=True)
class Range:
    """A half-open lot-number interval mapped to a travel point.

    Attributes:
        start: Inclusive lower bound
        end: Exclusive upper bound
        location: Travel point label, possibly an "A or B" compound label
    """

    start: float
    end: float
    location: str

    def contains(self, key: float) -> bool:
        """Check ``start <= key < end``. NaN keys never match."""
        return self.start <= key < self.end

    @property
    def is_ambiguous(self) -> bool:
        """Check if the location names two candidate points."""
        return is_ambiguous_label(self.location)

    def describe(self) -> str:
        """Human-readable description, e.g. ``"0 以上 5 未満"``."""
        return f"{format_bound(self.start)} 以上 {format_bound(self.end)} 未満"


@dataclass(frozen=True, slots=True)
class TownRangeEntry:
    """Reference entry for one town.

    The order of ``ranges`` is significant: ranges are evaluated in
    table order and the first match wins.

    Attributes:
        town_key: Town name as written in the reference table
        ranges: Ordered lot-number ranges for the town
    """

    town_key: str
    ranges: tuple[Range, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class FacilityRecord:
    """A named facility and its full postal address."""

    name: str
    address: str


@dataclass(frozen=True, slots=True)
class ParsedAddress:
    """Town-name and raw house-number parts of a full address."""

    town_name: str
    raw_house_number: str

    @property
    def is_empty(self) -> bool:
        """Check if splitting failed (no municipality prefix)."""
        return not self.town_name and not self.raw_house_number

    @property
    def has_house_number(self) -> bool:
        return bool(self.raw_house_number)


@dataclass(frozen=True, slots=True)
class RangeMatch:
    """A successful resolution inside the core.

    Attributes:
        entry: Reference entry the town matched
        range: Range the numeric key fell into
        key: Numeric key derived from the house number
    """

    entry: TownRangeEntry
    range: Range
    key: float

    @property
    def location(self) -> str:
        return self.range.location

    @property
    def is_ambiguous(self) -> bool:
        return self.range.is_ambiguous


@dataclass(frozen=True, slots=True)
class LookupResult:
    """Result handed to presentation code.

    ``point`` keeps the boundary conventions: it starts with the error
    marker on failure and contains "or" when two points are acceptable.

    Attributes:
        point: Travel point label or error message
        matched_town: Town key of the matched entry ("" if none)
        matched_range_description: Matched range ("" if none)
        status: SUCCESS, AMBIGUOUS or ERROR
        key: Numeric key used for the range lookup, if one was parsed
        source: What was searched (address or facility), for display
        suggestions: Close town names when the town was not found
    """

    point: str
    matched_town: str = ""
    matched_range_description: str = ""
    status: ResolutionStatus = ResolutionStatus.SUCCESS
    key: Optional[float] = None
    source: str = ""
    suggestions: tuple[str, ...] = ()

    @property
    def is_error(self) -> bool:
        return self.status is ResolutionStatus.ERROR

    @property
    def is_ambiguous(self) -> bool:
        return self.status is ResolutionStatus.AMBIGUOUS

    @property
    def candidates(self) -> tuple[str, ...]:
        """The travel points named by the result.

        Ambiguous labels are split for display only; the result itself
        is never narrowed to one side.
        """
        if self.is_error:
            return ()
        if not self.is_ambiguous:
            return (self.point,)
        return tuple(
            part.strip() for part in _AMBIGUITY_SPLIT_RE.split(self.point) if part.strip()
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary (useful for JSON output)."""
        return {
            "point": self.point,
            "matched_town": self.matched_town,
            "matched_range_description": self.matched_range_description,
            "status": self.status.name,
            "key": None if self.key is None or math.isnan(self.key) else self.key,
            "source": self.source,
            "suggestions": list(self.suggestions),
        }
