"""Typed domain errors for the travel point resolver.

Inner components raise these errors; the resolution facade turns each
of them into an error-marked LookupResult so that callers never see
an exception.

All errors inherit from TravelPointError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TravelPointError(Exception):
    """Base error for the travel point domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class EmptyInputError(TravelPointError):
    """A required input (town name or house number) was blank.

    Attributes:
        field_name: Name of the missing input
    """

    field_name: str = ""


@dataclass
class TownNotFoundError(TravelPointError):
    """No reference entry matched the town and no catch-all applied.

    Attributes:
        town_name: The town name that was looked up
        suggestions: Close reference town keys, for display only
    """

    town_name: str = ""
    suggestions: tuple[str, ...] = ()


@dataclass
class RangeNotFoundError(TravelPointError):
    """The numeric key fell outside every range of the matched town.

    Attributes:
        town_key: Town key of the matched entry
        key: The numeric key that was looked up
    """

    town_key: str = ""
    key: Optional[float] = None


@dataclass
class NotANumberError(TravelPointError):
    """The house number produced no usable numeric key.

    Attributes:
        raw_house_number: The house number as entered
    """

    raw_house_number: str = ""


@dataclass
class AddressParseError(TravelPointError):
    """A full address could not be split into town and house number.

    Attributes:
        address: The address that failed to split
    """

    address: str = ""


@dataclass
class FacilityNotFoundError(TravelPointError):
    """The named facility is not in the facility table.

    Attributes:
        facility_name: The facility name that was looked up
    """

    facility_name: str = ""


@dataclass
class ReferenceDataError(TravelPointError):
    """Reference data could not be loaded or is malformed.

    Attributes:
        file_path: Path to the data file if relevant
        line_number: Offending line in the file, if known
    """

    file_path: Optional[str] = None
    line_number: Optional[int] = None
