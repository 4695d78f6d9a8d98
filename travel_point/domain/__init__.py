"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    AddressParseError,
    EmptyInputError,
    FacilityNotFoundError,
    NotANumberError,
    RangeNotFoundError,
    ReferenceDataError,
    TownNotFoundError,
    TravelPointError,
)
from .models import (
    AMBIGUITY_TOKENS,
    FacilityRecord,
    LookupResult,
    ParsedAddress,
    Range,
    RangeMatch,
    ResolutionStatus,
    TownRangeEntry,
    format_bound,
    is_ambiguous_label,
)

__all__ = [
    # Models
    "Range",
    "TownRangeEntry",
    "FacilityRecord",
    "ParsedAddress",
    "RangeMatch",
    "LookupResult",
    "ResolutionStatus",
    "AMBIGUITY_TOKENS",
    "format_bound",
    "is_ambiguous_label",
    # Errors
    "TravelPointError",
    "EmptyInputError",
    "TownNotFoundError",
    "RangeNotFoundError",
    "NotANumberError",
    "AddressParseError",
    "FacilityNotFoundError",
    "ReferenceDataError",
]
