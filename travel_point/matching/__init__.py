"""Town matching and range resolution.

Available components:
- TownMatcher: Finds the reference entry for a town name
- RangeResolver: Finds the lot-number range for a numeric key
"""

from .range_resolver import RangeResolver
from .town_matcher import TownMatcher

__all__ = ["TownMatcher", "RangeResolver"]
