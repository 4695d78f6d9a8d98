"""Tests for half-open range resolution."""

import math

import pytest

from travel_point.domain.errors import RangeNotFoundError
from travel_point.domain.models import Range, TownRangeEntry
from travel_point.matching import RangeResolver


@pytest.fixture
def resolver() -> RangeResolver:
    return RangeResolver()


def _entry(*ranges: Range) -> TownRangeEntry:
    return TownRangeEntry(town_key="テスト町", ranges=ranges)


def test_boundary_key_goes_to_next_range(resolver):
    entry = _entry(Range(0.0, 5.0, "本渡"), Range(5.0, 99999.0, "亀場"))
    match = resolver.resolve(entry, 5.0)
    assert match.location == "亀場"
    assert match.range == Range(5.0, 99999.0, "亀場")


def test_start_is_inclusive(resolver):
    entry = _entry(Range(0.0, 5.0, "本渡"), Range(5.0, 99999.0, "亀場"))
    assert resolver.resolve(entry, 0.0).location == "本渡"


def test_just_below_end_stays_in_range(resolver):
    entry = _entry(Range(0.0, 5.0, "本渡"), Range(5.0, 99999.0, "亀場"))
    assert resolver.resolve(entry, 4.99).location == "本渡"


def test_table_order_is_respected(resolver, town_entries):
    jonan = town_entries[0]
    match = resolver.resolve(jonan, 4.15)
    assert match.location == "本渡"
    assert match.range.describe() == "0 以上 5 未満"


def test_first_match_wins_on_overlapping_data(resolver):
    entry = _entry(Range(0.0, 10.0, "本渡"), Range(5.0, 20.0, "亀場"))
    assert resolver.resolve(entry, 7.0).location == "本渡"


def test_hirose_1470_resolves_to_saitsu(resolver, town_entries):
    hirose = town_entries[1]
    match = resolver.resolve(hirose, 1470.0)
    assert match.location == "佐伊津"
    assert match.range.describe() == "1470 以上 2080 未満"


def test_ambiguous_label_is_passed_through(resolver, town_entries):
    shokuba = town_entries[2]
    match = resolver.resolve(shokuba, 850.0)
    assert match.location == "亀場or枦宇土"
    assert match.is_ambiguous


def test_gap_raises_range_not_found(resolver):
    entry = _entry(Range(0.0, 5.0, "本渡"), Range(10.0, 20.0, "亀場"))
    with pytest.raises(RangeNotFoundError) as exc_info:
        resolver.resolve(entry, 7.0)
    assert exc_info.value.town_key == "テスト町"
    assert exc_info.value.key == 7.0


def test_key_below_coverage_raises(resolver, town_entries):
    hirose = town_entries[1]
    with pytest.raises(RangeNotFoundError):
        resolver.resolve(hirose, 0.0)


def test_nan_never_matches(resolver):
    entry = _entry(Range(0.0, 99999.0, "本渡"))
    with pytest.raises(RangeNotFoundError):
        resolver.resolve(entry, math.nan)


def test_entry_without_ranges_raises(resolver):
    with pytest.raises(RangeNotFoundError):
        resolver.resolve(_entry(), 1.0)
