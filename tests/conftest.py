"""Shared test fixtures: small reference tables with realistic data."""

from __future__ import annotations

from pathlib import Path

import pytest

from travel_point.adapters.reference_data import InMemoryReferenceRepository
from travel_point.config import MatchingConfig, reset_config
from travel_point.domain.models import FacilityRecord, Range, TownRangeEntry
from travel_point.services import TravelPointService

CATCH_ALL = "東・浄南・太田町以外"


@pytest.fixture(autouse=True)
def fresh_config():
    """Make every test read configuration from a clean environment."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def town_entries() -> tuple[TownRangeEntry, ...]:
    return (
        TownRangeEntry(
            town_key="浄南町",
            ranges=(
                Range(start=5.0, end=99999.0, location="本渡or亀場"),
                Range(start=0.0, end=5.0, location="本渡"),
            ),
        ),
        TownRangeEntry(
            town_key="本渡町広瀬",
            ranges=(
                Range(start=1.0, end=1470.0, location="本渡"),
                Range(start=1470.0, end=2080.0, location="佐伊津"),
                Range(start=2080.0, end=99999.0, location="本渡"),
            ),
        ),
        TownRangeEntry(
            town_key="亀場町食場",
            ranges=(
                Range(start=1.0, end=340.0, location="枦宇土"),
                Range(start=340.0, end=700.0, location="亀場"),
                Range(start=700.0, end=800.0, location="枦宇土"),
                Range(start=800.0, end=900.0, location="亀場or枦宇土"),
                Range(start=900.0, end=1200.0, location="亀場"),
                Range(start=1200.0, end=99999.0, location="枦宇土"),
            ),
        ),
    )


@pytest.fixture
def catch_all_entry() -> TownRangeEntry:
    return TownRangeEntry(
        town_key=CATCH_ALL,
        ranges=(Range(start=0.0, end=99999.0, location="本渡"),),
    )


@pytest.fixture
def facilities() -> tuple[FacilityRecord, ...]:
    return (
        FacilityRecord(name="天草市複合施設ここらす", address="天草市浄南町４番１５号"),
        FacilityRecord(name="天草市役所", address="天草市東浜町８番１号"),
        FacilityRecord(name="牛深総合センター", address="天草市牛深町１６０番地"),
        FacilityRecord(name="天草市役所", address="天草市東浜町８番１号"),
        FacilityRecord(name="住所不明施設", address="熊本県どこか1番"),
        FacilityRecord(name="町名なし施設", address="天草市12番"),
    )


@pytest.fixture
def matching_config() -> MatchingConfig:
    return MatchingConfig()


@pytest.fixture
def repository(town_entries, facilities) -> InMemoryReferenceRepository:
    return InMemoryReferenceRepository.from_sequences(town_entries, facilities)


@pytest.fixture
def catch_all_repository(
    town_entries, catch_all_entry, facilities
) -> InMemoryReferenceRepository:
    return InMemoryReferenceRepository.from_sequences(
        town_entries + (catch_all_entry,), facilities
    )


@pytest.fixture
def service(repository) -> TravelPointService:
    return TravelPointService(reference_data=repository)


@pytest.fixture
def catch_all_service(catch_all_repository) -> TravelPointService:
    return TravelPointService(reference_data=catch_all_repository)


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Write a small CSV reference data set and return its directory."""
    (tmp_path / "town_ranges.csv").write_text(
        "town,start,end,location\n"
        "浄南町,5,99999,本渡or亀場\n"
        "浄南町,0,5,本渡\n"
        "\n"
        "本渡町広瀬,1,1470,本渡\n"
        "本渡町広瀬,1470,2080,佐伊津\n"
        "本渡町広瀬,2080,99999,本渡\n"
        f"{CATCH_ALL},0,99999,本渡\n",
        encoding="utf-8",
    )
    (tmp_path / "facilities.csv").write_text(
        "name,address\n"
        "天草市複合施設ここらす,天草市浄南町４番１５号\n"
        "天草市役所,天草市東浜町８番１号\n",
        encoding="utf-8",
    )
    return tmp_path
