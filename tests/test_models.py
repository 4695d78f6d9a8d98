"""Tests for domain models."""

import math

import pytest

from travel_point.domain.models import (
    LookupResult,
    Range,
    ResolutionStatus,
    format_bound,
    is_ambiguous_label,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(5.0, "5"), (99999.0, "99999"), (0.0, "0"), (4.15, "4.15")],
)
def test_format_bound(value, expected):
    assert format_bound(value) == expected


@pytest.mark.parametrize(
    ("label", "expected"),
    [("本渡or亀場", True), ("本渡 OR 亀場", True), ("本渡", False)],
)
def test_is_ambiguous_label(label, expected):
    assert is_ambiguous_label(label) is expected


class TestRange:
    def test_half_open(self):
        rng = Range(0.0, 5.0, "本渡")
        assert rng.contains(0.0)
        assert rng.contains(4.99)
        assert not rng.contains(5.0)
        assert not rng.contains(math.nan)

    def test_describe(self):
        assert Range(1470.0, 2080.0, "佐伊津").describe() == "1470 以上 2080 未満"


class TestLookupResult:
    def test_candidates_of_ambiguous_result(self):
        result = LookupResult(point="亀場or枦宇土", status=ResolutionStatus.AMBIGUOUS)
        assert result.candidates == ("亀場", "枦宇土")

    def test_candidates_of_definite_result(self):
        assert LookupResult(point="本渡").candidates == ("本渡",)

    def test_error_has_no_candidates(self):
        result = LookupResult(point="エラー: x", status=ResolutionStatus.ERROR)
        assert result.candidates == ()

    def test_to_dict(self):
        result = LookupResult(
            point="佐伊津",
            matched_town="本渡町広瀬",
            matched_range_description="1470 以上 2080 未満",
            key=1470.0,
            source="住所: 本渡町広瀬 1470番地",
        )
        assert result.to_dict() == {
            "point": "佐伊津",
            "matched_town": "本渡町広瀬",
            "matched_range_description": "1470 以上 2080 未満",
            "status": "SUCCESS",
            "key": 1470.0,
            "source": "住所: 本渡町広瀬 1470番地",
            "suggestions": [],
        }

    def test_to_dict_drops_nan_key(self):
        result = LookupResult(point="エラー: x", status=ResolutionStatus.ERROR, key=math.nan)
        assert result.to_dict()["key"] is None
