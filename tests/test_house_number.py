"""Tests for house-number normalisation."""

import math

import pytest

from travel_point.parsing.house_number import (
    is_numeric_key,
    normalize_house_number,
    parse_numeric_key,
)


class TestParseNumericKey:
    def test_fullwidth_lot_and_sub_number(self):
        assert parse_numeric_key("４番１５号") == 4.15

    def test_lot_only(self):
        assert parse_numeric_key("1470番") == 1470.0

    def test_banchi_suffix(self):
        assert parse_numeric_key("1470番地") == 1470.0

    def test_third_component_ignored(self):
        assert parse_numeric_key("1-2-3") == 1.2
        assert parse_numeric_key("1-2-3") == parse_numeric_key("1-2")

    @pytest.mark.parametrize("raw", ["", None])
    def test_empty_is_zero(self, raw):
        assert parse_numeric_key(raw) == 0.0

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("5の2", 5.2),
            ("12ー3", 12.3),
            ("12－3", 12.3),
            ("１６０番地", 160.0),
            ("８番１号", 8.1),
            ("1234番地の5", 1234.5),
            ("4番 15号", 4.15),
        ],
    )
    def test_local_notations(self, raw, expected):
        assert parse_numeric_key(raw) == expected

    def test_secondary_digits_are_copied_verbatim(self):
        # "05" stays "05" after the separator; it is not 5/100 of anything
        assert parse_numeric_key("4番05号") == 4.05
        assert parse_numeric_key("4番5号") == 4.5

    def test_trailing_text_after_number_is_ignored(self):
        assert parse_numeric_key("12a") == 12.0

    @pytest.mark.parametrize("raw", ["abc", "番地", "の", "---"])
    def test_non_numeric_is_nan(self, raw):
        key = parse_numeric_key(raw)
        assert math.isnan(key)
        assert not is_numeric_key(key)


class TestNormalizeHouseNumber:
    def test_keeps_first_two_segments(self):
        assert normalize_house_number("1-2-3") == "1.2"

    def test_drops_empty_segments(self):
        assert normalize_house_number("1470番地") == "1470"

    def test_converts_fullwidth_digits(self):
        assert normalize_house_number("４番１５号") == "4.15"
