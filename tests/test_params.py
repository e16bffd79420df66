"""Parameter normalization: CSV parsing, alignment, decimals."""

import pytest

from core.errors import ValidationError
from core.services.params import (
    ADDRESSES_REQUIRED,
    build_query_items,
    build_request_config,
    derive_decimals,
    normalize_query,
    parse_csv_param,
    parse_number,
)


class TestParseCsvParam:
    def test_splits_trims_and_drops_empty(self):
        assert parse_csv_param(" a, b ,,c , ") == ["a", "b", "c"]

    def test_repeated_values_are_joined(self):
        assert parse_csv_param(["a,b", " c"]) == ["a", "b", "c"]

    @pytest.mark.parametrize("value", [None, "", [], " , ,"])
    def test_empty(self, value):
        assert parse_csv_param(value) == []


class TestParseNumber:
    @pytest.mark.parametrize(
        "token, expected",
        [
            ("5", 5.0),
            ("0.25", 0.25),
            ("-1", -1.0),
            ("1e3", 1000.0),
            ("0x10", 16.0),
            ("0X1f", 31.0),
            ("0b101", 5.0),
            ("0o17", 15.0),
            (" 0x10 ", 16.0),
        ],
    )
    def test_numbers(self, token, expected):
        assert parse_number(token) == expected

    @pytest.mark.parametrize(
        "token",
        ["abc", "nan", "inf", "-Infinity", "1_000", "5x", "0x", "0xg", "-0x10", "0x-1", "0b2", "\u0665"],
    )
    def test_not_numbers(self, token):
        assert parse_number(token) is None


class TestBuildQueryItems:
    def test_aligns_by_position(self):
        items = build_query_items(["dora1a", "dora1b"], ["Alice", "Bob"], ["5", "10.5"])

        assert [(i.name, i.address, i.threshold) for i in items] == [
            ("Alice", "dora1a", 5.0),
            ("Bob", "dora1b", 10.5),
        ]

    def test_short_auxiliary_lists_fall_back(self):
        items = build_query_items(["dora1a", "dora1b", "dora1c"], ["Alice"], ["1"])

        assert [i.name for i in items] == ["Alice", "dora1b", "dora1c"]
        assert [i.threshold for i in items] == [1.0, None, None]

    def test_non_numeric_threshold_is_absent(self):
        items = build_query_items(["dora1a", "dora1b"], [], ["abc", "2"])

        assert [i.threshold for i in items] == [None, 2.0]

    def test_extra_names_are_ignored(self):
        items = build_query_items(["dora1a"], ["Alice", "Bob"], [])

        assert len(items) == 1

    def test_empty_addresses_rejected(self):
        with pytest.raises(ValidationError) as excinfo:
            build_query_items([])

        assert excinfo.value.message == ADDRESSES_REQUIRED
        assert excinfo.value.status_code == 400


class TestDeriveDecimals:
    @pytest.mark.parametrize(
        "divisor, expected",
        [
            ("1000000000000000000", 18),
            ("1000000", 6),
            ("10", 1),
            ("1", 0),
            ("1e6", 6),
            ("1000000000000000000000000000000", 30),
            ("100\n", 2),
            (" 1000 ", 3),
        ],
    )
    def test_powers_of_ten(self, divisor, expected):
        assert derive_decimals(divisor) == expected

    @pytest.mark.parametrize("divisor", ["abc", "0", "-100", "12345", "", "inf", "nan"])
    def test_fallback(self, divisor):
        assert derive_decimals(divisor) == 18


class TestRequestConfig:
    def test_defaults(self, settings):
        config = build_request_config({}, settings)

        assert config.denom == "peaka"
        assert config.rest_base == "https://vota-rest.dorafactory.org"
        assert config.divisor == "1000000000000000000"
        assert config.decimals == 18

    def test_overrides(self, settings):
        config = build_request_config(
            {"denom": "uatom", "rest_base": "https://lcd.example", "divisor": "1000000"},
            settings,
        )

        assert (config.denom, config.rest_base, config.decimals) == ("uatom", "https://lcd.example", 6)

    def test_empty_values_use_defaults(self, settings):
        config = build_request_config({"denom": "", "divisor": None}, settings)

        assert config.denom == "peaka"
        assert config.decimals == 18

    def test_normalize_query_validates_first(self, settings):
        with pytest.raises(ValidationError):
            normalize_query({"names": "Alice"}, settings)
