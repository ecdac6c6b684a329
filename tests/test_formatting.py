"""
Tests for display formatting helpers.

Run: pytest tests/test_formatting.py -v
"""

import math

import pandas as pd
import pytest

from headcount.formatting import (
    format_currency,
    format_currency_columns,
    format_number,
    format_pct,
    format_ratio,
    format_variance,
    format_variance_columns,
    round_half_up,
)


class TestFormatCurrency:

    @pytest.mark.parametrize("value,expected", [
        (2_858_000, "$2.9M"),
        (8_748_000, "$8.7M"),
        (1_000_000, "$1.0M"),
        (678_000, "$678K"),
        (1_500, "$2K"),
        (1_000, "$1K"),
        (450, "$450"),
        (0, "$0"),
        (-270_000, "$-270K"),
    ])
    def test_compact_dollars(self, value, expected):
        assert format_currency(value) == expected

    def test_missing_values(self):
        assert format_currency(None) == "N/A"
        assert format_currency(math.nan) == "N/A"


class TestFormatVariance:

    @pytest.mark.parametrize("value,expected", [(17, "+17"), (1, "+1"), (0, "0"), (-2, "-2")])
    def test_sign(self, value, expected):
        assert format_variance(value) == expected


class TestRoundHalfUp:

    def test_halves_round_away_from_zero(self):
        assert round_half_up(2.5) == 3.0
        assert round_half_up(87.5) == 88.0
        assert round_half_up(0.25, 1) == 0.3

    def test_rounds_the_decimal_repr(self):
        assert round_half_up(1.005, 2) == 1.01

    def test_no_negative_zero(self):
        assert str(round_half_up(-0.4)) == "0.0"

    def test_missing(self):
        assert round_half_up(None) is None


class TestSmallFormatters:

    def test_number(self):
        assert format_number(1234567) == "1,234,567"

    def test_ratio(self):
        assert format_ratio(8.04) == "8.0:1"

    def test_pct(self):
        assert format_pct(33.3) == "33%"
        assert format_pct(33.33, decimals=1) == "33.3%"


class TestColumnFormatters:

    def test_currency_and_variance_columns(self):
        df = pd.DataFrame({"annual_cost": [2_858_000, None], "variance": [17, -1], "name": ["a", "b"]})
        out = format_variance_columns(format_currency_columns(df, ["annual_cost", "missing"]), ["variance"])
        assert out["annual_cost"].tolist() == ["$2.9M", ""]
        assert out["variance"].tolist() == ["+17", "-1"]
        assert df["variance"].tolist() == [17, -1]
