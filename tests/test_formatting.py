"""
Tests for display formatting.
"""

import pytest

from rent_vs_invest.formatting import format_currency, format_percent


class TestFormatCurrency:
    """Test US dollar formatting."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "$0"),
            (47, "$47"),
            (128800, "$128,800"),
            (1234567, "$1,234,567"),
            (-31200, "-$31,200"),
        ],
    )
    def test_whole_dollars(self, value, expected):
        assert format_currency(value) == expected

    def test_rounds_half_up(self):
        assert format_currency(1234.5) == "$1,235"
        assert format_currency(-1234.5) == "-$1,235"
        assert format_currency(1566.742749) == "$1,567"

    def test_no_fraction_digits_by_default(self):
        assert "." not in format_currency(360000)
        assert "." not in format_currency(47.257251)

    def test_negative_zero_has_no_sign(self):
        assert format_currency(-0.4) == "$0"

    def test_fraction_digits_override(self):
        assert format_currency(1566.742749, 2) == "$1,566.74"
        assert format_currency(1000, 2) == "$1,000.00"

    def test_large_values(self):
        assert format_currency(1e30) == "$1,000,000,000,000,000,000,000,000,000,000"


class TestFormatPercent:
    """Test percentage formatting."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (8, "8.00%"),
            (4.5, "4.50%"),
            (3.25, "3.25%"),
            (14.02795031, "14.03%"),
            (100, "100.00%"),
            (-2.5, "-2.50%"),
        ],
    )
    def test_two_decimals(self, value, expected):
        assert format_percent(value) == expected
