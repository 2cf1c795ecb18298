"""
Unit Tests for Input Parsing

Non-numeric input must always resolve to zero.
"""

import pytest

from flip_engine.parsing import parse_amount, parse_count


class TestParseAmount:
    """Money and rate fields."""

    @pytest.mark.parametrize("raw, expected", [
        (150000, 150000.0),
        (6.5, 6.5),
        ("150000", 150000.0),
        ("$150,000.00", 150000.0),
        ("6.5%", 6.5),
        ("-1,250.75", -1250.75),
        (" 42 ", 42.0),
        ("1.2.3", 1.2),
    ])
    def test_numeric_values_are_parsed(self, raw, expected):
        assert parse_amount(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "", "$", "--", None, [], {}, float("nan"), float("inf")])
    def test_non_numeric_values_become_zero(self, raw):
        assert parse_amount(raw) == 0.0

    def test_booleans_are_not_numbers(self):
        assert parse_amount(True) == 0.0

    def test_overflowing_values_become_zero(self):
        assert parse_amount("9" * 400) == 0.0
        assert parse_amount(10 ** 400) == 0.0


class TestParseCount:
    """Month and year fields read whole numbers only."""

    @pytest.mark.parametrize("raw, expected", [
        (3, 3),
        (3.9, 3),
        ("30", 30),
        ("30 years", 30),
        ("  12", 12),
        ("-2", -2),
    ])
    def test_leading_integer_is_parsed(self, raw, expected):
        assert parse_count(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "", "years 30", "$3", None, float("nan")])
    def test_non_numeric_values_become_zero(self, raw):
        assert parse_count(raw) == 0

    def test_integers_pass_through_unchanged(self):
        big = 10 ** 400
        assert parse_count(big) == big

    def test_digit_string_past_conversion_limit_becomes_zero(self):
        assert parse_count("9" * 10000) == 0
