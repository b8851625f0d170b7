"""Tests for numeric precision reduction."""

import math

import pytest

from lottieslim.kernel.numeric import round_decimals, round_number


class TestRoundNumber:
    @pytest.mark.parametrize("value,precision,expected", [
        (1.2345, 1, 1.2),
        (1.2345, 2, 1.23),
        (0.125, 2, 0.13),
        (50.987654, 2, 50.99),
        (0.5, 0, 1),
        (2.5, 0, 3),
        (-2.5, 0, -2),
        (1.0, 2, 1),
        (0.00001, 4, 0),
        (5e-05, 4, 5e-05),
        (7e-05, 4, 7e-05),
    ])
    def test_rounds_half_up(self, value, precision, expected):
        result = round_number(value, precision)
        assert result == expected
        assert type(result) is type(expected)

    def test_ints_unchanged(self):
        assert round_number(42, 0) == 42
        assert isinstance(round_number(42, 2), int)

    def test_non_numbers_unchanged(self):
        assert round_number(True, 0) is True
        assert round_number("1.234", 1) == "1.234"
        assert round_number(None, 1) is None

    def test_non_finite_unchanged(self):
        assert math.isinf(round_number(math.inf, 2))
        assert math.isnan(round_number(math.nan, 2))

    def test_huge_float_stays_float(self):
        assert isinstance(round_number(1e20, 2), float)


class TestRoundDecimals:
    def test_precision_one(self):
        assert round_decimals({"x": 1.2345}, 1) == {"x": 1.2}

    def test_uniform_across_roles(self):
        doc = {"layers": [{"ks": {"p": {"k": [10.556, 20.111]}}, "ip": 0.333}], "c": [0.1234, 1]}
        assert round_decimals(doc, 2) == {"layers": [{"ks": {"p": {"k": [10.56, 20.11]}}, "ip": 0.33}], "c": [0.12, 1]}

    def test_required_top_level_fields_kept_exact(self, make_doc):
        doc = make_doc(fr=29.97, op=90.5, w=100.25, extra=1.234)
        result = round_decimals(doc, 0)
        assert result["fr"] == 29.97
        assert result["op"] == 90.5
        assert result["w"] == 100.25
        assert result["extra"] == 1

    def test_input_untouched(self):
        doc = {"x": [1.2345]}
        round_decimals(doc, 1)
        assert doc == {"x": [1.2345]}


def test_rounding_never_lengthens_a_literal():
    for value in (5e-05, 6e-05, 9.5e-05, 1.5e-05, 0.125, 123.456789):
        for precision in range(5):
            rounded = round_number(value, precision)
            assert len(repr(rounded)) <= len(repr(value))
