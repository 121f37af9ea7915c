"""
Unit Tests for Money Rounding

Run with: pytest shared/tests/test_rounding.py -v
"""

import pytest
import polars as pl

from shared.rounding import round_half_up, round_half_up_expr


CASES = [
    (57.5, 58),
    (47.475, 47),
    (102.375, 102),
    (0.5, 1),
    (2.5, 3),       # round() would give 2
    (2.4999, 2),
    (-2.5, -2),
    (-2.6, -3),
    (0.0, 0),
    (29372.63, 29373),
    (0.49999999999999994, 0),  # largest double below 0.5
    (-0.5000000000000001, -1),
]


class TestRoundHalfUp:
    """Halves go toward positive infinity in both scalar and polars paths."""

    @pytest.mark.parametrize("value,expected", CASES)
    def test_scalar(self, value, expected):
        assert round_half_up(value) == expected

    def test_scalar_returns_int(self):
        assert type(round_half_up(1.2)) is int

    def test_expression_matches_scalar(self):
        df = pl.DataFrame({"value": [v for v, _ in CASES]})
        result = df.select(round_half_up_expr(pl.col("value")).alias("rounded"))
        assert result["rounded"].dtype == pl.Int64
        assert result["rounded"].to_list() == [e for _, e in CASES]

    def test_expression_keeps_nulls(self):
        df = pl.DataFrame({"value": [1.5, None]})
        result = df.select(round_half_up_expr(pl.col("value")).alias("rounded"))
        assert result["rounded"].to_list() == [2, None]

    def test_just_below_half_rounds_down(self):
        """Adding 0.5 before flooring would carry this up to 1."""
        value = 0.49999999999999994
        assert value < 0.5
        assert round_half_up(value) == 0
        df = pl.DataFrame({"value": [value]})
        assert df.select(round_half_up_expr(pl.col("value")))["value"][0] == 0
