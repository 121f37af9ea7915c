"""
Money Rounding

All prices are whole currency units. Every derived amount is rounded to the
nearest unit with halves going up (toward positive infinity), so 57.5 -> 58
and -2.5 -> -2. Python's round() rounds halves to even and is not used for
money anywhere in the calculators.

The fraction is compared against 0.5 instead of adding 0.5 and flooring:
value + 0.5 can itself round up in floating point (0.49999999999999994 + 0.5
is exactly 1.0).
"""

import math

import polars as pl


def round_half_up(value: float) -> int:
    """Round a scalar amount to the nearest whole unit, halves up."""
    whole = math.floor(value)
    return int(whole) + (1 if value - whole >= 0.5 else 0)


def round_half_up_expr(expr: pl.Expr) -> pl.Expr:
    """Polars counterpart of round_half_up, returning an Int64 expression."""
    whole = expr.floor()
    return (whole + ((expr - whole) >= 0.5).cast(pl.Float64)).cast(pl.Int64)


__all__ = [
    "round_half_up",
    "round_half_up_expr",
]
