"""
Booking Price Calculator

DataFrame in, DataFrame out. Each row is one booking; the output is the same
DataFrame with the fee breakdown appended. Every amount is rounded to whole
units as soon as it is derived, before it feeds any later sum.

REQUIRED INPUT COLUMNS
----------------------
    weight_kg           - Booking weight in kilograms

OPTIONAL INPUT COLUMNS
----------------------
    declared_value      - Declared goods value (default 0)
    premium_insurance   - Customer opted in to premium insurance (default False)
    fragile             - Booking contains fragile items (default False)

OUTPUT COLUMNS ADDED
--------------------
    supplement_bookings() fills the optional columns with their defaults.

    calculate() adds:
        - cost_base
        - surcharge_* flags (fuel, ins, frg)
        - cost_* amounts (fuel, ins, frg, subtotal, vat, total)
        - calculator_version

USAGE
-----
    from pricing.booking.calculate_costs import calculate_costs
    result = calculate_costs(df)
"""

import polars as pl

from shared.rounding import round_half_up_expr

from .version import VERSION
from .data import Tariff, DEFAULT_TARIFF
from .surcharges import ALL


REQUIRED_INPUT_COLS = [
    "weight_kg",
]

# Optional input columns and the value used when missing or null
OPTIONAL_INPUT_DEFAULTS = {
    "declared_value": (0.0, pl.Float64),
    "premium_insurance": (False, pl.Boolean),
    "fragile": (False, pl.Boolean),
}


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_costs(
    df: pl.DataFrame,
    tariff: Tariff = DEFAULT_TARIFF
) -> pl.DataFrame:
    """
    Calculate the price breakdown for a booking DataFrame.

    Args:
        df: Booking DataFrame with required columns (see module docstring)
        tariff: Rates and fees to price with

    Returns:
        DataFrame with defaults filled, surcharge flags and costs
    """
    df = supplement_bookings(df)
    df = calculate(df, tariff)
    return df


# =============================================================================
# SUPPLEMENT BOOKINGS
# =============================================================================

def supplement_bookings(df: pl.DataFrame) -> pl.DataFrame:
    """
    Validate inputs and fill optional booking options with their defaults.

    A NaN declared value counts as no declared value (0).

    Raises:
        ValueError: If weight_kg is missing or has empty or NaN values
    """
    missing = [c for c in REQUIRED_INPUT_COLS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required input columns: {missing}")

    null_weights = df.get_column("weight_kg").null_count()
    if null_weights:
        raise ValueError(f"{null_weights} booking(s) have no weight_kg.")

    df = df.with_columns(pl.col("weight_kg").cast(pl.Float64))

    nan_weights = df.get_column("weight_kg").is_nan().sum()
    if nan_weights:
        raise ValueError(f"{nan_weights} booking(s) have a NaN weight_kg.")

    for col, (default, dtype) in OPTIONAL_INPUT_DEFAULTS.items():
        if col in df.columns:
            df = df.with_columns(pl.col(col).cast(dtype).fill_null(default))
        else:
            df = df.with_columns(pl.lit(default, dtype=dtype).alias(col))

    return df.with_columns(pl.col("declared_value").fill_nan(0.0))


# =============================================================================
# CALCULATE COSTS
# =============================================================================

def calculate(
    df: pl.DataFrame,
    tariff: Tariff = DEFAULT_TARIFF
) -> pl.DataFrame:
    """
    Calculate booking costs for supplemented bookings.

    Args:
        df: Supplemented booking DataFrame from supplement_bookings
        tariff: Rates and fees to price with

    Returns:
        DataFrame with surcharge flags, costs, and totals

    Processing order:
        1. Base shipping - flat base rate plus per-kg rate
        2. Surcharges    - fuel (on base), insurance, fragile
        3. Subtotal      - base + all surcharges
        4. VAT           - percentage of subtotal
        5. Total         - subtotal + VAT
    """
    df = _calculate_base(df, tariff)
    df = _apply_surcharges(df, tariff)
    df = _calculate_subtotal(df)
    df = _calculate_vat(df, tariff)
    df = _calculate_total(df)
    df = _stamp_version(df)
    return df


def _calculate_base(df: pl.DataFrame, tariff: Tariff) -> pl.DataFrame:
    """Base shipping = base rate + weight * per-kg rate."""
    return df.with_columns(
        round_half_up_expr(
            pl.lit(tariff.base_rate, dtype=pl.Float64) +
            pl.col("weight_kg") * tariff.per_kg_rate
        ).alias("cost_base")
    )


def _apply_surcharges(df: pl.DataFrame, tariff: Tariff) -> pl.DataFrame:
    """Apply each surcharge: flag column, then cost (0 when not triggered)."""
    for surcharge in ALL:
        flag_col = surcharge.flag_col()
        cost_col = surcharge.cost_col()

        df = df.with_columns(surcharge.conditions().alias(flag_col))
        df = df.with_columns(
            pl.when(pl.col(flag_col))
            .then(surcharge.cost(tariff))
            .otherwise(pl.lit(0, dtype=pl.Int64))
            .alias(cost_col)
        )

    return df


def _calculate_subtotal(df: pl.DataFrame) -> pl.DataFrame:
    """Calculate cost_subtotal as sum of base and all surcharge costs."""
    cost_cols = ["cost_base"] + [s.cost_col() for s in ALL]
    return df.with_columns(pl.sum_horizontal(cost_cols).alias("cost_subtotal"))


def _calculate_vat(df: pl.DataFrame, tariff: Tariff) -> pl.DataFrame:
    """Calculate VAT on the rounded subtotal."""
    return df.with_columns(
        round_half_up_expr(pl.col("cost_subtotal") * tariff.vat_rate).alias("cost_vat")
    )


def _calculate_total(df: pl.DataFrame) -> pl.DataFrame:
    """Calculate cost_total (subtotal + VAT)."""
    return df.with_columns(
        (pl.col("cost_subtotal") + pl.col("cost_vat")).alias("cost_total")
    )


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))


__all__ = [
    "calculate_costs",
    "supplement_bookings",
    "calculate",
    "REQUIRED_INPUT_COLS",
    "OPTIONAL_INPUT_DEFAULTS",
]
