"""
Zone Pricing Cost Calculator

DataFrame in, DataFrame out. The input can come from any source (booking
export, CSV, manual creation) as long as it contains the required columns.
The output is the same DataFrame with calculation columns and prices appended.

REQUIRED INPUT COLUMNS
----------------------
    destination_country - Free-text destination country name
    weight_kg           - Shipment weight in kilograms

OPTIONAL INPUT COLUMNS
----------------------
    markup_percent      - Profit markup (default 20, also used for nulls)

OUTPUT COLUMNS ADDED
--------------------
    supplement_shipments() adds:
        - country_normalized, shipping_zone, zone_label, zone_covered

    calculate() adds:
        - cost_carrier, markup_percent, price_sell
        - calculator_version

Unsupported destinations are not an error: they keep a null shipping_zone,
zone_covered=False and null cost/price columns.

USAGE
-----
    from pricing.zones.calculate_costs import calculate_costs
    result = calculate_costs(df)
"""

import polars as pl

from shared.rounding import round_half_up_expr

from .version import VERSION
from .data import (
    load_rates,
    load_zones,
    normalize_country_expr,
    ZONE_LABELS,
    DEFAULT_PROFIT_MARKUP_PERCENT,
)


REQUIRED_INPUT_COLS = [
    "destination_country",
    "weight_kg",
]


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_costs(
    df: pl.DataFrame,
    zones: pl.DataFrame | None = None,
    rates: pl.DataFrame | None = None,
) -> pl.DataFrame:
    """
    Calculate carrier costs and sell prices for a shipment DataFrame.

    Args:
        df: Raw shipment DataFrame with required columns (see module docstring)
        zones: Country map DataFrame (loaded from countries.csv if not provided)
        rates: Long-format rates (loaded from zone_rates.csv if not provided)

    Returns:
        DataFrame with supplemented data, costs and sell prices
    """
    df = supplement_shipments(df, zones)
    df = calculate(df, rates)
    return df


# =============================================================================
# SUPPLEMENT SHIPMENTS
# =============================================================================

def supplement_shipments(
    df: pl.DataFrame,
    zones: pl.DataFrame | None = None
) -> pl.DataFrame:
    """
    Supplement shipment data with zone lookups.

    Args:
        df: Raw shipment DataFrame
        zones: Country map DataFrame (loaded if not provided)

    Returns:
        DataFrame with added columns:
            - country_normalized, shipping_zone, zone_label, zone_covered
    """
    _check_required_columns(df)

    if zones is None:
        zones = load_zones()

    df = df.with_columns(
        normalize_country_expr("destination_country").alias("country_normalized"),
        pl.col("weight_kg").cast(pl.Float64),
    )
    df = _lookup_zones(df, zones)

    return df


def _check_required_columns(df: pl.DataFrame) -> None:
    missing = [c for c in REQUIRED_INPUT_COLS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required input columns: {missing}")


def _lookup_zones(df: pl.DataFrame, zones: pl.DataFrame) -> pl.DataFrame:
    """
    Add zone data based on the normalized country name.

    No fallback zone: an unmatched country stays unpriced.
    """
    zones = zones.rename({"country": "_country_key", "zone": "shipping_zone"})

    df = df.with_row_index("_row_id")
    df = df.join(
        zones,
        left_on="country_normalized",
        right_on="_country_key",
        how="left",
    )
    df = df.sort("_row_id").drop("_row_id")

    return df.with_columns([
        pl.col("shipping_zone").replace_strict(
            dict(ZONE_LABELS), default=None, return_dtype=pl.Utf8
        ).alias("zone_label"),
        pl.col("shipping_zone").is_not_null().alias("zone_covered"),
    ])


# =============================================================================
# CALCULATE COSTS
# =============================================================================

def calculate(
    df: pl.DataFrame,
    rates: pl.DataFrame | None = None
) -> pl.DataFrame:
    """
    Calculate carrier costs and sell prices for supplemented shipments.

    Args:
        df: Supplemented shipment DataFrame from supplement_shipments
        rates: Long-format rates (loaded if not provided)

    Returns:
        DataFrame with cost_carrier, markup_percent, price_sell and version

    Processing order:
        1. Rate lookup  - carrier cost by zone and weight bracket
        2. Markup       - sell price from carrier cost
        3. Version stamp
    """
    df = _lookup_carrier_cost(df, rates)
    df = _apply_markup(df)
    df = _stamp_version(df)
    return df


def _lookup_carrier_cost(
    df: pl.DataFrame,
    rates: pl.DataFrame | None = None
) -> pl.DataFrame:
    """
    Look up carrier cost by zone and weight bracket.

    Covered shipments match exactly one bracket (the brackets cover the whole
    real line). A NaN weight takes the heaviest bracket. Uncovered shipments
    keep their single row with a null rate.
    """
    input_count = len(df)
    if rates is None:
        rates = load_rates()

    rates = rates.select(["zone", "weight_kg_lower", "weight_kg_upper", "rate"])

    df = df.with_row_index("_row_id")

    df = (
        df
        .join(rates, left_on="shipping_zone", right_on="zone", how="left")
        .filter(
            ~pl.col("zone_covered") |
            pl.when(pl.col("weight_kg").is_nan())
            .then(pl.col("weight_kg_upper") == float("inf"))
            .otherwise(
                (pl.col("weight_kg") > pl.col("weight_kg_lower")) &
                (pl.col("weight_kg") <= pl.col("weight_kg_upper"))
            )
        )
    )

    output_count = len(df)
    if output_count < input_count:
        missing_count = input_count - output_count
        raise ValueError(
            f"{missing_count} shipment(s) have no matching rate bracket. "
            f"Check weight_kg values (must be numeric and not empty)."
        )

    df = df.with_columns(
        pl.when(~pl.col("zone_covered"))
        .then(pl.lit(None, dtype=pl.Int64))
        .when((pl.col("weight_kg") <= 0) & pl.col("weight_kg").is_not_nan())
        .then(pl.lit(0, dtype=pl.Int64))
        .otherwise(round_half_up_expr(pl.col("rate")))
        .alias("cost_carrier")
    )

    df = df.drop(["weight_kg_lower", "weight_kg_upper", "rate"])
    df = df.sort("_row_id").drop("_row_id")

    return df


def _apply_markup(df: pl.DataFrame) -> pl.DataFrame:
    """Fill default markup and derive price_sell from cost_carrier."""
    if "markup_percent" in df.columns:
        markup = pl.col("markup_percent").cast(pl.Float64).fill_null(DEFAULT_PROFIT_MARKUP_PERCENT)
    else:
        markup = pl.lit(DEFAULT_PROFIT_MARKUP_PERCENT, dtype=pl.Float64)

    df = df.with_columns(markup.alias("markup_percent"))

    return df.with_columns(
        round_half_up_expr(
            pl.col("cost_carrier") * (1 + pl.col("markup_percent") / 100)
        ).alias("price_sell")
    )


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))


__all__ = [
    "calculate_costs",
    "supplement_shipments",
    "calculate",
    "REQUIRED_INPUT_COLS",
]
