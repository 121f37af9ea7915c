"""
Zone Pricing Data

Reference data and loaders for the rate sheet and the country map.

Structure:
    - reference/: Static reference data (rates, countries, zone labels, markup)
"""

from pathlib import Path

import polars as pl

from .reference import (
    ZoneId,
    ZONE_IDS,
    ZONE_LABELS,
    ZONE_RATE_COL_PREFIX,
    DEFAULT_PROFIT_MARKUP_PERCENT,
)


REFERENCE_DIR = Path(__file__).parent / "reference"

RATE_SHEET_FILE = "zone_rates.csv"
COUNTRIES_FILE = "countries.csv"

ZONE_RATE_COLS = [f"{ZONE_RATE_COL_PREFIX}{z}" for z in ZONE_IDS]


def normalize_country(name: str | None) -> str:
    """Normalize a country name for map lookups: trimmed and lower-cased."""
    if name is None:
        return ""
    return name.strip().lower()


def normalize_country_expr(col: str) -> pl.Expr:
    """Polars counterpart of normalize_country."""
    return pl.col(col).fill_null("").str.strip_chars().str.to_lowercase()


# =============================================================================
# RATE SHEET
# =============================================================================

def load_rate_sheet(path: Path | str | None = None) -> pl.DataFrame:
    """
    Load the rate sheet in its wide CSV format, validated and sorted.

    Returns:
        DataFrame with columns:
            - weight_kg: Weight breakpoint (kg), ascending and unique
            - zone_1 .. zone_4: Carrier cost (NGN) for that breakpoint
    """
    path = Path(path) if path is not None else REFERENCE_DIR / RATE_SHEET_FILE
    sheet = pl.read_csv(path)

    missing = [c for c in ["weight_kg"] + ZONE_RATE_COLS if c not in sheet.columns]
    if missing:
        raise ValueError(f"Rate sheet {path.name} is missing columns: {missing}")

    sheet = (
        sheet
        .select(["weight_kg"] + ZONE_RATE_COLS)
        .with_columns(pl.col(["weight_kg"] + ZONE_RATE_COLS).cast(pl.Float64))
        .sort("weight_kg")
    )
    _validate_rate_sheet(sheet, path.name)
    return sheet


def _validate_rate_sheet(sheet: pl.DataFrame, source: str) -> None:
    errors = []

    if sheet.is_empty():
        errors.append("no rate rows")

    null_counts = sheet.null_count().row(0, named=True)
    for col, count in null_counts.items():
        if count:
            errors.append(f"{count} empty value(s) in {col}")

    duplicated = (
        sheet
        .filter(pl.col("weight_kg").is_duplicated())
        .get_column("weight_kg")
        .unique()
        .sort()
        .to_list()
    )
    if duplicated:
        errors.append(f"duplicate weight breakpoints: {duplicated}")

    if errors:
        raise ValueError(f"Rate sheet errors in {source}:\n  " + "\n  ".join(errors))


def load_rates(path: Path | str | None = None) -> pl.DataFrame:
    """
    Load carrier rates in long format, ready for joining.

    Each breakpoint becomes a weight bracket (lower, upper] running from the
    previous breakpoint to this one, so a join + bracket filter performs the
    ceiling lookup. The first bracket is open below and the last bracket is
    open above: weights past the heaviest breakpoint use the heaviest rate.

    Returns:
        DataFrame with columns:
            - weight_kg: Breakpoint the rate belongs to
            - weight_kg_lower: Lower bound of weight bracket (exclusive)
            - weight_kg_upper: Upper bound of weight bracket (inclusive)
            - zone: Zone id ("1" to "4")
            - rate: Carrier cost for this zone/weight combination
    """
    sheet = load_rate_sheet(path)

    return (
        sheet
        .with_columns([
            pl.col("weight_kg")
            .shift(1, fill_value=float("-inf"))
            .alias("weight_kg_lower"),

            pl.when(pl.col("weight_kg") == pl.col("weight_kg").max())
            .then(pl.lit(float("inf")))
            .otherwise(pl.col("weight_kg"))
            .alias("weight_kg_upper"),
        ])
        .unpivot(
            index=["weight_kg", "weight_kg_lower", "weight_kg_upper"],
            on=ZONE_RATE_COLS,
            variable_name="_zone_col",
            value_name="rate",
        )
        .with_columns(
            pl.col("_zone_col").str.replace(ZONE_RATE_COL_PREFIX, "", literal=True).alias("zone")
        )
        .drop("_zone_col")
        .select(["weight_kg", "weight_kg_lower", "weight_kg_upper", "zone", "rate"])
        .sort(["zone", "weight_kg"])
    )


# =============================================================================
# COUNTRY MAP
# =============================================================================

def load_zones(path: Path | str | None = None) -> pl.DataFrame:
    """
    Load the country to zone map from CSV.

    Several aliases may point at the same zone ("uk", "england" -> "1").
    Keys are stored already normalized.

    Returns:
        DataFrame with columns: country, zone
    """
    path = Path(path) if path is not None else REFERENCE_DIR / COUNTRIES_FILE
    zones = pl.read_csv(
        path,
        schema_overrides={
            "country": pl.Utf8,
            "zone": pl.Utf8,    # Keep zone ids as strings ("1" .. "4")
        },
    )

    missing = [c for c in ["country", "zone"] if c not in zones.columns]
    if missing:
        raise ValueError(f"Country map {path.name} is missing columns: {missing}")

    zones = zones.select(["country", "zone"])
    _validate_zones(zones, path.name)
    return zones


def _validate_zones(zones: pl.DataFrame, source: str) -> None:
    errors = []

    if zones.null_count().row(0) != (0, 0):
        errors.append("empty country or zone values")

    not_normalized = (
        zones
        .filter(pl.col("country") != normalize_country_expr("country"))
        .get_column("country")
        .to_list()
    )
    if not_normalized:
        errors.append(f"country keys not trimmed/lower-cased: {not_normalized}")

    if zones.filter(normalize_country_expr("country") == "").height:
        errors.append("blank country key")

    unknown = (
        zones
        .filter(~pl.col("zone").is_in(list(ZONE_IDS)))
        .get_column("zone")
        .unique()
        .drop_nulls()
        .to_list()
    )
    if unknown:
        errors.append(f"unknown zone ids: {sorted(unknown)}")

    duplicated = (
        zones
        .filter(pl.col("country").is_duplicated())
        .get_column("country")
        .unique()
        .drop_nulls()
        .sort()
        .to_list()
    )
    if duplicated:
        errors.append(f"duplicate country keys: {duplicated}")

    if errors:
        raise ValueError(f"Country map errors in {source}:\n  " + "\n  ".join(errors))


__all__ = [
    # Reference data loaders
    "load_rate_sheet",
    "load_rates",
    "load_zones",
    "normalize_country",
    "normalize_country_expr",
    "REFERENCE_DIR",
    "ZONE_RATE_COLS",
    # Zone config
    "ZoneId",
    "ZONE_IDS",
    "ZONE_LABELS",
    "DEFAULT_PROFIT_MARKUP_PERCENT",
]
