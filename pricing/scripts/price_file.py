"""
Price a CSV File
================

Run a CSV of shipments or bookings through a calculator and write the
priced result.

Usage:
    python -m pricing.scripts.price_file zones shipments.csv --output priced.csv
    python -m pricing.scripts.price_file zones shipments.csv --markup 25
    python -m pricing.scripts.price_file booking bookings.csv
"""

import argparse
from pathlib import Path

import polars as pl

from pricing.zones import calculate_costs as calculate_zone_costs
from pricing.booking import calculate_costs as calculate_booking_costs


def price_zones(df: pl.DataFrame, markup: float | None = None) -> pl.DataFrame:
    """Price shipments by zone; --markup fills rows without their own markup."""
    if markup is not None:
        if "markup_percent" in df.columns:
            df = df.with_columns(
                pl.col("markup_percent").cast(pl.Float64).fill_null(markup)
            )
        else:
            df = df.with_columns(pl.lit(markup, dtype=pl.Float64).alias("markup_percent"))
    return calculate_zone_costs(df)


def print_summary(calculator: str, df: pl.DataFrame) -> None:
    """Print a short summary of the priced file."""
    print("\n" + "=" * 50)
    print(f"PRICED {len(df)} ROW(S) - {calculator.upper()}")
    print("=" * 50)

    if calculator == "zones":
        uncovered = df.filter(~pl.col("zone_covered"))
        print(f"Covered destinations:   {len(df) - len(uncovered)}")
        print(f"Unsupported:            {len(uncovered)}")
        if len(uncovered):
            countries = uncovered.get_column("destination_country").unique().sort().to_list()
            print(f"  {', '.join(str(c) for c in countries)}")
        print(f"Total carrier cost:     {df.get_column('cost_carrier').sum():,}")
        print(f"Total sell price:       {df.get_column('price_sell').sum():,}")
    else:
        print(f"Total before VAT:       {df.get_column('cost_subtotal').sum():,}")
        print(f"Total VAT:              {df.get_column('cost_vat').sum():,}")
        print(f"Grand total:            {df.get_column('cost_total').sum():,}")
    print()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Price a CSV of shipments (zones) or bookings (booking)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Calculators:
  zones     Needs destination_country, weight_kg (optional markup_percent)
  booking   Needs weight_kg (optional declared_value, premium_insurance, fragile)

Examples:
  python -m pricing.scripts.price_file zones shipments.csv --output priced.csv
  python -m pricing.scripts.price_file booking bookings.csv
        """
    )
    parser.add_argument("calculator", choices=["zones", "booking"])
    parser.add_argument("input", type=Path, help="Input CSV file")
    parser.add_argument("--output", type=Path, help="Write priced CSV here (default: print)")
    parser.add_argument(
        "--markup",
        type=float,
        help="Markup %% for rows without markup_percent (zones only)",
    )
    args = parser.parse_args(argv)

    if not args.input.exists():
        parser.error(f"input file not found: {args.input}")
    if args.markup is not None and args.calculator != "zones":
        parser.error("--markup only applies to the zones calculator")

    df = pl.read_csv(args.input)
    print(f"Loaded {len(df)} row(s) from {args.input}")

    if args.calculator == "zones":
        result = price_zones(df, args.markup)
    else:
        result = calculate_booking_costs(df)

    if args.output:
        result.write_csv(args.output)
        print(f"Priced output saved to: {args.output}")
    else:
        with pl.Config(tbl_cols=-1, tbl_rows=50, tbl_width_chars=1000):
            print(result)

    print_summary(args.calculator, result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
