"""
Single Booking Price

Scalar entry point for request handlers. Runs one booking through the same
pipeline as calculate_costs, so single quotes and batch runs can't drift.
"""

from typing import Any, Mapping, NamedTuple

import polars as pl

from .calculate_costs import calculate_costs
from .data import Tariff, DEFAULT_TARIFF
from .surcharges import FUEL, INS, FRG


class BookingPriceBreakdown(NamedTuple):
    """Itemized booking price. All amounts are whole currency units."""
    base_shipping: int
    fuel_surcharge: int
    insurance: int
    fragile_fee: int
    subtotal_before_vat: int
    vat: int
    grand_total: int

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "BookingPriceBreakdown":
        """Build from a calculated booking row (see calculate_costs)."""
        return cls(
            base_shipping=row["cost_base"],
            fuel_surcharge=row[FUEL.cost_col()],
            insurance=row[INS.cost_col()],
            fragile_fee=row[FRG.cost_col()],
            subtotal_before_vat=row["cost_subtotal"],
            vat=row["cost_vat"],
            grand_total=row["cost_total"],
        )


def calculate_booking_price(
    weight_kg: float,
    declared_value: float | None = 0,
    premium_insurance: bool = False,
    fragile: bool = False,
    tariff: Tariff = DEFAULT_TARIFF,
) -> BookingPriceBreakdown:
    """
    Calculate the itemized price of one booking.

    Args:
        weight_kg: Booking weight in kilograms
        declared_value: Declared goods value; None counts as 0
        premium_insurance: Charge insurance on the declared value
        fragile: Add the fragile handling fee
        tariff: Rates and fees to price with

    Returns:
        BookingPriceBreakdown with base, surcharges, subtotal, VAT and total
    """
    df = pl.DataFrame(
        {
            "weight_kg": [float(weight_kg)],
            "declared_value": [None if declared_value is None else float(declared_value)],
            "premium_insurance": [bool(premium_insurance)],
            "fragile": [bool(fragile)],
        },
        schema={
            "weight_kg": pl.Float64,
            "declared_value": pl.Float64,
            "premium_insurance": pl.Boolean,
            "fragile": pl.Boolean,
        },
    )
    result = calculate_costs(df, tariff)
    return BookingPriceBreakdown.from_row(result.row(0, named=True))


__all__ = [
    "BookingPriceBreakdown",
    "calculate_booking_price",
]
