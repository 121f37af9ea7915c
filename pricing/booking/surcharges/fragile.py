"""
Fragile Handling Fee (FRG)

Flat fee for bookings marked as containing fragile items.
"""

import polars as pl
from shared.surcharges import Surcharge


class FRG(Surcharge):
    """Fragile handling - flat fee."""

    # Identity
    name = "FRG"

    # Pricing (flat)
    tariff_field = "fragile_fee"

    @classmethod
    def conditions(cls) -> pl.Expr:
        return pl.col("fragile")
