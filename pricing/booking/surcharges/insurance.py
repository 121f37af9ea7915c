"""
Premium Insurance (INS)

Percentage of the declared value. Applies only when the customer opts in to
premium insurance AND declares a positive value.
"""

import polars as pl
from shared.surcharges import Surcharge


class INS(Surcharge):
    """Premium insurance - percentage of declared value."""

    # Identity
    name = "INS"

    # Pricing (percentage of declared_value)
    tariff_field = "insurance_rate"
    basis = "declared_value"

    @classmethod
    def conditions(cls) -> pl.Expr:
        return (
            pl.col("premium_insurance") &
            (pl.col("declared_value") > 0)
        )
